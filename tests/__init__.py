# File: tests/__init__.py
"""
Test suite for the sub-theme color overview.
Each test file follows standard pytest discovery naming.
"""
