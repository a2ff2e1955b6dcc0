"""
Formats component tests.
"""
