"""
Kinds component tests.
"""
