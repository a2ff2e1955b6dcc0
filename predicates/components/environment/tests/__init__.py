"""
Environment component tests.
"""
