"""
Integration tests for apifilter.
"""
