"""
Unit tests for maillog
"""
