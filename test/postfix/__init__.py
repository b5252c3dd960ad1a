"""
Unit tests for postfix log line parser
"""
