"""
Tests for core infrastructure.
"""
