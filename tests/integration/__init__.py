# Integration Tests
"""
Integration tests verify the gallery endpoints through the HTTP API.

Principle: Test behavior, not implementation.
"""
