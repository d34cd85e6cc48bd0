# Media Gallery Test Suite
"""
Test suite for the media gallery backend.

Unit tests exercise the service and provider in isolation; integration
tests go through the HTTP API with a fake media provider.
"""
