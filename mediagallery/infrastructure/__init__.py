# Infrastructure layer - external service clients
"""
Infrastructure layer contains:
- Media provider adapters

This layer depends on the application models, not vice versa.
"""
