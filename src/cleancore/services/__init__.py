"""Service layer: validation, requests, and use cases.

Services may import from domain and config models.
They must never import from output.
"""
