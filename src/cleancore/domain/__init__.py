"""Domain layer: status codes, field specs, errors, and the response model.

This layer depends only on stdlib and pydantic.
It must never import from services, output, or config.
"""
