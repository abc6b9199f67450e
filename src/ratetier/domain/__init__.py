"""Domain layer: rate bands and the resolver.

This layer depends only on stdlib and pydantic.
It must never import from services, commands, output, or config.
"""
