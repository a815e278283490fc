"""Domain layer: containers, records, and pure rules.

This layer depends only on stdlib and pydantic.
It must never import from services, config, commands, or output.
"""
