"""Domain layer — memberships, people, pricing rules and errors.

This layer depends only on stdlib and pydantic.
It must never import from services, plugins, commands, or config.
"""
