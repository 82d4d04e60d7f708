"""Application layer - CQRS commands, queries and their handlers.

Handlers orchestrate domain entities and ports; they never import from
infrastructure or presentation.
"""
