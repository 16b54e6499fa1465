"""Domain layer — schema nodes, matchers, coercion, and conversion errors.

This layer depends only on stdlib.
It must never import from services, config, output, or commands.
"""
