"""Domain layer: the graph value, ID helpers, and sample data.

This layer depends only on the standard library.
It must never import from services, infrastructure, commands, or config.
"""
