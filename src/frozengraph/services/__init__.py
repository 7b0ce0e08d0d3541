"""Service layer: graph snapshots driven through ServiceResult.

Services may import from domain and infrastructure layers.
They must never import from commands or output.
"""
