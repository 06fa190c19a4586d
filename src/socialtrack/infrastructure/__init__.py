"""Infrastructure layer — reading graph descriptions from disk.

This layer depends on stdlib and the domain types it populates.
It must never import from services, commands, or output.
"""
