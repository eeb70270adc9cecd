"""Domain layer: field types, conversion, tags, and record introspection.

Domain modules import only from each other and ``envbind.config.models``.
"""
