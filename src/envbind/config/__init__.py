"""Binder options, ``ENVBIND_*`` settings, and logging setup."""
