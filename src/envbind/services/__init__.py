"""Service layer: the binding pass and its result contract."""
