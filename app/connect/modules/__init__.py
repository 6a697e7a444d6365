"""
Feature modules live under this package.

Each module owns its record types (models.py), its store and payload
validation (service.py) and its JSON routes (admin.py), while reusing the
shared primitives (store base, registry, audit, storage).
"""
