"""Pydantic Schemas: persisted entity shapes and request bodies.

Invariants:
    - Entities serialize with camelCase keys (the on-disk and wire format)
    - Request bodies are lenient; field rules are enforced by the handlers so
      the check order (presence, format, references, uniqueness) is preserved
"""
