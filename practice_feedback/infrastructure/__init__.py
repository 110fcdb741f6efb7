"""Infrastructure Layer: file storage, external service clients, logging.

Invariants:
    - Infrastructure never imports from services/ or api/
    - All external failures mapped to errors from core/errors.py
"""
