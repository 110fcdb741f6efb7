"""Services Layer: domain accessors, question catalog, request handlers, summaries.

Invariants:
    - Handlers split by entity (one file per resource)
    - Handlers raise ClubError subclasses; they never build HTTP responses
"""
