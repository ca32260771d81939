"""Infrastructure Layer — database session management and observability.

Invariants:
    - Infrastructure never imports from core/ domain logic, except the error types it maps to
    - All store failures mapped to DatabaseError before leaving this layer
"""
