"""Core Layer — pure domain logic, no IO, no async, no DB.

Invariants:
    - No module in core/ imports from services/, api/, infrastructure/, or db/
    - Token parsing, access decisions and inventory arithmetic are pure and deterministic

Design Decisions:
    - Functional core separated from imperative shell: services/ performs the
      store reads, core/ decides what to read and what the result means
"""
