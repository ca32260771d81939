"""Services Layer — imperative shell around the pure core.

Invariants:
    - Services perform the store reads; core/ decides what to read and what it means
    - Repositories receive their AsyncSession through the constructor

Design Decisions:
    - One module per operation, plus one module for the SQL repositories
"""
