"""Core Layer — error hierarchy, domain types and password hashing. No IO, no async, no DB.

Invariants:
    - No module in core/ imports from api/, infrastructure/, models/ or db/
"""
