"""Infrastructure Layer — database lifecycle, record storage and logging.

Invariants:
    - Storage failures leave this layer only as OperationError (core/errors.py)
    - Infrastructure never imports from api/
"""
