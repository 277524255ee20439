"""Route Modules — one file per record kind, plus health probes.

Invariants:
    - Each module defines its own APIRouter with prefix and tags
    - Routes talk to storage only through RecordStore

Design Decisions:
    - Explicit registration in main.py over auto-discovery
"""
