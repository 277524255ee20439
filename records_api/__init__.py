"""Raushan Apps Record API — REST backend for contacts, blog posts, gallery items and admins.

Invariants:
    - Package root contains no executable code (import side-effects prohibited)
"""
