"""Profile API Package — hypermedia resource tree over versioned configuration profiles.

Invariants:
    - Package root contains no executable code (import side-effects prohibited)

Design Decisions:
    - Empty __init__.py: explicit imports only, no star exports
"""
