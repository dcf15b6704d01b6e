"""Services Layer — the resource tree nodes that run profile operations.

Invariants:
    - Resources are built per request and discarded after the response
    - All IO goes through the ProfileDirectory found at the tree root

Design Decisions:
    - Resources subclass core ResourceNode: addressing stays pure, operations do IO
"""
