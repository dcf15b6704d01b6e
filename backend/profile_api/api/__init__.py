"""API Layer — FastAPI routes, request dependencies and error handlers.

Invariants:
    - Routes registered explicitly in main.py (no auto-discovery)
    - Structured endpoints return JSON; file endpoints return raw bytes

Design Decisions:
    - Thin routes delegate to resources in services/ (ADR: impureim sandwich)
"""
