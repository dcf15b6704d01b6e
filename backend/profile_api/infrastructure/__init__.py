"""Infrastructure Layer — database access, the profile directory and cross-cutting concerns.

Invariants:
    - Infrastructure implements core protocols; core never imports infrastructure
    - All SQLAlchemy failures mapped to DatabaseError

Design Decisions:
    - One module per concern: database.py (sessions), profile_directory.py
      (ProfileDirectory over SQLAlchemy), observability.py (logging)
"""
