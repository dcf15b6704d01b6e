"""Domain Types — rich types that replace bare primitives across the codebase.

Invariants:
    - VersionId, ProfileId, ContainerId wrap str: identities are opaque strings
    - Relation enumerates every child link a profile resource declares
    - All valid relations encoded as Enums: no raw string matching in resources

Design Decisions:
    - NewType over dataclass wrappers: zero runtime cost, full type-checker support
    - str Enums: serialize to JSON keys without custom encoders
"""

from enum import Enum
from typing import NewType


# ─── Identity Types ──────────────────────────────────────────────

VersionId = NewType("VersionId", str)
ProfileId = NewType("ProfileId", str)
ContainerId = NewType("ContainerId", str)


# ─── Path Segments ───────────────────────────────────────────────

OVERLAY_SEGMENT = "overlay"
PROFILE_SEGMENT_PREFIX = "profile/"
VERSION_SEGMENT_PREFIX = "version/"
CONTAINER_SEGMENT_PREFIX = "container/"
FILE_SEGMENT = "file"


# ─── Enums ───────────────────────────────────────────────────────

class Relation(str, Enum):
    """Link relations exposed by a profile resource."""
    CONTAINERS = "containers"
    OVERLAY = "overlay"
    REQUIREMENTS = "requirements"
    FILE_NAMES = "fileNames"
