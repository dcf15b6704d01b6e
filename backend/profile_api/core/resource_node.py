"""Resource Node — addressable point in the hypermedia resource tree.

Invariants:
    - A node without a parent is the root; its segment is the service base address
    - address() = root segment + every descendant segment, joined by a single "/"
    - base_address(levels) returns "" when the chain is shorter: never raises
    - Parents never hold references to children (child → parent edge only)
    - The directory collaborator lives on the root and is looked up, never copied

Design Decisions:
    - Addresses recomputed on every call: nodes are request-scoped and cheap
      (ADR: no cached links that could outlive the request base URL)
    - directory may be None: read paths degrade instead of aborting
"""

from collections.abc import Iterable

from profile_api.core.links import map_to_links, resolve_link
from profile_api.core.repository_protocols import ProfileDirectory


class ResourceNode:
    """Base class for every resource in the tree."""

    def __init__(
        self,
        path_segment: str,
        parent: "ResourceNode | None" = None,
        directory: ProfileDirectory | None = None,
    ):
        self.path_segment = path_segment
        self.parent = parent
        self._directory = directory

    def root(self) -> "ResourceNode":
        node = self
        while node.parent is not None:
            node = node.parent
        return node

    @property
    def directory(self) -> ProfileDirectory | None:
        return self.root()._directory

    def address(self) -> str:
        if self.parent is None:
            return self.path_segment
        return resolve_link(self.parent.address(), self.path_segment)

    def base_address(self, levels: int) -> str:
        """Address of the ancestor `levels` steps up, or "" past the root."""
        node: ResourceNode | None = self
        for _ in range(levels):
            if node is None:
                break
            node = node.parent
        return node.address() if node is not None else ""

    def link(self, relation: str) -> str:
        return resolve_link(self.address(), relation)

    def map_to_links(self, identifiers: Iterable[str], relative_prefix: str) -> dict[str, str]:
        """Links for identifiers under `{address}/{relative_prefix}`."""
        return map_to_links(identifiers, self.link(relative_prefix))

    def __repr__(self) -> str:
        return f"{type(self).__name__}(address={self.address()!r})"
