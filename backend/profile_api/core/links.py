"""Link Resolution — builds hypermedia links from a base address.

Invariants:
    - resolve_link joins with exactly one "/" between base and relation
    - No check that the relation is actually served (links may dangle)
    - map_to_links keys are unique; duplicate identifiers collapse
"""

from collections.abc import Iterable


def resolve_link(base_address: str, relation: str) -> str:
    """Join base_address and relation with a single separator."""
    return f"{base_address.rstrip('/')}/{relation.lstrip('/')}"


def map_to_links(identifiers: Iterable[str], address_prefix: str) -> dict[str, str]:
    """Map each identifier to address_prefix + identifier."""
    return {identifier: address_prefix + identifier for identifier in identifiers}
