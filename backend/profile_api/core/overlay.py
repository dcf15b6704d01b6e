"""Overlay Derivation — computes the effective profile from its parent chain.

Invariants:
    - Pure: never cached or memoized, every call recomputes from the lookup
    - Ancestors applied depth-first in declared parent order, the profile itself last
    - Later layers override earlier ones file by file; .properties files merge key by key
    - Parent cycles and unknown parents are skipped, never raised
    - Derived profile keeps (version, id) and is flagged is_overlay=True

Design Decisions:
    - lookup callable instead of a repository: the storage layer resolves parents,
      this module only folds them (ADR: functional core)
    - Properties parsed leniently (key=value / key: value / # comments): overlays must
      not fail on a hand-edited file
    - Properties read and written as ISO-8859-1 (the Java properties default): bytes
      outside ASCII pass through a merge unchanged
"""

import re
from collections.abc import Callable, Mapping

from profile_api.core.profile_model import Profile

PROPERTIES_SUFFIX = ".properties"
# ISO-8859-1 maps every byte to one code point, so parse then format is lossless
PROPERTIES_ENCODING = "latin-1"
# Only ASCII separators: str.splitlines/strip would also eat \x85 and \xa0
_LINE_BREAK = re.compile(r"\r\n|\r|\n")
_BLANKS = " \t\f"

ProfileLookup = Callable[[str], Profile | None]


def derive_overlay(profile: Profile, lookup: ProfileLookup) -> Profile:
    """Merge profile with all of its ancestors into a single overlay profile."""
    layers = linearize(profile, lookup)
    attributes: dict[str, str] = {}
    files: dict[str, bytes] = {}
    for layer in layers:
        attributes.update(layer.attributes)
        for name, content in layer.file_configurations.items():
            if name.endswith(PROPERTIES_SUFFIX) and name in files:
                files[name] = merge_properties(files[name], content)
            else:
                files[name] = content
    return profile.as_overlay(attributes, files)


def linearize(profile: Profile, lookup: ProfileLookup) -> list[Profile]:
    """Ancestors first (depth-first, declared order), profile last, no repeats."""
    ordered: list[Profile] = []
    seen: set[str] = set()

    def visit(current: Profile, path: frozenset[str]) -> None:
        for parent_id in current.parents:
            if parent_id in path or parent_id in seen:
                continue
            parent = lookup(parent_id)
            if parent is None:
                continue
            visit(parent, path | {parent_id})
        if current.id not in seen:
            seen.add(current.id)
            ordered.append(current)

    visit(profile, frozenset({profile.id}))
    return ordered


def parse_properties(content: bytes) -> dict[str, str]:
    """Parse a Java-style properties payload into an ordered dict."""
    result: dict[str, str] = {}
    pending = ""
    for raw in _LINE_BREAK.split(content.decode(PROPERTIES_ENCODING)):
        line = pending + raw.strip(_BLANKS)
        pending = ""
        if line.endswith("\\"):
            pending = line[:-1]
            continue
        if not line or line[0] in "#!":
            continue
        key, value = _split_property(line)
        result[key] = value
    if pending:
        key, value = _split_property(pending)
        result[key] = value
    return result


def _split_property(line: str) -> tuple[str, str]:
    positions = [i for i in (line.find("="), line.find(":")) if i >= 0]
    if not positions:
        return line.strip(_BLANKS), ""
    cut = min(positions)
    return line[:cut].strip(_BLANKS), line[cut + 1:].strip(_BLANKS)


def format_properties(values: Mapping[str, str]) -> bytes:
    return "".join(f"{k}={v}\n" for k, v in values.items()).encode(PROPERTIES_ENCODING)


def merge_properties(base: bytes, override: bytes) -> bytes:
    merged = parse_properties(base)
    merged.update(parse_properties(override))
    return format_properties(merged)
