"""Link Resolution — separator normalization and identifier → link mapping."""

from profile_api.core.links import map_to_links, resolve_link


def test_resolve_link_inserts_single_separator():
    """Base and relation are joined with exactly one '/'."""
    assert resolve_link("http://h/api", "containers") == "http://h/api/containers"


def test_resolve_link_normalizes_duplicate_separators():
    """Slashes on both sides collapse to one."""
    assert resolve_link("http://h/api/", "/overlay") == "http://h/api/overlay"


def test_resolve_link_keeps_trailing_slash_of_relation():
    """A trailing '/' on the relation survives (prefix links)."""
    assert resolve_link("http://h/api", "file/") == "http://h/api/file/"


def test_resolve_link_on_empty_base_is_relative_to_root():
    """An empty base gives a root-relative link."""
    assert resolve_link("", "container/") == "/container/"


def test_map_to_links_empty_input():
    """No identifiers, no links."""
    assert map_to_links([], "/x/") == {}
    assert map_to_links(set(), "anything") == {}


def test_map_to_links_prefixes_every_identifier():
    assert map_to_links({"a", "b"}, "/x/") == {"a": "/x/a", "b": "/x/b"}


def test_map_to_links_collapses_duplicates():
    """Repeated identifiers produce one entry."""
    assert map_to_links(["a", "a", "b"], "/x/") == {"a": "/x/a", "b": "/x/b"}
