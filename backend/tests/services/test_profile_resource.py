"""Profile Resource — every operation against the in-memory directory.

Tests cover:
    - Segment rule and addresses for source and overlay resources
    - details() link set, overlay link only on source resources
    - overlay() recomputed per call, None on overlays and without a directory
    - containers() exact (id, version) filtering and grandparent-based links
    - requirements read creates a default record; write touches only its profile
    - file_names() / file() including NotFound message and media types
    - delete() forces the directory call, 503 without a directory
"""

import pytest

from profile_api.core.errors import (
    BadInputError, ProfileFileNotFoundError, ServiceUnavailableError,
)
from profile_api.core.profile_model import Profile
from profile_api.core.requirements import ProfileRequirements
from profile_api.core.resource_node import ResourceNode
from profile_api.services.fabric_resource import FabricResource, VersionResource
from profile_api.services.profile_resource import ProfileResource
from tests.services.fake_directory import BASE

WEB = f"{BASE}/version/1.0/profile/web"


# ─── Addressing ─────────────────────────────────────────────────

async def test_source_resource_segment_and_address(web):
    """A source profile sits at .../profile/{id}."""
    assert web.path_segment == "profile/web"
    assert web.address() == WEB


async def test_overlay_resource_is_bound_under_source(web):
    """The overlay is a child of its source, addressed .../overlay."""
    overlay = await web.overlay()
    assert overlay.path_segment == "overlay"
    assert overlay.parent is web
    assert overlay.address() == f"{WEB}/overlay"


# ─── details ────────────────────────────────────────────────────

async def test_details_links_for_source(web):
    """Source details carry all four relation links."""
    detail = web.details()
    assert detail.id == "web"
    assert detail.version == "1.0"
    assert detail.parents == ["default"]
    assert detail.is_overlay is False
    assert detail.links == {
        "containers": f"{WEB}/containers",
        "overlay": f"{WEB}/overlay",
        "requirements": f"{WEB}/requirements",
        "fileNames": f"{WEB}/fileNames",
    }


async def test_details_of_overlay_has_no_overlay_link(web):
    """Overlay details omit the overlay link; other links nest under /overlay."""
    overlay = await web.overlay()
    detail = overlay.details()
    assert detail.is_overlay is True
    assert "overlay" not in detail.links
    assert detail.links["containers"] == f"{WEB}/overlay/containers"
    assert detail.links["fileNames"] == f"{WEB}/overlay/fileNames"


async def test_every_source_profile_links_an_overlay(root, directory):
    """Every stored profile offers an overlay link."""
    for version_id in await directory.get_versions():
        version = await root.version(version_id)
        for profile in await directory.get_profiles(version_id):
            resource = await version.profile(profile.id)
            assert "overlay" in resource.details().links


# ─── overlay ────────────────────────────────────────────────────

async def test_overlay_merges_parent_content(web):
    """Overlay folds parent properties and attributes into the child."""
    overlay = await web.overlay()
    assert overlay.profile.is_overlay is True
    assert overlay.profile.file_configuration("io.fabric8.agent.properties") == (
        b"repo=central\nlevel=debug\n"
    )
    assert dict(overlay.profile.attributes) == {"abstract": "true"}


async def test_overlay_of_overlay_is_none(web, directory):
    """An overlay has no overlay, and asking does not touch the directory."""
    overlay = await web.overlay()
    calls = len(directory.calls)
    assert await overlay.overlay() is None
    assert len(directory.calls) == calls


async def test_overlay_recomputed_on_every_call(web, directory):
    """Each overlay() call derives a fresh overlay from the directory."""
    first = await web.overlay()
    second = await web.overlay()
    assert first is not second
    assert directory.calls.count(("get_overlay_profile", "web")) == 2


async def test_overlay_without_directory_is_none(detached_web):
    assert await detached_web.overlay() is None


# ─── containers ─────────────────────────────────────────────────

async def test_containers_match_profile_and_version_exactly(web):
    """Only 1.0 containers assigned "web" are linked, under the API root."""
    links = await web.containers()
    assert links == {
        "web1": f"{BASE}/container/web1",
        "web3": f"{BASE}/container/web3",
    }


async def test_containers_of_other_version(root):
    """The same profile id on 1.1 links only its own containers."""
    version = await root.version("1.1")
    resource = await version.profile("web")
    assert await resource.containers() == {"web2": f"{BASE}/container/web2"}


async def test_containers_without_directory_is_empty(detached_web, caplog):
    """A missing directory yields {} and logs a warning."""
    assert await detached_web.containers() == {}
    assert "No profile directory" in caplog.text


async def test_containers_on_short_chain_use_relative_links(directory, profiles):
    """Too short a chain degrades to root-relative container links."""
    orphan = ProfileResource(ResourceNode("", directory=directory), profiles[1])
    assert await orphan.containers() == {
        "web1": "/container/web1", "web3": "/container/web3",
    }


# ─── requirements ───────────────────────────────────────────────

async def test_requirements_read_creates_default_record(web, directory):
    """First read creates and persists an empty record."""
    record = await web.requirements()
    assert record == ProfileRequirements(profile="web")
    assert directory.requirements.find_profile_requirements("web") == record
    assert ("set_requirements",) in directory.calls


async def test_requirements_read_existing_record_does_not_write(web, directory):
    """Reading an existing record writes nothing back."""
    directory.requirements.add_or_update_profile_requirements(
        ProfileRequirements(profile="web", minimum_instances=2),
    )
    record = await web.requirements()
    assert record.minimum_instances == 2
    assert ("set_requirements",) not in directory.calls


async def test_requirements_read_without_container_is_none(web, directory):
    """No requirements document means None."""
    directory.requirements = None
    assert await web.requirements() is None


async def test_requirements_read_without_directory_is_none(detached_web):
    assert await detached_web.requirements() is None


async def test_requirements_write_then_read(web, root, directory):
    """A write is visible on the next read and leaves other profiles untouched."""
    await web.set_requirements(ProfileRequirements(
        profile="web", minimum_instances=1, maximum_instances=4,
        dependent_profiles=["default"],
    ))
    record = await web.requirements()
    assert record.minimum_instances == 1
    assert record.maximum_instances == 4
    assert record.dependent_profiles == ["default"]

    other = await (await root.version("1.0")).profile("default")
    assert await other.requirements() == ProfileRequirements(profile="default")


async def test_requirements_write_replaces_whole_record(web, directory):
    """A second write replaces the record rather than patching it."""
    await web.set_requirements(ProfileRequirements(profile="web", minimum_instances=1))
    await web.set_requirements(ProfileRequirements(profile="web", maximum_instances=9))
    record = directory.requirements.find_profile_requirements("web")
    assert record.minimum_instances is None
    assert record.maximum_instances == 9


async def test_requirements_write_without_container_is_noop(web, directory):
    """Writing with no requirements document is a silent no-op."""
    directory.requirements = None
    await web.set_requirements(ProfileRequirements(profile="web"))
    assert directory.requirements is None
    assert ("set_requirements",) not in directory.calls


async def test_requirements_write_for_other_profile_is_bad_input(web):
    """A record naming another profile is rejected with 400."""
    with pytest.raises(BadInputError) as exc:
        await web.set_requirements(ProfileRequirements(profile="default"))
    assert exc.value.http_status == 400
    assert exc.value.field == "profile"


async def test_requirements_write_without_directory_raises(detached_web):
    """Writes need the directory: 503 without it."""
    with pytest.raises(ServiceUnavailableError):
        await detached_web.set_requirements(ProfileRequirements(profile="web"))


# ─── files ──────────────────────────────────────────────────────

async def test_file_names_link_under_file_segment(web):
    """File links live under .../file/, nested names included."""
    assert web.file_names() == {
        "io.fabric8.agent.properties": f"{WEB}/file/io.fabric8.agent.properties",
        "logo.png": f"{WEB}/file/logo.png",
        "web/index.html": f"{WEB}/file/web/index.html",
    }


async def test_file_names_empty_profile(root):
    resource = await (await root.version("1.1")).profile("web")
    assert resource.file_names() == {}


def test_file_names_percent_encode_unsafe_characters(directory):
    """Spaces, '?' and '#' are escaped in links; '/' is kept."""
    profile = Profile("1.0", "docs", file_configurations={"my notes?#1.txt": b"n", "a/b c.xml": b"x"})
    resource = ProfileResource(VersionResource(FabricResource(BASE, directory), "1.0"), profile)
    base = f"{BASE}/version/1.0/profile/docs/file"
    assert resource.file_names() == {
        "a/b c.xml": f"{base}/a/b%20c.xml",
        "my notes?#1.txt": f"{base}/my%20notes%3F%231.txt",
    }


async def test_file_returns_bytes_and_media_type(web):
    """file() returns raw bytes with the suffix-derived media type."""
    assert web.file("logo.png") == (b"\x89PNG", "image/png")
    assert web.file("web/index.html") == (b"<html/>", "application/html")
    assert web.file("io.fabric8.agent.properties")[1] == "text/x-java-properties"


async def test_missing_file_raises_not_found_with_context(web):
    """Unknown files raise 404 naming file, profile and version."""
    with pytest.raises(ProfileFileNotFoundError) as exc:
        web.file("missing.txt")
    message = exc.value.message
    assert "missing.txt" in message
    assert "web" in message
    assert "1.0" in message
    assert exc.value.http_status == 404


async def test_overlay_file_includes_inherited_files(root, directory):
    """Overlay exposes files inherited from parents."""
    directory.profiles[("1.0", "default")] = Profile(
        "1.0", "default", file_configurations={"base.xml": b"<base/>"},
    )
    web = await (await root.version("1.0")).profile("web")
    overlay = await web.overlay()
    assert overlay.file("base.xml") == (b"<base/>", "application/xml")


# ─── delete ─────────────────────────────────────────────────────

async def test_delete_forces_directory_delete(web, directory):
    """delete() always asks the directory for a forced delete."""
    await web.delete()
    assert ("delete_profile", "1.0", "web", True) in directory.calls
    assert ("1.0", "web") not in directory.profiles


async def test_delete_without_directory_raises(detached_web):
    """delete() needs the directory: 503 without it."""
    with pytest.raises(ServiceUnavailableError) as exc:
        await detached_web.delete()
    assert exc.value.http_status == 503
