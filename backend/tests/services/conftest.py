"""Service test fixtures — resource chains over the in-memory directory.

Invariants:
    - Every test gets a fresh FakeProfileDirectory
    - Resource chain mirrors production: root → version/1.0 → profile/{id}
"""

import pytest

from profile_api.core.profile_model import Container, Profile
from profile_api.core.requirements import FabricRequirements
from profile_api.services.fabric_resource import FabricResource, VersionResource
from profile_api.services.profile_resource import ProfileResource
from tests.services.fake_directory import BASE, FakeProfileDirectory


@pytest.fixture
def profiles():
    return [
        Profile(
            "1.0", "default",
            attributes={"abstract": "true"},
            file_configurations={
                "io.fabric8.agent.properties": b"repo=central\nlevel=info\n",
            },
        ),
        Profile(
            "1.0", "web",
            parents=("default",),
            file_configurations={
                "io.fabric8.agent.properties": b"level=debug\n",
                "web/index.html": b"<html/>",
                "logo.png": b"\x89PNG",
            },
        ),
        Profile("1.1", "web"),
    ]


@pytest.fixture
def directory(profiles):
    return FakeProfileDirectory(
        profiles=profiles,
        containers=[
            Container("root", "1.0", ("default",)),
            Container("web1", "1.0", ("web",)),
            Container("web2", "1.1", ("web",)),
            Container("web3", "1.0", ("default", "web")),
        ],
        requirements=FabricRequirements(),
    )


@pytest.fixture
def root(directory):
    return FabricResource(BASE, directory)


@pytest.fixture
async def web(root):
    version = await root.version("1.0")
    return await version.profile("web")


@pytest.fixture
def detached_web(profiles):
    """Profile resource whose tree has no directory configured."""
    version = VersionResource(FabricResource(BASE, None), "1.0")
    return ProfileResource(version, profiles[1])
