"""
Shared test fixtures and configuration.
"""

from pathlib import Path

import pytest

from gitops_manifest.core.models import (
    Application,
    Environment,
    Manifest,
    Service,
)


@pytest.fixture
def fixtures_dir() -> Path:
    """Return the test fixtures directory."""
    return Path(__file__).parent / "fixtures"


@pytest.fixture
def manifest_file(fixtures_dir: Path) -> Path:
    """Return the path to a valid pipelines.yaml."""
    return fixtures_dir / "pipelines.yaml"


@pytest.fixture
def valid_manifest() -> Manifest:
    """A small manifest with no problems."""
    return Manifest(
        environments=[
            Environment(
                name="dev",
                services=[Service(name="svc1", source_url="https://github.com/org/svc1.git")],
                apps=[Application(name="app1", services=["svc1"])],
            ),
        ],
    )
