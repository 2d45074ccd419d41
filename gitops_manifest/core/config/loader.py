"""
Manifest loader — reads pipelines.yaml into domain models.

This is the primary entry point for loading a GitOps manifest.
It reads YAML, builds the Pydantic models, and returns a typed
``Manifest``. Semantic checks (names, references, duplicates) are
left to the validation service.
"""

from __future__ import annotations

import logging
from pathlib import Path

import yaml
from pydantic import ValidationError

from gitops_manifest.core.models.manifest import Manifest

logger = logging.getLogger(__name__)

# Default manifest filename
MANIFEST_FILE = "pipelines.yaml"


class ConfigError(Exception):
    """Raised when the manifest file is missing or cannot be parsed."""


def find_manifest_file(start_dir: Path | None = None) -> Path | None:
    """Search for pipelines.yaml starting from the given directory, walking up.

    Args:
        start_dir: Directory to start searching from (default: cwd).

    Returns:
        Path to pipelines.yaml, or None if not found.
    """
    current = (start_dir or Path.cwd()).resolve()

    for _ in range(20):  # safety limit
        candidate = current / MANIFEST_FILE
        if candidate.is_file():
            return candidate
        parent = current.parent
        if parent == current:
            break  # filesystem root
        current = parent

    return None


def load_manifest(path: Path | None = None) -> Manifest:
    """Load a manifest file.

    Args:
        path: Explicit path to pipelines.yaml. If None, searches upward.

    Returns:
        Parsed Manifest model (not yet validated semantically).

    Raises:
        ConfigError: If the file is missing, unreadable or malformed.
    """
    if path is None:
        path = find_manifest_file()

    if path is None:
        raise ConfigError(f"No {MANIFEST_FILE} found. Specify one with --config.")

    if not path.is_file():
        raise ConfigError(f"Manifest file not found: {path}")

    logger.debug("Loading manifest from %s", path)

    try:
        raw = path.read_text(encoding="utf-8")
    except (OSError, UnicodeDecodeError) as e:
        raise ConfigError(f"Cannot read {path}: {e}") from e

    try:
        data = yaml.safe_load(raw)
    except yaml.YAMLError as e:
        raise ConfigError(f"Invalid YAML in {path}: {e}") from e

    if data is None:
        data = {}
    if not isinstance(data, dict):
        raise ConfigError(f"Expected a YAML mapping in {path}, got {type(data).__name__}")

    try:
        manifest = Manifest.model_validate(data)
    except ValidationError as e:
        raise ConfigError(f"Invalid manifest: {e}") from e

    logger.info(
        "Loaded manifest with %d environment(s) from %s",
        len(manifest.environments),
        path,
    )
    return manifest
