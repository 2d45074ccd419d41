"""
Manifest check use case — load pipelines.yaml and report every problem.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from pathlib import Path

from gitops_manifest.core.config.loader import ConfigError, find_manifest_file, load_manifest
from gitops_manifest.core.models.manifest import Manifest
from gitops_manifest.core.services.manifest_validate import validate_manifest


@dataclass
class ManifestCheckResult:
    """Result of manifest validation."""

    valid: bool = False
    manifest: Manifest | None = None
    manifest_path: Path | None = None
    errors: list[str] = field(default_factory=list)
    issues: list[dict] = field(default_factory=list)

    def to_dict(self) -> dict:
        envs = self.manifest.environments if self.manifest else []
        return {
            "valid": self.valid,
            "manifest_path": str(self.manifest_path) if self.manifest_path else None,
            "errors": self.errors,
            "issues": self.issues,
            "environment_count": len(envs),
            "application_count": sum(len(e.apps) for e in envs),
            "service_count": sum(len(e.services) for e in envs),
        }


def check_manifest(manifest_path: Path | None = None) -> ManifestCheckResult:
    """Load and validate a manifest.

    Args:
        manifest_path: Optional explicit path to pipelines.yaml.

    Returns:
        ManifestCheckResult with validation status and any issues.
    """
    result = ManifestCheckResult()

    if manifest_path is None:
        manifest_path = find_manifest_file()
    if manifest_path is None:
        result.errors.append("No pipelines.yaml found.")
        return result
    result.manifest_path = manifest_path

    try:
        manifest = load_manifest(manifest_path)
    except ConfigError as e:
        result.errors.append(str(e))
        return result
    result.manifest = manifest

    err = validate_manifest(manifest)
    if err is not None:
        result.errors = [str(e) for e in err.errors]
        result.issues = err.to_list()

    result.valid = len(result.errors) == 0
    return result
