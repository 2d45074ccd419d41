"""
Manifest paths — dotted addresses of nodes in the serialized document.

Every error about the same node must carry the same path string, so all
checks build their paths through these helpers.
"""

from __future__ import annotations

from gitops_manifest.core.models.manifest import Application, Environment


def _join(*parts: str) -> str:
    # Empty segments are dropped, so an unnamed node still gets a clean path.
    return "/".join(p for p in parts if p)


def path_for_environment(env: Environment) -> str:
    return _join("environments", env.name)


def path_for_application(env: Environment, app: Application) -> str:
    return _join("environments", env.name, "apps", app.name)


def path_for_service(env: Environment, name: str) -> str:
    return _join("environments", env.name, "services", name)


def path_for_config(name: str) -> str:
    return f"config.{name}"


def yaml_path(path: str) -> str:
    """Convert a slash-separated path into the document's dotted form."""
    return path.replace("/", ".")


def yaml_join(base: str, *segments: str) -> str:
    """Append field segments to a dotted path."""
    for segment in segments:
        base = f"{base}.{segment}"
    return base
