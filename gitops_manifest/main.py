"""
GitOps Manifest — CLI entrypoint.

Usage:
    python -m gitops_manifest.main --help
    python -m gitops_manifest.main validate
    python -m gitops_manifest.main image-repo myproject/myapp
"""

from __future__ import annotations

import json
import os
import sys
from pathlib import Path

import click

from gitops_manifest import __version__
from gitops_manifest.core.observability.logging_config import (
    ENV_LOG_FILE,
    ENV_LOG_FILE_LEVEL,
    level_from_flags,
    setup_logging,
)
from gitops_manifest.core.services.image_repo import DEFAULT_INTERNAL_REGISTRY


@click.group()
@click.version_option(version=__version__, prog_name="gitops-manifest")
@click.option("--verbose", "-v", is_flag=True, help="Enable verbose output.")
@click.option("--quiet", "-q", is_flag=True, help="Suppress non-essential output.")
@click.option("--debug", is_flag=True, help="Enable debug logging (very verbose).")
@click.option(
    "--config",
    "-c",
    "config_path",
    type=click.Path(exists=False),
    default=None,
    help="Path to pipelines.yaml (default: auto-detect).",
)
@click.pass_context
def cli(
    ctx: click.Context,
    verbose: bool,
    quiet: bool,
    debug: bool,
    config_path: str | None,
) -> None:
    """GitOps Manifest — validate environments, applications and services."""
    ctx.ensure_object(dict)
    ctx.obj["quiet"] = quiet
    ctx.obj["config_path"] = Path(config_path) if config_path else None

    setup_logging(
        level=level_from_flags(debug=debug, verbose=verbose, quiet=quiet),
        log_file=os.environ.get(ENV_LOG_FILE),
        log_file_level=os.environ.get(ENV_LOG_FILE_LEVEL),
    )


@cli.command()
@click.option("--json-output", "--json", "as_json", is_flag=True, help="Output as JSON.")
@click.pass_context
def validate(ctx: click.Context, as_json: bool) -> None:
    """Validate pipelines.yaml and list every problem found."""
    from gitops_manifest.core.use_cases.manifest_check import check_manifest

    result = check_manifest(manifest_path=ctx.obj.get("config_path"))

    if as_json:
        click.echo(json.dumps(result.to_dict(), indent=2))
        sys.exit(0 if result.valid else 1)

    if result.valid:
        assert result.manifest is not None  # guaranteed when valid
        if not ctx.obj.get("quiet"):
            envs = result.manifest.environments
            click.secho("✅ Manifest is valid", fg="green", bold=True)
            click.echo(f"   Environments: {len(envs)}")
            click.echo(f"   Applications: {sum(len(e.apps) for e in envs)}")
            click.echo(f"   Services: {sum(len(e.services) for e in envs)}")
        return

    click.secho("❌ Manifest errors:", fg="red", bold=True)
    for err in result.errors:
        first, *rest = err.splitlines()
        click.echo(f"   • {first}")
        for line in rest:
            click.echo(f"     {line}")
    click.echo()
    sys.exit(1)


@cli.command("image-repo")
@click.argument("image_repo")
@click.option(
    "--registry-url",
    default=DEFAULT_INTERNAL_REGISTRY,
    show_default=True,
    help="Host of the internal cluster registry.",
)
@click.option("--json-output", "--json", "as_json", is_flag=True, help="Output as JSON.")
def image_repo(image_repo: str, registry_url: str, as_json: bool) -> None:
    """Check an image repository and show where images will be pushed."""
    from gitops_manifest.core.services.image_repo import ImageRepoError, validate_image_repo

    try:
        is_internal, resolved = validate_image_repo(image_repo, registry_url)
    except ImageRepoError as e:
        if as_json:
            click.echo(json.dumps({"valid": False, "error": str(e)}, indent=2))
        else:
            click.secho(f"❌ {e}", fg="red")
        sys.exit(1)

    if as_json:
        click.echo(json.dumps(
            {"valid": True, "internal": is_internal, "image_repo": resolved},
            indent=2,
        ))
        return

    where = "internal registry" if is_internal else "external registry"
    click.secho(f"✅ {resolved}", fg="green")
    click.echo(f"   ({where})")


def main() -> None:
    cli(obj={})


if __name__ == "__main__":
    main()
