"""
Manifest validation — naming, structure and cross-reference checks.

Runs in three phases over a single manifest:
  1. Global config names (before the walk)
  2. Per-node checks while walking (environments, services, applications)
  3. Deferred checks on state gathered during the walk (shared source URLs)

Every finding is collected; nothing stops at the first problem. The
result is ``None`` for a valid manifest, otherwise one
``ManifestValidationError`` listing everything.

Name registries are keyed by bare name, one per namespace (environments,
applications, services, config names). A name is a duplicate when it was
already seen in the same namespace, wherever in the document that was.
"""

from __future__ import annotations

import logging

from gitops_manifest.core.models.manifest import (
    Application,
    Environment,
    Manifest,
    Pipelines,
    Repository,
    Service,
    Webhook,
)
from gitops_manifest.core.services.manifest_errors import (
    FieldError,
    ManifestValidationError,
    config_name_conflict_error,
    duplicate_fields_error,
    duplicate_source_error,
    join_errors,
    missing_fields_error,
    missing_service_ref_error,
    multiple_one_of_error,
)
from gitops_manifest.core.services.manifest_names import validate_name
from gitops_manifest.core.services.manifest_paths import (
    path_for_application,
    path_for_config,
    path_for_environment,
    path_for_service,
    yaml_join,
    yaml_path,
)
from gitops_manifest.core.services.manifest_walk import ManifestVisitor, WalkError, walk

logger = logging.getLogger(__name__)


class ValidateVisitor(ManifestVisitor):
    """Collects validation errors while the manifest is walked.

    One instance per validation run; the registries are not reset.
    """

    def __init__(self) -> None:
        self.errors: list[FieldError | Exception] = []
        self.env_names: set[str] = set()
        self.app_names: set[str] = set()
        self.service_names: set[str] = set()
        self.config_names: set[str] = set()
        # source url -> paths of the services built from it
        self.service_urls: dict[str, list[str]] = {}

    def _add(self, err: FieldError | None) -> None:
        if err is not None:
            self.errors.append(err)

    # ── Config ──────────────────────────────────────────────────

    def validate_config(self, manifest: Manifest) -> list[FieldError]:
        """Check and register the global config names."""
        errors: list[FieldError] = []
        config = manifest.config
        if config is None:
            return errors

        names = []
        if config.argocd is not None:
            names.append(config.argocd.namespace)
        if config.pipelines is not None:
            names.append(config.pipelines.name)

        for name in names:
            err = validate_name(name, path_for_config(name))
            if err is not None:
                errors.append(err)
            self.config_names.add(name)
        return errors

    # ── Visitor callbacks ───────────────────────────────────────

    def environment(self, env: Environment) -> None:
        env_path = yaml_path(path_for_environment(env))
        if env.name in self.config_names:
            self._add(config_name_conflict_error(env.name, env_path))
        self._add(check_duplicate(env.name, env_path, self.env_names))
        self._add(validate_name(env.name, env_path))
        self.errors.extend(validate_pipelines(env.pipelines, env_path))

    def application(self, env: Environment, app: Application) -> None:
        app_path = yaml_path(path_for_application(env, app))
        self._add(check_duplicate(app.name, app_path, self.app_names))
        self._add(validate_name(app.name, app_path))

        if not app.services and app.config_repo is None:
            self._add(missing_fields_error(["services", "config_repo"], [app_path]))
        if app.services and app.config_repo is not None:
            self._add(multiple_one_of_error(
                yaml_join(app_path, "services"),
                yaml_join(app_path, "config_repo"),
            ))

        if app.config_repo is not None:
            self.errors.extend(
                validate_config_repo(app.config_repo, yaml_join(app_path, "config_repo"))
            )
        for ref in app.services:
            if ref not in self.service_names:
                self._add(missing_service_ref_error(ref, app.name, [app_path]))

    def service(self, env: Environment, svc: Service) -> None:
        svc_path = yaml_path(path_for_service(env, svc.name))
        if svc.source_url:
            self.service_urls.setdefault(svc.source_url, []).append(svc_path)
        self._add(check_duplicate(svc.name, svc_path, self.service_names))
        self._add(validate_name(svc.name, svc_path))
        self.errors.extend(validate_webhook(svc.webhook, svc_path))
        self.errors.extend(validate_pipelines(svc.pipelines, svc_path))
        # Registered even when invalid, so references to it still resolve.
        self.service_names.add(svc.name)

    # ── Deferred ────────────────────────────────────────────────

    def validate_service_urls(self) -> list[FieldError]:
        """Report each source URL shared by more than one service."""
        return [
            duplicate_source_error(url, paths)
            for url, paths in self.service_urls.items()
            if len(paths) > 1
        ]


def validate_manifest(manifest: Manifest) -> ManifestValidationError | None:
    """Validate a manifest, reporting every problem at once.

    Returns:
        None if the manifest is valid, otherwise a single
        ``ManifestValidationError`` whose ``errors`` hold each finding in
        config, walk, deferred order.
    """
    vv = ValidateVisitor()
    vv.errors.extend(vv.validate_config(manifest))
    try:
        walk(manifest, vv)
    except WalkError as e:
        logger.debug("Manifest walk aborted: %s", e)
        vv.errors.append(e)
    vv.errors.extend(vv.validate_service_urls())

    logger.debug(
        "Validated manifest: %d environment(s), %d error(s)",
        len(manifest.environments),
        len(vv.errors),
    )
    return join_errors(vv.errors)


def check_duplicate(name: str, path: str, seen: set[str]) -> FieldError | None:
    """Register ``name`` in ``seen``, or report it at ``path`` if already there."""
    if name in seen:
        return duplicate_fields_error([name], [path])
    seen.add(name)
    return None


def validate_config_repo(repo: Repository, path: str) -> list[FieldError]:
    missing = []
    if not repo.url:
        missing.append("url")
    if not repo.path:
        missing.append("path")
    if missing:
        return [missing_fields_error(missing, [path])]
    return []


def validate_webhook(hook: Webhook | None, path: str) -> list[FieldError]:
    """A webhook, when present, needs a secret with a valid name and namespace."""
    if hook is None:
        return []
    if hook.secret is None:
        return [missing_fields_error(["secret"], [yaml_join(path, "webhook")])]
    errors = []
    for err in (
        validate_name(hook.secret.name, yaml_join(path, "webhook", "secret", "name")),
        validate_name(hook.secret.namespace, yaml_join(path, "webhook", "secret", "namespace")),
    ):
        if err is not None:
            errors.append(err)
    return errors


def validate_pipelines(pipelines: Pipelines | None, path: str) -> list[FieldError]:
    """Check a pipelines block on an environment or service.

    A block without ``integration`` yields a single missing-field error;
    otherwise each binding name is checked on its own.
    """
    if pipelines is None:
        return []
    if pipelines.integration is None:
        return [missing_fields_error(["integration"], [yaml_join(path, "pipelines")])]
    errors = []
    binding_path = yaml_join(path, "pipelines", "integration", "binding")
    for name in pipelines.integration.bindings:
        err = validate_name(name, binding_path)
        if err is not None:
            errors.append(err)
    return errors
