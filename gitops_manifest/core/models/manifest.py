"""
Manifest model — the GitOps pipelines document.

Loaded from pipelines.yaml, this describes the environments, the
applications deployed into them, the services those applications are
built from, and the CI wiring (webhooks, pipeline bindings) for each.

Field names match the YAML keys, so a parsed document can be handed
straight to ``Manifest.model_validate``.
"""

from __future__ import annotations

from typing import Any

from pydantic import BaseModel, Field, field_validator


def _none_as_empty(value: Any) -> Any:
    # An empty YAML key (`apps:`) parses to None and means "no entries".
    return [] if value is None else value


class PipelinesConfig(BaseModel):
    """Namespace that hosts the CI/CD pipelines."""

    name: str = ""


class ArgoCDConfig(BaseModel):
    """Namespace that hosts the ArgoCD installation."""

    namespace: str = ""


class Config(BaseModel):
    """Global configuration shared by every environment."""

    pipelines: PipelinesConfig | None = None
    argocd: ArgoCDConfig | None = None


class TemplateBinding(BaseModel):
    """A trigger template and the bindings that feed it."""

    template: str = ""
    bindings: list[str] = Field(default_factory=list)

    none_bindings = field_validator("bindings", mode="before")(_none_as_empty)


class Pipelines(BaseModel):
    """Pipeline wiring for an environment or a service."""

    integration: TemplateBinding | None = None


class Secret(BaseModel):
    """A reference to a Kubernetes secret."""

    name: str = ""
    namespace: str = ""


class Webhook(BaseModel):
    secret: Secret | None = None


class Repository(BaseModel):
    """A git repository holding an application's configuration."""

    url: str = ""
    path: str = ""


class Service(BaseModel):
    """A buildable service, declared once inside an environment.

    ``source_url`` points at the service's source repository; two
    services may not be built from the same source.
    """

    name: str = ""
    source_url: str = ""
    webhook: Webhook | None = None
    pipelines: Pipelines | None = None


class Application(BaseModel):
    """A deployable application.

    An application is either assembled from services (``services`` holds
    the names of services declared elsewhere in the manifest) or pulled
    from a separate configuration repository. Exactly one of the two.
    """

    name: str = ""
    services: list[str] = Field(default_factory=list)
    config_repo: Repository | None = None

    none_services = field_validator("services", mode="before")(_none_as_empty)


class Environment(BaseModel):
    """A deployment target (dev, stage, prod)."""

    name: str = ""
    cluster: str = ""
    pipelines: Pipelines | None = None
    apps: list[Application] = Field(default_factory=list)
    services: list[Service] = Field(default_factory=list)

    none_lists = field_validator("apps", "services", mode="before")(_none_as_empty)

    def get_application(self, name: str) -> Application | None:
        """Look up an application by name."""
        for app in self.apps:
            if app.name == name:
                return app
        return None

    def get_service(self, name: str) -> Service | None:
        """Look up a service declaration by name."""
        for svc in self.services:
            if svc.name == name:
                return svc
        return None


class Manifest(BaseModel):
    """Root GitOps document — loaded from pipelines.yaml."""

    gitops_url: str = ""
    config: Config | None = None
    environments: list[Environment] = Field(default_factory=list)

    none_environments = field_validator("environments", mode="before")(_none_as_empty)

    def get_environment(self, name: str) -> Environment | None:
        """Look up an environment by name."""
        for env in self.environments:
            if env.name == name:
                return env
        return None

    def all_services(self) -> list[Service]:
        """Every service declaration, in document order."""
        return [svc for env in self.environments for svc in env.services]
