"""
Domain models — Pydantic types for the GitOps manifest.

All models are re-exported here for convenient access:

    from gitops_manifest.core.models import Manifest, Environment, Application, Service
"""

from gitops_manifest.core.models.manifest import (
    Application,
    ArgoCDConfig,
    Config,
    Environment,
    Manifest,
    Pipelines,
    PipelinesConfig,
    Repository,
    Secret,
    Service,
    TemplateBinding,
    Webhook,
)

__all__ = [
    "Application",
    "ArgoCDConfig",
    "Config",
    "Environment",
    "Manifest",
    "Pipelines",
    "PipelinesConfig",
    "Repository",
    "Secret",
    "Service",
    "TemplateBinding",
    "Webhook",
]
