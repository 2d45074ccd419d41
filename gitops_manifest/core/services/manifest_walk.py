"""
Manifest walker — depth-first traversal with visitor callbacks.

The walker knows the shape of the manifest and nothing about what is
being checked. Callers implement ``ManifestVisitor`` and hand it to
``walk``.

Order, for each environment in document order:
    1. ``visitor.environment(env)``
    2. ``visitor.service(env, svc)`` for each service declaration
    3. ``visitor.application(env, app)`` for each application

An application's service references are names, not nodes, so they are
never walked; each service is visited once, where it is declared.
"""

from __future__ import annotations

import logging
from abc import ABC, abstractmethod

from gitops_manifest.core.models.manifest import (
    Application,
    Environment,
    Manifest,
    Service,
)

logger = logging.getLogger(__name__)


class WalkError(Exception):
    """Raised when the manifest tree cannot be traversed.

    This is fatal and stops the walk, unlike per-node findings which
    visitors are expected to collect themselves.
    """


class ManifestVisitor(ABC):
    """Callbacks invoked by ``walk``, one per node type.

    Callbacks return nothing. Raising aborts the walk and the exception
    propagates to the caller of ``walk``.
    """

    @abstractmethod
    def environment(self, env: Environment) -> None:
        """Called once per environment, before its children."""

    @abstractmethod
    def application(self, env: Environment, app: Application) -> None:
        """Called once per application, after the environment's services."""

    @abstractmethod
    def service(self, env: Environment, svc: Service) -> None:
        """Called once per service declaration."""


def walk(manifest: Manifest, visitor: ManifestVisitor) -> None:
    """Visit every node of ``manifest`` in document order.

    Raises:
        WalkError: If a node in the tree is missing.
    """
    for i, env in enumerate(manifest.environments):
        if env is None:
            raise WalkError(f"environments[{i}] is empty")
        logger.debug("Walking environment %r", env.name)
        visitor.environment(env)

        for j, svc in enumerate(env.services):
            if svc is None:
                raise WalkError(f"environments[{i}].services[{j}] is empty")
            visitor.service(env, svc)

        for j, app in enumerate(env.apps):
            if app is None:
                raise WalkError(f"environments[{i}].apps[{j}] is empty")
            visitor.application(env, app)
