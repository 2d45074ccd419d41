"""
Tests for manifest path building.
"""

from gitops_manifest.core.models import Application, Environment
from gitops_manifest.core.services.manifest_paths import (
    path_for_application,
    path_for_config,
    path_for_environment,
    path_for_service,
    yaml_join,
    yaml_path,
)


class TestPaths:
    def test_environment(self):
        assert path_for_environment(Environment(name="dev")) == "environments/dev"

    def test_application(self):
        env = Environment(name="dev")
        assert path_for_application(env, Application(name="app1")) == "environments/dev/apps/app1"

    def test_service(self):
        assert path_for_service(Environment(name="dev"), "svc1") == "environments/dev/services/svc1"

    def test_unnamed_environment(self):
        assert path_for_environment(Environment()) == "environments"

    def test_config(self):
        assert path_for_config("argocd") == "config.argocd"

    def test_yaml_path(self):
        assert yaml_path("environments/dev/apps/app1") == "environments.dev.apps.app1"

    def test_yaml_join(self):
        assert yaml_join("environments.dev", "webhook", "secret", "name") == (
            "environments.dev.webhook.secret.name"
        )

    def test_yaml_join_no_segments(self):
        assert yaml_join("environments.dev") == "environments.dev"

    def test_deterministic(self):
        env = Environment(name="dev")
        assert path_for_service(env, "svc1") == path_for_service(env, "svc1")
