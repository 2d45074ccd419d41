"""
Tests for domain models — parsing, defaults, lookups.
"""

from gitops_manifest.core.models import (
    Application,
    Environment,
    Manifest,
    Service,
)


class TestManifest:
    """Manifest model tests."""

    def test_empty_manifest(self):
        m = Manifest()
        assert m.config is None
        assert m.environments == []
        assert m.gitops_url == ""

    def test_from_dict(self):
        m = Manifest.model_validate({
            "config": {"argocd": {"namespace": "argocd"}, "pipelines": {"name": "cicd"}},
            "environments": [{
                "name": "dev",
                "pipelines": {"integration": {"template": "t", "bindings": ["b"]}},
                "services": [{
                    "name": "svc1",
                    "source_url": "https://github.com/org/svc1.git",
                    "webhook": {"secret": {"name": "s", "namespace": "cicd"}},
                }],
                "apps": [{"name": "app1", "services": ["svc1"]}],
            }],
        })
        assert m.config.argocd.namespace == "argocd"
        assert m.config.pipelines.name == "cicd"
        env = m.environments[0]
        assert env.pipelines.integration.bindings == ["b"]
        assert env.services[0].webhook.secret.namespace == "cicd"
        assert env.apps[0].services == ["svc1"]
        assert env.apps[0].config_repo is None

    def test_missing_names_default_empty(self):
        m = Manifest.model_validate({"environments": [{"apps": [{}], "services": [{}]}]})
        env = m.environments[0]
        assert env.name == ""
        assert env.apps[0].name == ""
        assert env.services[0].name == ""

    def test_get_environment(self):
        m = Manifest(environments=[Environment(name="dev"), Environment(name="stage")])
        assert m.get_environment("stage").name == "stage"
        assert m.get_environment("prod") is None

    def test_all_services(self):
        m = Manifest(environments=[
            Environment(name="dev", services=[Service(name="a"), Service(name="b")]),
            Environment(name="stage", services=[Service(name="c")]),
        ])
        assert [s.name for s in m.all_services()] == ["a", "b", "c"]


class TestEnvironment:
    def test_lookups(self):
        env = Environment(
            name="dev",
            apps=[Application(name="app1")],
            services=[Service(name="svc1")],
        )
        assert env.get_application("app1").name == "app1"
        assert env.get_application("nope") is None
        assert env.get_service("svc1").name == "svc1"
        assert env.get_service("nope") is None

    def test_null_lists_become_empty(self):
        m = Manifest.model_validate({
            "environments": [{
                "name": "dev",
                "apps": [{"name": "app1", "services": None}],
                "services": None,
            }],
        })
        env = m.environments[0]
        assert env.services == []
        assert env.apps[0].services == []
        assert Manifest.model_validate({"environments": None}).environments == []
