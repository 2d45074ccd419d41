"""
Tests for the manifest check use case.
"""

from pathlib import Path

from gitops_manifest.core.use_cases.manifest_check import check_manifest


class TestCheckManifest:
    def test_valid(self, manifest_file: Path):
        result = check_manifest(manifest_file)
        assert result.valid
        assert result.errors == []
        assert result.manifest is not None
        assert result.to_dict()["service_count"] == 2

    def test_invalid(self, tmp_path: Path):
        path = tmp_path / "pipelines.yaml"
        path.write_text("environments:\n  - name: dev\n    apps:\n      - name: app1\n")
        result = check_manifest(path)
        assert not result.valid
        assert result.errors == [
            'missing field(s) "services","config_repo": environments.dev.apps.app1',
        ]
        assert result.issues[0]["paths"] == ["environments.dev.apps.app1"]

    def test_load_error_reported(self, tmp_path: Path):
        path = tmp_path / "pipelines.yaml"
        path.write_text(":: invalid: yaml: [")
        result = check_manifest(path)
        assert not result.valid
        assert result.manifest is None
        assert "Invalid YAML" in result.errors[0]

    def test_nothing_found(self, tmp_path: Path, monkeypatch):
        monkeypatch.setattr(
            "gitops_manifest.core.use_cases.manifest_check.find_manifest_file", lambda: None
        )
        result = check_manifest()
        assert not result.valid
        assert result.errors == ["No pipelines.yaml found."]
        assert result.to_dict()["manifest_path"] is None

    def test_non_utf8_reported(self, tmp_path: Path):
        path = tmp_path / "pipelines.yaml"
        path.write_bytes(b"environments:\n  - name: d\xffev\n")
        result = check_manifest(path)
        assert not result.valid
        assert "Cannot read" in result.errors[0]

    def test_quoted_newline_in_name(self, tmp_path: Path):
        path = tmp_path / "pipelines.yaml"
        path.write_text('environments:\n  - name: "dev\\n"\n')
        result = check_manifest(path)
        assert not result.valid
        assert result.issues[0]["message"] == 'invalid name "dev\n"'
