"""Tests for hierarchical Segment.common.yaml configuration and standard tags."""

import pytest

from infra_segment.lib import tags
from infra_segment.lib.config import HierarchicalConfig, SegmentConfigException, core


@pytest.fixture
def sysenv_tree(tmp_path):
    root = tmp_path / "repo"
    sysenv = root / "sysenvs" / "aws" / "co-aws-us-west-2-app-prod"
    sysenv.mkdir(parents=True)
    (root / ".git").mkdir()

    (root / "Segment.common.yaml").write_text("namespace: co\nteam: infrastructure\npurpose: app\nphase: dev\n")
    (sysenv / "Segment.common.yaml").write_text("phase: prod\n")

    entrypoint = sysenv / "segment.py"
    entrypoint.write_text("")
    return entrypoint


class TestHierarchicalConfig:
    def test_closest_file_wins(self, sysenv_tree) -> None:
        env = HierarchicalConfig(entrypoint=sysenv_tree)

        assert env["phase"] == "prod"
        assert env["team"] == "infrastructure"
        assert env["namespace"] == "co"

    def test_require_missing_key(self, sysenv_tree) -> None:
        env = HierarchicalConfig(entrypoint=sysenv_tree)

        with pytest.raises(SegmentConfigException, match="tag_namespace"):
            env.require("tag_namespace")

    def test_get_default(self, sysenv_tree) -> None:
        assert HierarchicalConfig(entrypoint=sysenv_tree).get("tag_separator", ":") == ":"

    def test_stops_at_project_root(self, tmp_path) -> None:
        (tmp_path / "Segment.common.yaml").write_text("team: outside\n")
        project = tmp_path / "project"
        (project / ".git").mkdir(parents=True)
        entrypoint = project / "segment.py"
        entrypoint.write_text("")

        env = HierarchicalConfig(entrypoint=entrypoint)

        assert env.get("team") is None

    def test_no_config_files(self, tmp_path) -> None:
        (tmp_path / ".git").mkdir()
        entrypoint = tmp_path / "segment.py"
        entrypoint.write_text("")

        assert dict(HierarchicalConfig(entrypoint=entrypoint)) == {}


class TestStandardTags:
    @pytest.fixture(autouse=True)
    def segment_env(self, monkeypatch, sysenv_tree):
        env = HierarchicalConfig(entrypoint=sysenv_tree)
        monkeypatch.setattr(core, "get_segment_env", lambda: env)
        monkeypatch.setattr(tags, "get_sysenv", lambda: "co-aws-us-west-2-app-prod")
        monkeypatch.setattr(tags, "get_stack_name", lambda: "private-us-west-2a")
        monkeypatch.setattr(tags, "get_project_name", lambda: "network")
        return env

    def test_get_tags(self) -> None:
        assert tags.get_tags("subnet", "private", "us-west-2a") == {
            "Name": "subnet-private-us-west-2a",
            "segment:sysenv": "co-aws-us-west-2-app-prod",
            "segment:service": "subnet",
            "segment:role": "private",
            "segment:group": "us-west-2a",
            "segment:team": "infrastructure",
            "segment:createdby": "pulumi",
            "segment:stack": "private-us-west-2a",
            "segment:project": "network",
            "segment:purpose": "app",
            "segment:phase": "prod",
        }

    def test_default_group(self) -> None:
        result = tags.get_tags("routetable", "private")

        assert result["Name"] == "routetable-private"
        assert result["segment:group"] == "main"

    def test_tag_namespace_override(self, segment_env) -> None:
        segment_env["tag_namespace"] = "oh"
        segment_env["tag_separator"] = "/"

        assert "oh/team" in tags.get_tags("subnet", "private")


class TestSysenv:
    def test_sysenv_from_parts(self, monkeypatch, sysenv_tree) -> None:
        env = HierarchicalConfig(entrypoint=sysenv_tree)
        monkeypatch.setattr(core, "get_segment_env", lambda: env)
        monkeypatch.setattr(core, "get_provider_and_region", lambda: ("aws", "us-west-2"))

        assert core.get_sysenv() == "co-aws-us-west-2-app-prod"

    def test_sysenv_override(self, monkeypatch, sysenv_tree) -> None:
        env = HierarchicalConfig(entrypoint=sysenv_tree)
        env["sysenv"] = "legacy-sysenv"
        monkeypatch.setattr(core, "get_segment_env", lambda: env)

        assert core.get_sysenv() == "legacy-sysenv"
