"""
tests/core/test_core_policy.py - core/policy.py 테스트
"""

import pytest

from core.exceptions import ConfigError
from core.policy import DEFAULT_POLICY, Policy, list_policies, load_policy, load_policy_file


class TestLoadPolicy:
    """번들 정책 로드 테스트"""

    def test_default_policy(self):
        policy = load_policy()
        assert policy.name == DEFAULT_POLICY
        assert policy.title
        assert policy.parameters["metrics"] == ["web-cpu", "web-memory"]

    def test_http_status_policy(self):
        policy = load_policy("http_status")
        assert policy.parameters["stacked"] is True
        assert "http-5xx" in policy.parameters["metrics"]

    def test_unknown_policy(self):
        with pytest.raises(ConfigError):
            load_policy("does_not_exist")

    def test_list_policies(self):
        names = [p.name for p in list_policies()]
        assert DEFAULT_POLICY in names
        assert names == sorted(names)

    def test_get(self):
        policy = Policy(name="p", title="Title")
        assert policy.get("title") == "Title"
        assert policy.get("missing", "x") == "x"


class TestLoadPolicyFile:
    """경로 기반 로드 테스트"""

    def test_name_from_filename(self, tmp_path):
        path = tmp_path / "custom.yaml"
        path.write_text("title: Custom\nparameters:\n  chart-height: 500\n", encoding="utf-8")

        policy = load_policy_file(path)
        assert policy.name == "custom"
        assert policy.title == "Custom"
        assert policy.parameters == {"chart-height": 500}

    def test_yaml_path_via_load_policy(self, tmp_path):
        path = tmp_path / "other.yml"
        path.write_text("name: other\ntitle: Other\n", encoding="utf-8")
        assert load_policy(str(path)).title == "Other"

    def test_invalid_yaml(self, tmp_path):
        path = tmp_path / "bad.yaml"
        path.write_text("title: [unclosed\n", encoding="utf-8")
        with pytest.raises(ConfigError):
            load_policy_file(path)

    def test_not_mapping(self, tmp_path):
        path = tmp_path / "list.yaml"
        path.write_text("- a\n- b\n", encoding="utf-8")
        with pytest.raises(ConfigError):
            load_policy_file(path)

    def test_parameters_not_mapping(self, tmp_path):
        path = tmp_path / "params.yaml"
        path.write_text("title: X\nparameters: [a]\n", encoding="utf-8")
        with pytest.raises(ConfigError):
            load_policy_file(path)
