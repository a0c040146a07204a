"""Tests for the infra-segment command line."""

import json

import pytest
import yaml
from click.testing import CliRunner

from infra_segment.lib.cli.cli import cli

SPEC = """
network_id: vpc-1
address_block: 10.0.1.0/24
zone: us-east-1a
routes:
  - destination_block: 0.0.0.0/0
    target_kind: internet-gateway
    target_id: igw-123
subnet_labels:
  env: prod
"""


@pytest.fixture
def spec_file(tmp_path):
    path = tmp_path / "segment.yaml"
    path.write_text(SPEC)
    return str(path)


@pytest.fixture
def runner():
    return CliRunner()


class TestDescribe:
    def test_yaml_output(self, runner, spec_file) -> None:
        result = runner.invoke(cli, ["describe", spec_file])

        assert result.exit_code == 0, result.output
        graph = yaml.safe_load(result.output)
        assert [r["name"] for r in graph["resources"]] == ["Subnet", "RouteTable", "SubnetRouteTableAssoc", "Route0"]
        assert graph["resources"][3]["properties"]["gateway_id"] == "igw-123"
        assert graph["resources"][0]["properties"]["tags"] == [{"key": "env", "value": "prod"}]
        assert graph["resources"][0]["properties"]["map_public_ip_on_launch"] is False

    def test_json_output(self, runner, spec_file) -> None:
        result = runner.invoke(cli, ["describe", "--format", "json", spec_file])

        assert result.exit_code == 0, result.output
        graph = json.loads(result.output)
        assert ["Route0", "RouteTable"] in graph["edges"]

    def test_unsupported_target_kind(self, runner, tmp_path) -> None:
        path = tmp_path / "bad.yaml"
        path.write_text(SPEC.replace("internet-gateway", "vpn-gateway"))

        result = runner.invoke(cli, ["describe", str(path)])

        assert result.exit_code == 1
        assert "vpn-gateway" in result.output

    def test_missing_field(self, runner, tmp_path) -> None:
        path = tmp_path / "bad.yaml"
        path.write_text("address_block: 10.0.1.0/24\nzone: us-east-1a\n")

        result = runner.invoke(cli, ["describe", str(path)])

        assert result.exit_code == 1
        assert "network_id" in result.output

    def test_not_a_mapping(self, runner, tmp_path) -> None:
        path = tmp_path / "bad.yaml"
        path.write_text("- 10.0.1.0/24\n")

        result = runner.invoke(cli, ["describe", str(path)])

        assert result.exit_code == 1
        assert "expected a mapping" in result.output

    def test_malformed_yaml(self, runner, tmp_path) -> None:
        path = tmp_path / "bad.yaml"
        path.write_text("network_id: [unclosed\n")

        result = runner.invoke(cli, ["describe", str(path)])

        assert result.exit_code == 1
        assert "bad.yaml" in result.output
        assert not isinstance(result.exception, yaml.YAMLError)


class TestValidate:
    def test_routes_key_without_entries(self, runner, tmp_path) -> None:
        path = tmp_path / "segment.yaml"
        path.write_text("network_id: vpc-1\naddress_block: 10.0.1.0/24\nzone: us-east-1a\nroutes:\n")

        result = runner.invoke(cli, ["validate", str(path)])

        assert result.exit_code == 0, result.output
        assert "Routes: 0" in result.output
        assert "Resources: 3" in result.output

    def test_summary(self, runner, spec_file) -> None:
        result = runner.invoke(cli, ["validate", spec_file])

        assert result.exit_code == 0, result.output
        assert "Subnet: 10.0.1.0/24 (us-east-1a)" in result.output
        assert "Routes: 1" in result.output
        assert "Resources: 4" in result.output

    def test_empty_zone(self, runner, tmp_path) -> None:
        path = tmp_path / "bad.yaml"
        path.write_text(SPEC.replace("zone: us-east-1a", 'zone: ""'))

        result = runner.invoke(cli, ["validate", str(path)])

        assert result.exit_code == 1
        assert "zone" in result.output
