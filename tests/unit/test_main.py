import json
import logging
from pathlib import Path

from frr_policy_agent.main import main

SPEC = """
routers:
  - asn: 65040
    id: 192.0.2.20
    prefixes: [192.0.2.0/24, "2001:db8::/64"]
    neighbors:
      - asn: 65041
        address: 192.0.2.21
        toAdvertise:
          allowed:
            mode: all
          prefixesWithCommunity:
            - prefixes: ["2001:db8::/64"]
              community: "10:108"
"""


def test_main_writes_resolved_config(tmp_path: Path):
    spec_path = tmp_path / "routing.yaml"
    spec_path.write_text(SPEC)
    output = tmp_path / "out" / "resolved.json"

    assert main(["--spec", str(spec_path), "--output", str(output)]) == 0

    data = json.loads(output.read_text())
    router = data["routers"][0]
    assert router["my_asn"] == 65040
    assert router["ipv4_prefixes"] == ["192.0.2.0/24"]
    neighbor = router["neighbors"][0]
    assert neighbor["name"] == "65041@192.0.2.21"
    assert neighbor["outgoing"]["prefixes_v6"][0]["communities"] == ["10:108"]


def test_main_prints_to_stdout(tmp_path: Path, capsys):
    spec_path = tmp_path / "routing.yaml"
    spec_path.write_text("routers: []\n")

    assert main(["--spec", str(spec_path)]) == 0

    assert json.loads(capsys.readouterr().out) == {"routers": []}


def test_main_reports_policy_violation(tmp_path: Path, caplog):
    spec_path = tmp_path / "routing.yaml"
    spec_path.write_text(SPEC.replace("mode: all", "mode: filtered"))
    output = tmp_path / "resolved.json"

    with caplog.at_level(logging.ERROR):
        assert main(["--spec", str(spec_path), "--output", str(output)]) == 1

    assert not output.exists()
    assert "not in allowed list for neighbor 192.0.2.21" in caplog.text


def test_main_reports_missing_file(tmp_path: Path, caplog):
    with caplog.at_level(logging.ERROR):
        assert main(["--spec", str(tmp_path / "missing.yaml")]) == 1

    assert "failed to load specification" in caplog.text


def test_main_reports_invalid_yaml(tmp_path: Path, caplog):
    spec_path = tmp_path / "routing.yaml"
    spec_path.write_text("routers: [\n")

    with caplog.at_level(logging.ERROR):
        assert main(["--spec", str(spec_path)]) == 1


def test_main_reports_null_asn(tmp_path: Path, caplog):
    spec_path = tmp_path / "routing.yaml"
    spec_path.write_text("routers:\n  - asn:\n")

    with caplog.at_level(logging.ERROR):
        assert main(["--spec", str(spec_path)]) == 1

    assert "router asn must be an integer" in caplog.text
