"""
Tests for CLI: analyze command, settings flags, output handling, error cases.
"""

import json
import subprocess
import sys
from pathlib import Path

from roadstat.cli import main

ROOT = Path(__file__).resolve().parent.parent
DATASETS = Path(__file__).resolve().parent / "fixtures" / "datasets"
CYCLE_CHORD = str(DATASETS / "cycle_chord.txt")


def _run_cli(args: list[str]) -> tuple[int, str, str]:
    """
    Run CLI command in a subprocess and return (exit_code, stdout, stderr).

    Args:
        args: CLI arguments (without 'roadstat' command)
    """
    cmd = [sys.executable, "-m", "roadstat.cli"] + args
    result = subprocess.run(
        cmd, capture_output=True, text=True, encoding="utf-8", cwd=ROOT
    )
    return result.returncode, result.stdout, result.stderr


def test_cli_analyze_text():
    """Text output lists every block and exits 0."""
    exit_code, stdout, stderr = _run_cli(["analyze", CYCLE_CHORD, "--start", "1"])
    assert exit_code == 0, stderr
    lines = stdout.splitlines()
    assert lines[0] == "Total number of nodes: 5"
    assert "Number of connected components: 1" in lines
    assert "Degree 2: 3 nodes" in lines
    assert "Distance from node 1 to node 2 is 1" in lines
    assert "Distance from node 1 to node 3 is 2" in lines


def test_cli_analyze_json(capsys):
    """--format json prints the report dict."""
    exit_code = main(["analyze", CYCLE_CHORD, "--start", "1", "--cutoff", "1", "--format", "json"])
    assert exit_code == 0
    data = json.loads(capsys.readouterr().out)
    assert data["node_count"] == 5
    assert data["shortest_paths"]["cutoff"] == 1
    assert [d["node"] for d in data["shortest_paths"]["distances"]] == [1, 0, 2]


def test_cli_start_label(capsys):
    """--start-label looks the start value up as an external label."""
    exit_code = main(["analyze", CYCLE_CHORD, "--start", "5", "--start-label", "--format", "json"])
    assert exit_code == 0
    data = json.loads(capsys.readouterr().out)
    assert data["shortest_paths"]["start_node"] == 4


def test_cli_config_file_and_override(tmp_path, capsys):
    """Values from --config apply; explicit flags override them."""
    config = tmp_path / "settings.yaml"
    config.write_text("analysis:\n  start_node: 0\n  cutoff: 0\n  gap_threshold: 2\n")
    exit_code = main(
        ["analyze", CYCLE_CHORD, "--config", str(config), "--cutoff", "1", "--format", "json"]
    )
    assert exit_code == 0
    data = json.loads(capsys.readouterr().out)
    assert data["distance_gap"]["gap_threshold"] == 2
    assert data["distance_gap"]["distance_1"] == 4
    assert data["shortest_paths"]["cutoff"] == 1


def test_cli_output_file(tmp_path, capsys):
    """--output writes to file instead of stdout."""
    output_file = tmp_path / "report.json"
    exit_code = main(
        ["analyze", CYCLE_CHORD, "--start", "0", "--format", "json", "--output", str(output_file)]
    )
    assert exit_code == 0
    assert capsys.readouterr().out == ""
    data = json.loads(output_file.read_text(encoding="utf-8"))
    assert data["components"]["count"] == 1


def test_cli_parallel(capsys):
    exit_code = main(["analyze", CYCLE_CHORD, "--start", "0", "--parallel"])
    assert exit_code == 0
    assert "Number of connected components: 1" in capsys.readouterr().out


def test_cli_missing_file(tmp_path, capsys):
    """Missing dataset -> exit 1, error on stderr, nothing on stdout."""
    exit_code = main(["analyze", str(tmp_path / "missing.txt"), "--start", "0"])
    assert exit_code == 1
    captured = capsys.readouterr()
    assert captured.out == ""
    assert "Error" in captured.err


def test_cli_malformed_file(capsys):
    exit_code = main(["analyze", str(DATASETS / "malformed.txt"), "--start", "0"])
    assert exit_code == 1
    captured = capsys.readouterr()
    assert captured.out == ""
    assert "malformed edge list" in captured.err


def test_cli_start_out_of_range(capsys):
    """Default start index 456 is out of range for a five-node graph."""
    exit_code = main(["analyze", CYCLE_CHORD])
    assert exit_code == 1
    captured = capsys.readouterr()
    assert captured.out == ""
    assert "out of range" in captured.err


def test_cli_invalid_override(capsys):
    exit_code = main(["analyze", CYCLE_CHORD, "--cutoff", "-2"])
    assert exit_code == 1
    assert "cutoff" in capsys.readouterr().err


def test_cli_no_command():
    """No subcommand prints help and exits 1."""
    exit_code, stdout, _ = _run_cli([])
    assert exit_code == 1
    assert "analyze" in stdout


def test_cli_config_with_integer_key(tmp_path, capsys):
    """A settings file mixing integer and string keys is a configuration error."""
    config = tmp_path / "settings.yaml"
    config.write_text("1: 2\nbogus: 3\n")
    exit_code = main(["analyze", CYCLE_CHORD, "--config", str(config), "--start", "0"])
    assert exit_code == 1
    captured = capsys.readouterr()
    assert captured.out == ""
    assert "Error: Unknown settings keys" in captured.err


def test_cli_start_label_text_shows_label(tmp_path, capsys):
    """With --start-label the distance lines name the label and its index."""
    dataset = tmp_path / "pair.txt"
    dataset.write_text("100 200\n")
    exit_code = main(["analyze", str(dataset), "--start", "200", "--start-label"])
    assert exit_code == 0
    lines = capsys.readouterr().out.splitlines()
    assert "Distance from node 200 (index 1) to node 1 is 0" in lines
    assert "Distance from node 200 (index 1) to node 0 is 1" in lines
