from __future__ import annotations

"""
End-to-End (E2E) CLI Tests.

Verifies the application's external behavior by invoking the entry point
script via subprocess: argument parsing, exit codes, stream output and
the persisted side effects (recent files, stored session).
"""

import json
import os
import subprocess
import sys
from pathlib import Path
from typing import List

PROJECT_ROOT = Path(__file__).resolve().parent.parent.parent
SRC_DIR = PROJECT_ROOT / "src"
ENTRY_POINT = SRC_DIR / "symbolanalyzer" / "main.py"


def run_cli(args: List[str], cwd: Path | None = None) -> subprocess.CompletedProcess[str]:
    """
    Execute the CLI in a separate process.

    Injects the 'src' directory into PYTHONPATH so the package resolves
    without being installed. The data directory variable set by the
    test fixtures is inherited through the environment.
    """
    env = os.environ.copy()
    env["PYTHONPATH"] = str(SRC_DIR) + os.pathsep + env.get("PYTHONPATH", "")

    cmd = [sys.executable, str(ENTRY_POINT)] + args

    return subprocess.run(
        cmd,
        cwd=cwd,
        env=env,
        capture_output=True,
        text=True,
        encoding="utf-8",
    )


def test_help_exits_cleanly():
    result = run_cli(["--help"])

    assert result.returncode == 0
    assert "--min-size" in result.stdout


def test_human_report(sample_csv: Path):
    result = run_cli(["-i", str(sample_csv), "--min-size", "0"])

    assert result.returncode == 0, result.stderr
    assert "5 symbols from 6 rows, total 95.02 KB." in result.stdout
    assert "├── std <C++> 39.06 KB" in result.stdout
    assert "[section .text] <SYS-V>" in result.stdout
    assert "Category" in result.stdout


def test_no_stats_hides_category_table(sample_csv: Path):
    result = run_cli(["-i", str(sample_csv), "--no-stats"])

    assert result.returncode == 0, result.stderr
    assert "Category" not in result.stdout
    # 'main' is below the default minimum size
    assert "main" not in result.stdout


def test_json_report(sample_csv: Path):
    result = run_cli(["-i", str(sample_csv), "--json", "--category", "zig", "--min-size", "0"])

    assert result.returncode == 0, result.stderr
    payload = json.loads(result.stdout)
    assert payload["ok"] is True
    assert payload["summary"]["total_size"] == 97300
    assert payload["summary"]["filters"]["categories"] == ["Zig"]
    assert payload["tree"]["size"] == 97300
    assert payload["stats"]["categories"]["Zig"]["size"] == 25000


def test_missing_input_is_a_usage_error():
    result = run_cli(["--use-defaults"])

    assert result.returncode == 2
    assert "No input file given" in result.stderr


def test_nonexistent_input_is_a_usage_error(tmp_path: Path):
    result = run_cli(["-i", str(tmp_path / "ghost.csv")])

    assert result.returncode == 2
    assert "does not exist" in result.stderr


def test_undecodable_input_fails(tmp_path: Path):
    path = tmp_path / "empty.csv"
    path.write_text("", encoding="utf-8")

    result = run_cli(["-i", str(path)])

    assert result.returncode == 1
    assert "CSV input is empty." in result.stderr


def test_recent_files_round_trip(sample_csv: Path):
    assert "No recent files." in run_cli(["--list-recent"]).stdout

    assert run_cli(["-i", str(sample_csv)]).returncode == 0

    listed = run_cli(["--list-recent"])
    assert "bloaty.csv" in listed.stdout

    reopened = run_cli(["--open-recent", "bloaty.csv", "--json"])
    assert reopened.returncode == 0, reopened.stderr
    assert json.loads(reopened.stdout)["summary"]["recent_name"] == "bloaty.csv"


def test_unknown_recent_file_is_a_usage_error():
    result = run_cli(["--open-recent", "nothing.csv"])

    assert result.returncode == 2
    assert "Cannot open recent file" in result.stderr


def test_no_recent_leaves_store_untouched(sample_csv: Path):
    assert run_cli(["-i", str(sample_csv), "--no-recent"]).returncode == 0

    assert "No recent files." in run_cli(["--list-recent"]).stdout


def test_saved_session_is_reused(sample_csv: Path):
    saved = run_cli(["-i", str(sample_csv), "--min-size", "5", "--search", "vec", "--save-config"])
    assert saved.returncode == 0, saved.stderr

    dumped = json.loads(run_cli(["--dump-config"]).stdout)

    assert dumped["input_path"] == str(sample_csv)
    assert dumped["min_size"] == 5
    assert dumped["search_term"] == "vec"

    defaults = json.loads(run_cli(["--dump-config", "--use-defaults"]).stdout)
    assert defaults["min_size"] == 10240


def test_log_file_defaults_to_data_directory(sample_csv: Path, isolated_data_dir: Path):
    result = run_cli(["-i", str(sample_csv), "--log-file"])

    assert result.returncode == 0, result.stderr
    log_file = isolated_data_dir / "logs" / "symbolanalyzer.log"
    assert "Analyzing profiler export" in log_file.read_text(encoding="utf-8")


def test_log_file_at_explicit_path(sample_csv: Path, tmp_path: Path):
    log_file = tmp_path / "custom" / "run.log"

    result = run_cli(["-i", str(sample_csv), "--log-file", str(log_file)])

    assert result.returncode == 0, result.stderr
    assert "Hierarchy built from 6 rows" in log_file.read_text(encoding="utf-8")
