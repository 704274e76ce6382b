from __future__ import annotations

"""
Global Pytest Configuration and Fixtures.

This module sets up the testing environment, including:
1. Path manipulation to ensure the 'src' directory is importable.
2. Isolation of the user data directory (config, logs, recent files).
3. Shared profiler rows and CSV exports used across test suites.
"""

import os
import sys
from pathlib import Path
from typing import Any, Dict, List

import pytest

# -----------------------------------------------------------------------------
# Path Configuration
# -----------------------------------------------------------------------------
_SRC_PATH = os.path.abspath(os.path.join(os.path.dirname(__file__), "..", "src"))
if _SRC_PATH not in sys.path:
    sys.path.insert(0, _SRC_PATH)


# -----------------------------------------------------------------------------
# Shared Fixtures
# -----------------------------------------------------------------------------
@pytest.fixture(autouse=True)
def isolated_data_dir(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> Path:
    """Redirect the application data directory into the test sandbox."""
    data_dir = tmp_path / "appdata"
    monkeypatch.setenv("SYMBOLANALYZER_HOME", str(data_dir))
    return data_dir


@pytest.fixture
def sample_rows() -> List[Dict[str, Any]]:
    """
    Return decoded profiler rows covering every toolchain family.

    Sizes sum to 10000 bytes; 'foo__anon_1' and 'foo__anon_2' are two
    instantiations of the same Zig symbol.
    """
    return [
        {"symbols": "std::vector<int>::push_back", "vmsize": 4000, "instantiations": 0},
        {"symbols": "core::fmt::write::h0123456789abcdef", "vmsize": 2500, "instantiations": 0},
        {"symbols": "mod.foo__anon_1", "vmsize": 1000, "instantiations": 0},
        {"symbols": "mod.foo__anon_2", "vmsize": 1500, "instantiations": 0},
        {"symbols": "[section .text]", "vmsize": 700, "instantiations": 0},
        {"symbols": "main", "vmsize": 300, "instantiations": 0},
    ]


@pytest.fixture
def sample_csv(tmp_path: Path) -> Path:
    """Write a small bloaty CSV export and return its path."""
    content = (
        "symbols,vmsize,instantiations\n"
        "std::vector<int>::push_back,40000,0\n"
        "core::fmt::write::h0123456789abcdef,25000,0\n"
        "mod.foo__anon_1,10000,0\n"
        "mod.foo__anon_2,15000,0\n"
        "\"[section .text]\",7000,0\n"
        "main,300,0\n"
    )
    path = tmp_path / "bloaty.csv"
    path.write_text(content, encoding="utf-8")
    return path
