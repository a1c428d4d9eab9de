from __future__ import annotations

from pathlib import Path

from scripts.check_env_read_placement import check_file

REPO_ROOT = Path(__file__).resolve().parents[3]


def test_env_reads_stay_in_config_modules() -> None:
    violations: list[str] = []
    for path in sorted((REPO_ROOT / "railway").rglob("*.py")):
        violations.extend(check_file(path, path.relative_to(REPO_ROOT).as_posix()))
    assert violations == []


def test_env_read_outside_config_is_flagged(tmp_path) -> None:
    module = tmp_path / "rogue.py"
    module.write_text("import os\nLEVEL = os.environ.get('X')\n", encoding="utf-8")
    assert check_file(module, "railway/runtime/rogue.py") == [
        "railway/runtime/rogue.py:2 env read outside config modules"
    ]
