import json
import sys
from pathlib import Path
from typing import Any, Callable

import pytest
from click.testing import CliRunner
import yaml


def _ensure_repo_on_path() -> None:
    repo_root = Path(__file__).resolve().parent.parent
    if str(repo_root) not in sys.path:
        sys.path.insert(0, str(repo_root))


_ensure_repo_on_path()


@pytest.fixture
def write_json() -> Callable[[Path, Any], Path]:
    def _write(path: Path, payload: Any) -> Path:
        path.parent.mkdir(parents=True, exist_ok=True)
        path.write_text(json.dumps(payload), encoding="utf-8")
        return path

    return _write


@pytest.fixture
def write_yaml() -> Callable[[Path, Any], Path]:
    def _write(path: Path, payload: Any) -> Path:
        path.parent.mkdir(parents=True, exist_ok=True)
        path.write_text(yaml.safe_dump(payload), encoding="utf-8")
        return path

    return _write


@pytest.fixture
def project_root(tmp_path: Path, monkeypatch) -> Path:
    root = tmp_path / "project"
    root.mkdir()
    monkeypatch.chdir(root)
    return root


@pytest.fixture
def sample_config(project_root: Path, write_json) -> Path:
    return write_json(
        project_root / ".restricted-imports.json",
        {
            "restrictions": [
                {"name": "fs", "message": "use the async API"},
                "child_process",
            ]
        },
    )


@pytest.fixture
def sample_importees(project_root: Path, write_json) -> Path:
    return write_json(
        project_root / "importees.json",
        [
            {"name": "fs", "node": {"file": "index.js", "line": 1, "column": 1}},
            {"name": "child_process", "node": {"file": "index.js", "line": 2, "column": 1}},
            {"name": "path", "node": {"file": "index.js", "line": 3, "column": 1}},
        ],
    )


@pytest.fixture
def cli_runner() -> CliRunner:
    class WideCliRunner(CliRunner):
        def invoke(self, cli: Any, args: Any = None, **kwargs: Any):  # type: ignore[override]
            env = dict(kwargs.pop("env", {}) or {})
            env.setdefault("COLUMNS", "200")
            kwargs["env"] = env
            return super().invoke(cli, args=args, **kwargs)

    return WideCliRunner()
