"""Tests for loading restriction configs and importee feeds."""

from pathlib import Path

import pytest

from restricted_imports.config.repository import (
    RestrictionsConfigRepository,
    load_importees,
)
from restricted_imports.errors import (
    InvalidConfigFormatError,
    InvalidConfigSchemaError,
    MissingConfigFileError,
)
from restricted_imports.models import Importee


def test_load_json_config(tmp_path: Path, write_json) -> None:
    path = write_json(tmp_path / "rules.json", {"restrictions": ["fs", {"name": ["a", "!b"]}]})
    repository = RestrictionsConfigRepository(path=path)

    assert repository.load_options() == ["fs", {"name": ["a", "!b"]}]
    assert len(repository.load_restrictions()) == 2


def test_load_yaml_config(tmp_path: Path, write_yaml) -> None:
    path = write_yaml(
        tmp_path / "rules.yaml",
        {"restrictions": [{"name": "fs", "message": "use fs/promises"}]},
    )
    restrictions = RestrictionsConfigRepository(path=path).load_restrictions()

    restriction = restrictions.find_violation(Importee(name="fs"))
    assert restriction is not None
    assert restriction.custom_message == " use fs/promises"


def test_empty_yaml_means_no_restrictions(tmp_path: Path) -> None:
    path = tmp_path / "rules.yml"
    path.write_text("", encoding="utf-8")
    assert RestrictionsConfigRepository(path=path).load_options() == []


def test_discovery_prefers_yaml(project_root: Path, write_json, write_yaml) -> None:
    write_json(project_root / ".restricted-imports.json", {"restrictions": ["a"]})
    write_yaml(project_root / ".restricted-imports.yaml", {"restrictions": ["b"]})

    repository = RestrictionsConfigRepository(root=project_root)

    assert repository.config_path == project_root / ".restricted-imports.yaml"
    assert repository.load_options() == ["b"]


def test_discovery_falls_back_to_json(sample_config: Path, project_root: Path) -> None:
    repository = RestrictionsConfigRepository()
    assert repository.config_path == project_root / ".restricted-imports.json"


def test_missing_config(project_root: Path) -> None:
    with pytest.raises(MissingConfigFileError):
        RestrictionsConfigRepository(root=project_root).load_options()
    with pytest.raises(MissingConfigFileError):
        RestrictionsConfigRepository(path=project_root / "nope.json").load_options()


def test_malformed_json(tmp_path: Path) -> None:
    path = tmp_path / "rules.json"
    path.write_text("{bad json", encoding="utf-8")
    with pytest.raises(InvalidConfigFormatError) as exc_info:
        RestrictionsConfigRepository(path=path).load_options()
    assert exc_info.value.path == path


def test_malformed_yaml(tmp_path: Path) -> None:
    path = tmp_path / "rules.yaml"
    path.write_text("restrictions: [fs\n", encoding="utf-8")
    with pytest.raises(InvalidConfigFormatError):
        RestrictionsConfigRepository(path=path).load_options()


@pytest.mark.parametrize(
    "payload",
    [
        ["fs"],
        {"restrictions": "fs"},
        {"restrictions": [{"message": "no name"}]},
        {"restrictions": [{"name": "fs", "extra": True}]},
        {"restrictions": [{"name": []}]},
        {"restrictions": [""]},
        {"unknown": []},
    ],
)
def test_schema_violations(tmp_path: Path, write_json, payload) -> None:
    path = write_json(tmp_path / "rules.json", payload)
    with pytest.raises(InvalidConfigSchemaError):
        RestrictionsConfigRepository(path=path).load_options()


def test_schema_error_names_location(tmp_path: Path, write_json) -> None:
    path = write_json(tmp_path / "rules.json", {"restrictions": ["ok", 7]})
    with pytest.raises(InvalidConfigSchemaError) as exc_info:
        RestrictionsConfigRepository(path=path).load_options()
    assert "restrictions.1" in exc_info.value.detail


def test_load_importees(tmp_path: Path, write_json) -> None:
    path = write_json(
        tmp_path / "importees.json",
        [
            {"name": "fs"},
            {"name": "./secret", "filePath": "/srv/secret.js", "node": {"line": 4}},
            {"name": "x", "filePath": None},
        ],
    )
    importees = load_importees(path)

    assert importees == [
        Importee(name="fs"),
        Importee(name="./secret", file_path="/srv/secret.js"),
        Importee(name="x"),
    ]
    assert importees[1].node == {"line": 4}


def test_load_importees_rejects_bad_records(tmp_path: Path, write_json) -> None:
    path = write_json(tmp_path / "importees.json", [{"filePath": "/a"}])
    with pytest.raises(InvalidConfigSchemaError):
        load_importees(path)
