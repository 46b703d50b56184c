# src/testbook/tests/test_logging/test_project_metadata.py
from importlib import metadata as importlib_metadata

from testbook.utils import logging as project_meta


def test_find_pyproject_walks_up(tmp_path):
    (tmp_path / "pyproject.toml").write_text('[project]\nname = "demo"\n', encoding="utf-8")
    nested = tmp_path / "a" / "b"
    nested.mkdir(parents=True)
    assert project_meta.find_pyproject(nested) == tmp_path / "pyproject.toml"
    assert project_meta.find_pyproject(nested, max_up=1) is None


def test_read_project_table(tmp_path):
    (tmp_path / "pyproject.toml").write_text('[project]\nname = "demo"\nversion = "1.2.3"\n', encoding="utf-8")
    assert project_meta.read_project_table(tmp_path) == {"name": "demo", "version": "1.2.3"}


def test_read_project_table_invalid_toml(tmp_path):
    (tmp_path / "pyproject.toml").write_text("[project\n", encoding="utf-8")
    assert project_meta.read_project_table(tmp_path) == {}


def test_version_falls_back_to_pyproject(monkeypatch):
    def not_installed(name):
        raise importlib_metadata.PackageNotFoundError(name)

    monkeypatch.setattr(project_meta.importlib_metadata, "version", not_installed)
    monkeypatch.setattr(project_meta, "read_project_table", lambda: {"version": "9.9.9"})
    assert project_meta.get_project_version() == "9.9.9"

    monkeypatch.setattr(project_meta, "read_project_table", lambda: {})
    assert project_meta.get_project_version() == "unknown"


def test_project_name_prefers_installed_metadata(monkeypatch):
    monkeypatch.setattr(project_meta.importlib_metadata, "metadata", lambda name: {"Name": "testbook-installed"})
    monkeypatch.setattr(project_meta, "read_project_table", lambda: {"name": "from-pyproject"})
    assert project_meta.get_project_name() == "testbook-installed"


def test_project_name_falls_back_to_pyproject(monkeypatch):
    def not_installed(name):
        raise importlib_metadata.PackageNotFoundError(name)

    monkeypatch.setattr(project_meta.importlib_metadata, "metadata", not_installed)
    monkeypatch.setattr(project_meta, "read_project_table", lambda: {"name": "from-pyproject"})
    assert project_meta.get_project_name() == "from-pyproject"

    monkeypatch.setattr(project_meta, "read_project_table", lambda: {})
    assert project_meta.get_project_name() == "testbook"
