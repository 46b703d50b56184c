from pathlib import Path
from importlib import metadata as importlib_metadata
from typing import Any
import tomllib

DISTRIBUTION_NAME = "testbook"

# --------------------
# Find pyproject.toml
# --------------------


def find_pyproject(start: Path, max_up: int = 5) -> Path | None:
    p = start
    for _ in range(max_up):
        candidate = p / "pyproject.toml"
        if candidate.exists():
            return candidate
        if p.parent == p:
            break
        p = p.parent
    return None


def read_project_table(start: Path | None = None, max_up: int = 5) -> dict[str, Any]:
    """
    Return the [project] table of the nearest pyproject.toml, or {} when there is
    no pyproject within `max_up` parents or it cannot be parsed.

    Used in a source checkout, where the package is importable but not installed.
    """
    start_path = start or Path(__file__).resolve().parent
    pyproject = find_pyproject(start_path, max_up=max_up)
    if pyproject is None:
        return {}
    try:
        with pyproject.open("rb") as f:
            data = tomllib.load(f)
    except (OSError, tomllib.TOMLDecodeError):
        return {}
    project = data.get("project")
    return project if isinstance(project, dict) else {}


def get_project_name(default: str = DISTRIBUTION_NAME) -> str:
    """
    Service name stamped on JSON log lines: the installed distribution's Name,
    falling back to project.name from pyproject.toml, then to `default`.
    """
    try:
        name = importlib_metadata.metadata(DISTRIBUTION_NAME).get("Name")
    except importlib_metadata.PackageNotFoundError:
        name = None
    if isinstance(name, str) and name:
        return name

    name = read_project_table().get("name")
    return name if isinstance(name, str) and name else default


def get_project_version(default: str = "unknown") -> str:
    """
    Version of the installed distribution, falling back to project.version from
    pyproject.toml, then to `default`.
    """
    try:
        return importlib_metadata.version(DISTRIBUTION_NAME)
    except importlib_metadata.PackageNotFoundError:
        pass

    version = read_project_table().get("version")
    return version if isinstance(version, str) and version else default


__all__ = [
    "find_pyproject",
    "read_project_table",
    "get_project_name",
    "get_project_version",
]
