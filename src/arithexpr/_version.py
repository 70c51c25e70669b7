"""Version lookup for arithexpr."""

import tomllib
from importlib.metadata import PackageNotFoundError
from importlib.metadata import version as _metadata_version
from pathlib import Path

_PYPROJECT = Path(__file__).resolve().parents[2] / "pyproject.toml"


def get_version() -> str:
    """Read the version from a source checkout's pyproject.toml, else installed metadata."""
    if _PYPROJECT.is_file():
        project = tomllib.loads(_PYPROJECT.read_text(encoding="utf-8")).get("project", {})
        if project.get("name") == "arithexpr" and "version" in project:
            return str(project["version"])
    try:
        return _metadata_version("arithexpr")
    except PackageNotFoundError:
        return "0.0.0"
