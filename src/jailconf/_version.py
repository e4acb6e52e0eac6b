"""Package version lookup."""

import tomllib
from importlib.metadata import PackageNotFoundError, version
from pathlib import Path

DISTRIBUTION = "jailconf"
_PYPROJECT = Path(__file__).resolve().parents[2] / "pyproject.toml"


def _checkout_version() -> str | None:
    # Source checkouts carry pyproject.toml two levels above the package
    if not _PYPROJECT.is_file():
        return None
    with _PYPROJECT.open("rb") as f:
        project = tomllib.load(f).get("project", {})
    if project.get("name") != DISTRIBUTION:
        return None
    return project.get("version")


def get_version() -> str:
    """Version of a source checkout if running from one, else the installed metadata."""
    found = _checkout_version()
    if found:
        return found
    try:
        return version(DISTRIBUTION)
    except PackageNotFoundError:
        return "0.0.0"
