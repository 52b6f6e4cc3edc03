"""Package version lookup."""

import tomllib
from importlib.metadata import PackageNotFoundError
from importlib.metadata import version as _metadata_version
from pathlib import Path

DISTRIBUTION = "style-tokens"

# Source checkout layout: <root>/src/style_tokens/_version.py
_PYPROJECT = Path(__file__).resolve().parents[2] / "pyproject.toml"


def get_version() -> str:
    """Installed distribution version, else the one declared in a source checkout."""
    try:
        return _metadata_version(DISTRIBUTION)
    except PackageNotFoundError:
        pass
    if _PYPROJECT.exists():
        project = tomllib.loads(_PYPROJECT.read_text(encoding="utf-8")).get("project", {})
        return str(project.get("version", "0.0.0"))
    return "0.0.0"
