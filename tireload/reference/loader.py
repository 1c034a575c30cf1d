"""
Reference data loader.

Loads the tire table and speed / load-factor table from a JSON file of the
form {"tires": [...], "speed_table": [...]}.
"""

import json
import importlib.resources as resources
from pathlib import Path
from typing import Optional

from tireload.models.inputs import ReferenceData


# Default reference data filename
DEFAULT_DATA_NAME = "tire_data.json"


def get_project_root() -> Path:
    """Get the project root directory."""
    # Try to find project root by looking for pyproject.toml
    current = Path(__file__).resolve()
    for parent in current.parents:
        if (parent / "pyproject.toml").exists():
            return parent
    # Fallback to current working directory
    return Path.cwd()


def _resource_path(filename: str) -> Optional[Path]:
    """
    Resolve a packaged data file inside tireload.data.

    Returns a filesystem path or None if the resource is unavailable.
    """
    try:
        resource = resources.files("tireload.data").joinpath(filename)
    except ModuleNotFoundError:
        return None
    if resource.is_file():
        with resources.as_file(resource) as tmp_path:
            return Path(tmp_path)
    return None


def resolve_data_file(filename: str = DEFAULT_DATA_NAME) -> Path:
    """Find the best available path for a reference data file."""
    candidates = [
        get_project_root() / "data" / filename,  # project / editable install
        Path.cwd() / "data" / filename,          # current working dir
    ]

    pkg_path = _resource_path(filename)
    if pkg_path:
        candidates.append(pkg_path)

    for candidate in candidates:
        if candidate.exists():
            return candidate

    # Default to first candidate for error reporting
    return candidates[0]


def reference_data_exists(path: Optional[str] = None) -> bool:
    """
    Check if the reference data file exists.

    Args:
        path: Path to the JSON file (optional)

    Returns:
        True if the file exists
    """
    data_file = Path(path) if path else resolve_data_file()
    return data_file.exists()


def parse_reference_data(data: dict) -> ReferenceData:
    """
    Validate raw reference data.

    Raises:
        pydantic.ValidationError: On malformed entries or duplicate speeds
    """
    return ReferenceData.model_validate(data)


def load_reference_data(path: Optional[str] = None) -> ReferenceData:
    """
    Load tire specifications and the speed table from JSON.

    Args:
        path: Path to JSON file. If None, uses default location.

    Returns:
        ReferenceData with tires and speed table

    Raises:
        FileNotFoundError: If the data file doesn't exist
        pydantic.ValidationError: If the file content is invalid
    """
    file_path = Path(path) if path else resolve_data_file()

    if not file_path.exists():
        raise FileNotFoundError(
            f"Reference data not found at {file_path}. "
            f"Pass --data or place {DEFAULT_DATA_NAME} in ./data/."
        )

    with open(file_path, "r", encoding="utf-8") as f:
        data = json.load(f)

    return parse_reference_data(data)
