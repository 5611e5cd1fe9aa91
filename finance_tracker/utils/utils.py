"""Generic project helpers."""

from pathlib import Path
from uuid import uuid4


def get_project_root() -> Path:
    """Return the repository root directory."""
    return Path(__file__).resolve().parents[2]


def new_record_id() -> str:
    """Return a fresh store identifier."""
    return uuid4().hex


__all__ = ["get_project_root", "new_record_id"]
