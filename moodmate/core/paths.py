#!/usr/bin/env python3
"""
paths.py
-------------------
Path constants for the MoodMate journal.

Defines the default project paths as Path objects for consistent path
handling across the codebase. Every path here is a default only: the
configuration file and the CLI options can relocate data, exports and logs.

The project structure:
    ROOT/
    ├── moodmate/      # Package code
    ├── data/          # User data
    │   ├── storage/   # Local storage documents (one JSON file per key)
    │   └── exports/   # Exported journals (CSV/JSON "downloads")
    ├── logs/          # Application logs
    └── config.yaml    # Optional configuration file
"""
# --- Annotations ---
from __future__ import annotations

# --- Standard library imports ---
from pathlib import Path


def _get_project_root() -> Path:
    """
    Determine project root directory.

    Assumes this file is at ROOT/moodmate/core/paths.py and navigates up
    the directory tree to find ROOT.

    Returns:
        Path object for project root

    Raises:
        RuntimeError: If project root cannot be determined or validated
    """
    current_file = Path(__file__).resolve()

    # paths.py -> core/ -> moodmate/ -> ROOT/
    root = current_file.parent.parent.parent

    if not (root / "moodmate").is_dir():
        raise RuntimeError(
            f"Cannot determine valid project root. "
            f"Expected {root / 'moodmate'} to exist. "
            f"Current file: {current_file}"
        )

    return root


# ----- Project directory -----
ROOT: Path = _get_project_root()
DATA_DIR = ROOT / "data"

# ---- Storage ----
STORAGE_DIR_NAME = "storage"
STORAGE_DIR = DATA_DIR / STORAGE_DIR_NAME

# ---- Exports ----
EXPORT_DIR_NAME = "exports"
EXPORT_DIR = DATA_DIR / EXPORT_DIR_NAME

# ---- Logs & Config ----
LOG_DIR = ROOT / "logs"
CONFIG_PATH = ROOT / "config.yaml"
