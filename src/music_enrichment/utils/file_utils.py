# ============================================================================
# src/music_enrichment/utils/file_utils.py
# ============================================================================
"""
File utilities for the music enrichment pipeline.
"""

from pathlib import Path
from typing import Any
import json


def ensure_directory(path: Path) -> Path:
    """
    Ensure directory exists, create if not.

    Args:
        path: Directory path

    Returns:
        Path to directory
    """
    path.mkdir(parents=True, exist_ok=True)
    return path


def read_json(file_path: Path) -> Any:
    """
    Read JSON file.

    Args:
        file_path: Path to JSON file

    Returns:
        Parsed JSON data
    """
    with open(file_path, 'r', encoding='utf-8') as f:
        return json.load(f)


def write_json(data: Any, file_path: Path, indent: int = 2) -> None:
    """
    Write data to JSON file.

    Args:
        data: Data to write
        file_path: Output file path
        indent: JSON indentation
    """
    ensure_directory(file_path.parent)

    with open(file_path, 'w', encoding='utf-8') as f:
        json.dump(data, f, indent=indent, ensure_ascii=False)
