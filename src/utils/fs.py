"""Filesystem helpers: atomic byte writes and YAML config reads.

Lowest layer; callers hand in bytes, never canvases.

Usage:
    from src.utils import fs
    fs.atomic_write_bytes(out_dir / "frame.png", png_bytes)
    cfg = fs.load_yaml("configs/render_canvas_v1.yaml")
"""

import os
from pathlib import Path
from typing import Any, Dict, Union

import yaml

PathLike = Union[str, Path]


def ensure_dir(p: PathLike) -> Path:
    """mkdir -p; returns the directory as a Path."""
    p = Path(p)
    p.mkdir(parents=True, exist_ok=True)
    return p


def _sibling_tmp(path: Path, suffix: str) -> Path:
    # Same directory as the target so replace() never crosses filesystems
    return path.with_name(path.name + suffix)


def atomic_write_bytes(path: PathLike, data: bytes, tmp_suffix: str = ".tmp") -> None:
    """Replace ``path`` with ``data`` in one rename.

    Readers see either the previous file or the complete new one.

    Raises
    ------
    RuntimeError
        Any OS failure (parent not creatable, disk full, rename refused),
        chained to the OSError. No tmp file is left behind.
    """
    path = Path(path)
    tmp_path = _sibling_tmp(path, tmp_suffix)

    try:
        ensure_dir(path.parent)
        with open(tmp_path, 'wb') as f:
            f.write(data)
            f.flush()
            os.fsync(f.fileno())
        tmp_path.replace(path)
    except OSError as e:
        if tmp_path.exists():
            tmp_path.unlink()
        raise RuntimeError(f"Failed to write {path} atomically: {e}") from e


def load_yaml(path: PathLike) -> Dict[str, Any]:
    """safe_load a YAML file; an empty document reads as ``{}``.

    Raises FileNotFoundError for a missing file and yaml.YAMLError, naming
    the file, for malformed content.
    """
    path = Path(path)
    if not path.is_file():
        raise FileNotFoundError(f"YAML file not found: {path}")

    text = path.read_text(encoding='utf-8')
    try:
        data = yaml.safe_load(text)
    except yaml.YAMLError as e:
        raise yaml.YAMLError(f"{path}: {e}") from e
    return data if data is not None else {}
