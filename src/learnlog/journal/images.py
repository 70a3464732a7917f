"""Turn image files into embedded ``data:`` URL strings.

Logs store images inline so the whole collection stays one JSON value.
The journal never looks inside these strings; it only stores and counts them.
"""

from __future__ import annotations

import base64
import mimetypes
from collections.abc import Iterable
from pathlib import Path

from loguru import logger

from learnlog.core.exceptions import FileIOError
from learnlog.core.types import PathLike


def file_to_data_url(path: PathLike) -> str:
    """Read one file and encode it as a base64 data URL."""
    file_path = Path(path).expanduser()
    try:
        raw = file_path.read_bytes()
    except OSError as e:
        raise FileIOError(f"Failed to read file {file_path}: {e}") from e

    mime, _ = mimetypes.guess_type(file_path.name)
    if mime is None:
        logger.debug(f"Unknown image type for {file_path.name}, using octet-stream")
        mime = "application/octet-stream"
    encoded = base64.b64encode(raw).decode("ascii")
    return f"data:{mime};base64,{encoded}"


def files_to_data_urls(paths: Iterable[PathLike]) -> list[str]:
    """Encode every file, in order. Fails on the first unreadable file."""
    return [file_to_data_url(p) for p in paths]
