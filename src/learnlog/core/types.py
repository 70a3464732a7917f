"""Shared type aliases used across learnlog."""

from pathlib import Path

# Path types
PathLike = str | Path
