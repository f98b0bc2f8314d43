"""Provides the fixed paths used by RegexLoops."""

from pathlib import Path
from typing import Final

CONFIG_FILE_NAME: Final[str] = "regexloops.yaml"
STATE_SUBDIR: Final[Path] = Path(".regexloops")


def get_log_dir(root_path: Path | None = None) -> Path:
    """Return the path to the log directory under `root_path` (default: CWD)."""
    return (root_path or Path.cwd()) / STATE_SUBDIR / "logs"


def ensure_dir_exists(path: Path) -> None:
    """Ensure a directory exists, creating it if necessary."""
    path.mkdir(parents=True, exist_ok=True)
