"""Selection of the media files to check under a root path."""

import logging
from pathlib import Path

logger = logging.getLogger(__name__)

# Container extensions considered when a directory is given
VIDEO_EXTENSIONS: frozenset[str] = frozenset(
    {".mkv", ".mp4", ".avi", ".webm", ".mov", ".wmv"}
)


def is_video_file(path: Path) -> bool:
    """Return True if path is a regular file with a whitelisted extension."""
    return path.is_file() and path.suffix.lower() in VIDEO_EXTENSIONS


def select_files(root: Path) -> list[Path]:
    """Return the files to check for a root path.

    A file root selects exactly that file, whatever its extension. A
    directory root selects its direct child files with a whitelisted
    extension; subdirectories are not searched. Files are returned in
    directory-listing order.

    Args:
        root: File or directory to check.

    Returns:
        Selected file paths.

    Raises:
        FileNotFoundError: If root does not exist.
    """
    if root.is_file():
        return [root]
    if not root.is_dir():
        raise FileNotFoundError(f"Path not found: {root}")

    selected = [path for path in root.iterdir() if is_video_file(path)]
    logger.debug("Selected %d of the entries in %s", len(selected), root)
    return selected
