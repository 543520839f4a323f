"""Scanner module for videofix.

Public API:
    - select_files: Files to check under a file or directory root
    - VIDEO_EXTENSIONS: Extensions picked up from directories
"""

from videofix.scanner.selection import VIDEO_EXTENSIONS, is_video_file, select_files

__all__ = [
    "VIDEO_EXTENSIONS",
    "is_video_file",
    "select_files",
]
