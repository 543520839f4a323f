"""MediaIntrospector interface for media metadata extraction."""

from pathlib import Path
from typing import Protocol

from videofix.domain import FileMetadata


class MediaIntrospectionError(Exception):
    """Raised when media introspection fails."""

    pass


class StreamCountError(MediaIntrospectionError):
    """Raised when a file does not have exactly one stream of a kind."""

    def __init__(self, stream_type: str, count: int, file_path: Path | str) -> None:
        """Initialize the error.

        Args:
            stream_type: Kind of stream that was counted ("video" or "audio").
            count: Number of matching streams found.
            file_path: File that was probed.
        """
        self.stream_type = stream_type
        self.count = count
        self.file_path = str(file_path)
        if count == 0:
            message = f"no {stream_type} stream found in {file_path}"
        else:
            message = f"more than one matching {stream_type} stream in {file_path}"
        super().__init__(message)


class StreamFieldError(MediaIntrospectionError):
    """Raised when a stream lacks a field the compliance check needs."""

    def __init__(self, field: str, stream_index: int, file_path: Path | str) -> None:
        self.field = field
        self.stream_index = stream_index
        self.file_path = str(file_path)
        super().__init__(f"no {field} found for stream {stream_index} in {file_path}")


class MediaIntrospector(Protocol):
    """Protocol for media introspection implementations.

    Implementations produce a FileMetadata for a path or raise
    MediaIntrospectionError; they never return partial records.
    """

    def get_file_metadata(self, path: Path) -> FileMetadata:
        """Extract format metadata from a media file.

        Args:
            path: Path to the media file.

        Returns:
            FileMetadata describing the file's container and streams.

        Raises:
            MediaIntrospectionError: If the file cannot be introspected.
        """
        ...
