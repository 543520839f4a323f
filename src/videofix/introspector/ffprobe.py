"""Media introspection backed by the ffprobe executable."""

import json
import logging
import subprocess  # nosec B404 - ffprobe is an external executable
from pathlib import Path

from videofix.domain import FileMetadata
from videofix.executor.interface import require_tool
from videofix.introspector.interface import MediaIntrospectionError
from videofix.introspector.parsers import parse_ffprobe_output

logger = logging.getLogger(__name__)


def build_ffprobe_command(ffprobe_path: Path | str, path: Path) -> list[str]:
    """Build the ffprobe command that dumps streams and format as JSON."""
    return [
        str(ffprobe_path),
        "-v",
        "error",
        "-print_format",
        "json",
        "-show_streams",
        "-show_format",
        str(path),
    ]


class FFprobeIntrospector:
    """MediaIntrospector that shells out to ffprobe.

    The executable is located once, at construction, so a missing ffprobe is
    reported before any file is touched.
    """

    PROBE_TIMEOUT: int = 60

    def __init__(self, ffprobe_path: Path | None = None) -> None:
        """Locate ffprobe.

        Args:
            ffprobe_path: Configured ffprobe location. PATH is searched when
                it is None or does not exist.

        Raises:
            ToolNotAvailableError: If ffprobe cannot be found.
        """
        self._ffprobe_path = require_tool("ffprobe", ffprobe_path)

    def get_file_metadata(self, path: Path) -> FileMetadata:
        """Probe a file and build its FileMetadata.

        Raises:
            MediaIntrospectionError: If ffprobe fails, or its output does not
                describe one video and one audio stream.
        """
        if not path.exists():
            raise MediaIntrospectionError(f"File not found: {path}")

        stdout = self._probe(path)
        return parse_ffprobe_output(path, self._decode(path, stdout))

    def _probe(self, path: Path) -> str:
        command = build_ffprobe_command(self._ffprobe_path, path)
        logger.debug("Probing %s", path)
        try:
            result = subprocess.run(  # nosec B603 - resolved tool path, no shell
                command,
                capture_output=True,
                text=True,
                errors="replace",
                check=True,
                timeout=self.PROBE_TIMEOUT,
            )
        except subprocess.TimeoutExpired as e:
            raise MediaIntrospectionError(
                f"ffprobe timed out for {path} after {e.timeout}s"
            ) from e
        except subprocess.CalledProcessError as e:
            detail = (e.stderr or "").strip() or f"exit status {e.returncode}"
            raise MediaIntrospectionError(f"ffprobe error in {path}: {detail}") from e
        except OSError as e:
            raise MediaIntrospectionError(f"could not run ffprobe: {e}") from e
        return result.stdout

    @staticmethod
    def _decode(path: Path, stdout: str) -> dict:
        try:
            data = json.loads(stdout)
        except json.JSONDecodeError as e:
            raise MediaIntrospectionError(
                f"Invalid ffprobe output for {path}: {e}"
            ) from e

        if not isinstance(data, dict):
            raise MediaIntrospectionError(f"Invalid ffprobe output for {path}")
        for key in ("streams", "format"):
            if key not in data:
                raise MediaIntrospectionError(
                    f"Missing '{key}' in ffprobe output for {path}; "
                    "the file may be damaged or not a media file"
                )
        return data
