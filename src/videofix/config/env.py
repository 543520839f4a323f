"""Environment variable access that tests can substitute."""

from __future__ import annotations

import logging
import os
from collections.abc import Mapping
from pathlib import Path

logger = logging.getLogger(__name__)


class EnvReader:
    """Typed reads from an environment mapping (os.environ by default).

    Example:
        reader = EnvReader(env={"VIDEOFIX_FFMPEG_PATH": "/opt/ffmpeg"})
        reader.get_path("VIDEOFIX_FFMPEG_PATH", must_exist=False)
    """

    def __init__(self, env: Mapping[str, str] | None = None) -> None:
        self._env = os.environ if env is None else env

    def get_path(
        self, var: str, must_exist: bool = True, default: Path | None = None
    ) -> Path | None:
        """Read a path, expanding ``~``.

        Unset and empty variables give default. With must_exist, a path
        that is not on disk is logged and also gives default.
        """
        raw = self._env.get(var) or ""
        if not raw:
            return default

        path = Path(raw).expanduser()
        if must_exist and not path.exists():
            logger.warning(
                "Environment variable %s points to non-existent path: %s", var, raw
            )
            return default
        return path
