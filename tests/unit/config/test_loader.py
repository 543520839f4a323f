"""Tests for configuration file loading."""

from __future__ import annotations

from pathlib import Path

import pytest

from videofix.config import (
    DEFAULT_CONFIG_FILE,
    ConfigError,
    EnvReader,
    get_default_config_path,
    load_config,
    load_config_from_dict,
)
from videofix.policy import AllowFormats, DefaultFormat

MINIMAL = {
    "default_target": "streaming",
    "targets": [
        {
            "name": "streaming",
            "format_spec": {
                "container": {"allow": ["matroska"]},
                "video": {"allow": ["h264"]},
                "audio": {"allow": ["aac"]},
            },
        }
    ],
}


class TestGetDefaultConfigPath:
    """Tests for get_default_config_path function."""

    def test_default_location(self) -> None:
        """Should use ~/.videofix/config.yaml without the env variable."""
        assert get_default_config_path(EnvReader(env={})) == DEFAULT_CONFIG_FILE

    def test_env_override(self, temp_dir: Path) -> None:
        """Should honour VIDEOFIX_CONFIG_PATH even if the file is missing."""
        path = temp_dir / "custom.yaml"
        reader = EnvReader(env={"VIDEOFIX_CONFIG_PATH": str(path)})
        assert get_default_config_path(reader) == path


class TestLoadConfig:
    """Tests for load_config function."""

    def test_loads_sample_config(self, config_file: Path) -> None:
        """Should load targets in order, in every accepted spelling."""
        config = load_config(config_file, EnvReader(env={}))

        assert config.source == config_file
        assert config.policy.default_target == "streaming"
        assert [t.name for t in config.policy.targets] == ["streaming", "archive"]

        archive = config.policy.targets[1]
        assert archive.format_spec.audio == AllowFormats(allow=frozenset({"flac"}))
        assert archive.default == DefaultFormat(
            video="hevc", audio="flac", pix_fmt="yuv420p10le"
        )

    def test_uses_env_path_when_no_explicit_path(self, config_file: Path) -> None:
        """Should read the file named by VIDEOFIX_CONFIG_PATH."""
        reader = EnvReader(env={"VIDEOFIX_CONFIG_PATH": str(config_file)})
        config = load_config(env_reader=reader)
        assert config.source == config_file

    def test_missing_file(self, temp_dir: Path) -> None:
        """Should raise ConfigError for a missing file."""
        with pytest.raises(ConfigError, match="config file not found"):
            load_config(temp_dir / "missing.yaml", EnvReader(env={}))

    def test_invalid_yaml(self, temp_dir: Path) -> None:
        """Should raise ConfigError for malformed YAML."""
        path = temp_dir / "bad.yaml"
        path.write_text("targets: [unclosed\n")

        with pytest.raises(ConfigError, match="invalid YAML syntax"):
            load_config(path, EnvReader(env={}))

    def test_empty_file(self, temp_dir: Path) -> None:
        """Should raise ConfigError for an empty file."""
        path = temp_dir / "empty.yaml"
        path.write_text("")

        with pytest.raises(ConfigError, match="empty"):
            load_config(path, EnvReader(env={}))

    def test_not_a_mapping(self, temp_dir: Path) -> None:
        """Should raise ConfigError when the document is a list."""
        path = temp_dir / "list.yaml"
        path.write_text("- a\n- b\n")

        with pytest.raises(ConfigError, match="must be a YAML mapping"):
            load_config(path, EnvReader(env={}))

    def test_error_carries_path(self, temp_dir: Path) -> None:
        """Should include the file path in validation errors."""
        path = temp_dir / "invalid.yaml"
        path.write_text("default_target: streaming\n")

        with pytest.raises(ConfigError) as exc_info:
            load_config(path, EnvReader(env={}))

        assert exc_info.value.path == path
        assert "targets" in str(exc_info.value)


class TestLoadConfigFromDict:
    """Tests for load_config_from_dict function."""

    def test_app_sections_optional(self) -> None:
        """Should default logging and tools when absent."""
        config = load_config_from_dict(MINIMAL, EnvReader(env={}))

        assert config.logging.level == "warning"
        assert config.tools.ffmpeg is None
        assert config.tools.ffprobe is None

    def test_logging_section(self) -> None:
        """Should read the logging section."""
        data = {**MINIMAL, "logging": {"level": "debug", "format": "json"}}
        config = load_config_from_dict(data, EnvReader(env={}))

        assert config.logging.level == "debug"
        assert config.logging.format == "json"

    def test_invalid_logging_level(self) -> None:
        """Should reject an unknown logging level."""
        data = {**MINIMAL, "logging": {"level": "loud"}}
        with pytest.raises(ConfigError, match="logging"):
            load_config_from_dict(data, EnvReader(env={}))

    def test_tools_from_file(self) -> None:
        """Should read tool paths from the tools section."""
        data = {**MINIMAL, "tools": {"ffmpeg": "/opt/ffmpeg/bin/ffmpeg"}}
        config = load_config_from_dict(data, EnvReader(env={}))

        assert config.tools.ffmpeg == Path("/opt/ffmpeg/bin/ffmpeg")
        assert config.tools.ffprobe is None

    def test_tools_env_overrides_file(self) -> None:
        """Should prefer VIDEOFIX_FFPROBE_PATH over the file."""
        data = {**MINIMAL, "tools": {"ffprobe": "/opt/ffprobe"}}
        reader = EnvReader(env={"VIDEOFIX_FFPROBE_PATH": "/usr/local/bin/ffprobe"})
        config = load_config_from_dict(data, reader)

        assert config.tools.ffprobe == Path("/usr/local/bin/ffprobe")

    def test_unknown_tool_rejected(self) -> None:
        """Should reject unknown keys in the tools section."""
        data = {**MINIMAL, "tools": {"mkvmerge": "/usr/bin/mkvmerge"}}
        with pytest.raises(ConfigError, match="unknown keys"):
            load_config_from_dict(data, EnvReader(env={}))

    def test_unknown_top_level_key_rejected(self) -> None:
        """Should reject unknown top-level keys."""
        data = {**MINIMAL, "profiles": {}}
        with pytest.raises(ConfigError, match="invalid configuration"):
            load_config_from_dict(data, EnvReader(env={}))

    def test_validation_error_names_field(self) -> None:
        """Should point at the offending field."""
        data = {
            "default_target": "streaming",
            "targets": [{"name": "streaming", "format_spec": {}}],
        }
        with pytest.raises(ConfigError, match="targets.0.format_spec"):
            load_config_from_dict(data, EnvReader(env={}))
