"""Tests for policy pydantic models."""

import pytest
from pydantic import ValidationError

from videofix.policy import (
    AllowFormats,
    DefaultFormat,
    FormatSpec,
    PolicyConfig,
    RejectFormats,
    Target,
)


class TestRules:
    """Tests for AllowFormats and RejectFormats."""

    def test_allow_permits_listed_values_only(self):
        """An allow rule accepts exactly its members."""
        rule = AllowFormats(allow=frozenset({"h264", "hevc"}))
        assert rule.permits("h264")
        assert not rule.permits("mpeg4")

    def test_reject_permits_everything_else(self):
        """A reject rule accepts anything but its members."""
        rule = RejectFormats(reject=frozenset({"dts"}))
        assert rule.permits("aac")
        assert not rule.permits("dts")

    def test_empty_allow_rejects_everything(self):
        """An empty allow list accepts no value."""
        assert not AllowFormats(allow=frozenset()).permits("h264")

    def test_empty_reject_accepts_everything(self):
        """An empty reject list accepts any value."""
        assert RejectFormats(reject=frozenset()).permits("anything")

    def test_rules_are_frozen(self):
        """Rules cannot be modified after creation."""
        rule = AllowFormats(allow=frozenset({"h264"}))
        with pytest.raises(ValidationError):
            rule.allow = frozenset()


class TestFormatSpecSpellings:
    """Tests for the accepted rule spellings."""

    def test_lowercase_tagged_rules(self):
        """Each dimension takes an allow or reject mapping."""
        spec = FormatSpec.model_validate(
            {
                "container": {"allow": ["matroska"]},
                "video": {"allow": ["h264"]},
                "audio": {"reject": ["dts"]},
                "pix_fmt": {"allow": ["yuv420p"]},
            }
        )

        assert isinstance(spec.container, AllowFormats)
        assert isinstance(spec.audio, RejectFormats)
        assert spec.audio.reject == frozenset({"dts"})

    def test_capitalised_tagged_rules(self):
        """Capitalised variant names are accepted."""
        spec = FormatSpec.model_validate(
            {
                "container": {"Allow": ["matroska"]},
                "video": {"Reject": ["mpeg4"]},
                "audio": {"allow": ["aac"]},
            }
        )

        assert spec.container == AllowFormats(allow=frozenset({"matroska"}))
        assert spec.video == RejectFormats(reject=frozenset({"mpeg4"}))

    def test_nested_single_variant_form(self):
        """The nested form applies one variant to every dimension."""
        nested = FormatSpec.model_validate(
            {
                "Allow": {
                    "container": ["matroska"],
                    "video": ["hevc"],
                    "audio": ["flac"],
                    "pix_fmt": ["yuv420p10le"],
                }
            }
        )
        flat = FormatSpec.model_validate(
            {
                "container": {"allow": ["matroska"]},
                "video": {"allow": ["hevc"]},
                "audio": {"allow": ["flac"]},
                "pix_fmt": {"allow": ["yuv420p10le"]},
            }
        )

        assert nested == flat

    def test_pix_fmt_defaults_to_unchecked(self):
        """Omitting pix_fmt accepts every pixel format."""
        spec = FormatSpec.model_validate(
            {
                "container": {"allow": ["matroska"]},
                "video": {"allow": ["h264"]},
                "audio": {"allow": ["aac"]},
            }
        )

        assert spec.pix_fmt == RejectFormats(reject=frozenset())

    def test_unknown_variant_rejected(self):
        """Only allow and reject are valid rule variants."""
        with pytest.raises(ValidationError):
            FormatSpec.model_validate(
                {
                    "container": {"prefer": ["matroska"]},
                    "video": {"allow": ["h264"]},
                    "audio": {"allow": ["aac"]},
                }
            )

    def test_both_variants_rejected(self):
        """A rule cannot carry both lists."""
        with pytest.raises(ValidationError):
            FormatSpec.model_validate(
                {
                    "container": {"allow": ["matroska"], "reject": ["avi"]},
                    "video": {"allow": ["h264"]},
                    "audio": {"allow": ["aac"]},
                }
            )

    def test_unknown_dimension_rejected(self):
        """Extra dimensions are not silently ignored."""
        with pytest.raises(ValidationError):
            FormatSpec.model_validate(
                {
                    "container": {"allow": ["matroska"]},
                    "video": {"allow": ["h264"]},
                    "audio": {"allow": ["aac"]},
                    "subtitle": {"allow": ["srt"]},
                }
            )

    def test_missing_dimension_rejected(self):
        """container, video and audio are required."""
        with pytest.raises(ValidationError):
            FormatSpec.model_validate({"container": {"allow": ["matroska"]}})


class TestTargetAndPolicyConfig:
    """Tests for Target, DefaultFormat and PolicyConfig."""

    def test_default_format_defaults(self):
        """Omitted defaults convert to h264/aac/yuv420p."""
        default = DefaultFormat()
        assert (default.video, default.audio, default.pix_fmt) == (
            "h264",
            "aac",
            "yuv420p",
        )

    def test_target_default_is_optional(self, streaming_target):
        """A target without a default section gets DefaultFormat()."""
        assert streaming_target.default == DefaultFormat()

    def test_empty_target_name_rejected(self):
        """Target names must not be empty."""
        with pytest.raises(ValidationError):
            Target.model_validate(
                {
                    "name": "",
                    "format_spec": {
                        "container": {"allow": ["matroska"]},
                        "video": {"allow": ["h264"]},
                        "audio": {"allow": ["aac"]},
                    },
                }
            )

    def test_empty_default_codec_rejected(self):
        """Default codecs must not be empty."""
        with pytest.raises(ValidationError):
            DefaultFormat(video="")

    def test_targets_keep_order(self, policy_config):
        """Targets are kept in file order."""
        assert [t.name for t in policy_config.targets] == ["streaming", "archive"]

    def test_default_target_required(self):
        """default_target is required."""
        with pytest.raises(ValidationError):
            PolicyConfig.model_validate({"targets": []})
