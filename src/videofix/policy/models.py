"""Pydantic models for format policies.

A policy is a list of named targets. Each target pairs a FormatSpec (what is
acceptable) with a DefaultFormat (what to convert to when it is not). All
models are frozen and reject unknown keys.

Each dimension of a FormatSpec carries its own rule, written in YAML as
either of::

    video: {allow: [h264, hevc]}
    video: {reject: [mpeg4]}

The capitalised spellings ``Allow``/``Reject`` are accepted too, as is the
older nested form where one variant wraps the lists of every dimension::

    format_spec:
      Allow:
        container: [mp4]
        video: [h264]
        audio: [aac]
"""

from typing import Any

from pydantic import BaseModel, ConfigDict, Field, model_validator

RULE_VARIANTS = frozenset({"allow", "reject"})


class AllowFormats(BaseModel):
    """Rule that accepts only the listed values."""

    model_config = ConfigDict(extra="forbid", frozen=True)

    allow: frozenset[str]

    def permits(self, value: str) -> bool:
        """Return True if value is in the allow list."""
        return value in self.allow


class RejectFormats(BaseModel):
    """Rule that accepts anything except the listed values.

    An empty reject list accepts every value, which is how a dimension is
    left unchecked.
    """

    model_config = ConfigDict(extra="forbid", frozen=True)

    reject: frozenset[str]

    def permits(self, value: str) -> bool:
        """Return True if value is not in the reject list."""
        return value not in self.reject


Formats = AllowFormats | RejectFormats


def _normalize_rule(rule: Any) -> Any:
    """Lower-case the variant key of a single rule mapping."""
    if isinstance(rule, dict) and len(rule) == 1:
        ((key, values),) = rule.items()
        if isinstance(key, str) and key.casefold() in RULE_VARIANTS:
            return {key.casefold(): values}
    return rule


class FormatSpec(BaseModel):
    """Acceptable formats, one independent rule per dimension."""

    model_config = ConfigDict(extra="forbid", frozen=True)

    container: Formats
    video: Formats
    audio: Formats
    pix_fmt: Formats = Field(
        default_factory=lambda: RejectFormats(reject=frozenset())
    )

    @model_validator(mode="before")
    @classmethod
    def normalize_rule_spelling(cls, data: Any) -> Any:
        """Accept capitalised variants and the nested single-variant form."""
        if not isinstance(data, dict):
            return data

        if len(data) == 1:
            ((key, lists),) = data.items()
            if (
                isinstance(key, str)
                and key.casefold() in RULE_VARIANTS
                and isinstance(lists, dict)
            ):
                variant = key.casefold()
                data = {
                    dimension: {variant: values} for dimension, values in lists.items()
                }

        return {dimension: _normalize_rule(rule) for dimension, rule in data.items()}


class DefaultFormat(BaseModel):
    """Codecs and pixel format to convert to when a dimension fails."""

    model_config = ConfigDict(extra="forbid", frozen=True)

    video: str = Field(default="h264", min_length=1)
    audio: str = Field(default="aac", min_length=1)
    pix_fmt: str = Field(default="yuv420p", min_length=1)


class Target(BaseModel):
    """A named format specification and its remediation defaults."""

    model_config = ConfigDict(extra="forbid", frozen=True)

    name: str = Field(min_length=1)
    format_spec: FormatSpec
    default: DefaultFormat = Field(default_factory=DefaultFormat)


class PolicyConfig(BaseModel):
    """Ordered targets plus the name of the one used when none is requested."""

    model_config = ConfigDict(extra="forbid", frozen=True)

    default_target: str
    targets: tuple[Target, ...]
