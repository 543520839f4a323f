"""Custom exceptions for policy operations.

This module defines exceptions raised while resolving targets and planning
remediation for non-compliant files.
"""

from pathlib import Path


class PolicyError(Exception):
    """Base class for policy-related errors."""

    pass


class TargetNotFoundError(PolicyError):
    """Raised when a requested target name is not in the configuration."""

    def __init__(self, target_name: str) -> None:
        self.target_name = target_name
        super().__init__(
            f'could not find requested target "{target_name}" in config'
        )


class RemediationPreconditionError(PolicyError):
    """Raised when a remediation would overwrite an existing file.

    The transcoder is never invoked when this error is raised.
    """

    def __init__(self, output_path: Path) -> None:
        self.output_path = output_path
        super().__init__(f"fix target {output_path} already exists")
