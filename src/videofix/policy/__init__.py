"""Format policy: targets, compliance evaluation and remediation planning.

- models: Pydantic policy models (FormatSpec, DefaultFormat, Target, ...)
- evaluator: evaluate() a FileMetadata against a FormatSpec
- remediation: plan_remediation() for a non-compliant file
- targets: resolve_target() / select_target() by name
"""

from videofix.policy.evaluator import evaluate, is_compliant
from videofix.policy.exceptions import (
    PolicyError,
    RemediationPreconditionError,
    TargetNotFoundError,
)
from videofix.policy.models import (
    AllowFormats,
    DefaultFormat,
    Formats,
    FormatSpec,
    PolicyConfig,
    RejectFormats,
    Target,
)
from videofix.policy.remediation import (
    COPY,
    OUTPUT_CONTAINER,
    REMEDIATED_EXTENSION,
    RemediationDirective,
    derive_output_path,
    ensure_output_free,
    plan_remediation,
)
from videofix.policy.targets import (
    find_config_problems,
    resolve_target,
    select_target,
)

__all__ = [
    # Models
    "AllowFormats",
    "DefaultFormat",
    "Formats",
    "FormatSpec",
    "PolicyConfig",
    "RejectFormats",
    "Target",
    # Evaluation
    "evaluate",
    "is_compliant",
    # Remediation
    "COPY",
    "OUTPUT_CONTAINER",
    "REMEDIATED_EXTENSION",
    "RemediationDirective",
    "derive_output_path",
    "ensure_output_free",
    "plan_remediation",
    # Targets
    "find_config_problems",
    "resolve_target",
    "select_target",
    # Errors
    "PolicyError",
    "RemediationPreconditionError",
    "TargetNotFoundError",
]
