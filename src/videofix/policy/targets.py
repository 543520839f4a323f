"""Target lookup within a policy configuration."""

from collections import Counter
from collections.abc import Sequence

from videofix.policy.exceptions import TargetNotFoundError
from videofix.policy.models import PolicyConfig, Target


def resolve_target(name: str, targets: Sequence[Target]) -> Target:
    """Return the first target whose name equals name exactly.

    Names are compared case-sensitively. Duplicate names are not rejected
    here; the earliest entry wins.

    Raises:
        TargetNotFoundError: If no target has that name.
    """
    for target in targets:
        if target.name == name:
            return target
    raise TargetNotFoundError(name)


def select_target(config: PolicyConfig, name: str | None = None) -> Target:
    """Resolve the requested target, falling back to config.default_target.

    Raises:
        TargetNotFoundError: If the requested (or default) name is unknown.
    """
    requested = config.default_target if name is None else name
    return resolve_target(requested, config.targets)


def find_config_problems(config: PolicyConfig) -> list[str]:
    """Check configuration invariants that lookups do not enforce.

    Returns:
        List of problem descriptions. Empty list means no problems.
    """
    problems: list[str] = []

    names = [target.name for target in config.targets]
    if config.default_target not in names:
        problems.append(
            f'default_target "{config.default_target}" does not match any target'
        )

    for name, count in Counter(names).items():
        if count > 1:
            problems.append(
                f'target name "{name}" is used {count} times; the first one wins'
            )

    return problems
