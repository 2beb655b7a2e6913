"""Scope resolution and effective rule collection.

A run always applies the ``default`` scope plus exactly one of ``dev`` or
``no-dev``. The effective rule set for a package type is the concatenation
of each active scope's patterns, minus every pattern listed in ``exclude``.

Exclusion compares pattern strings verbatim. It never looks at expanded
paths: with rules ``["*.md"]`` and ``exclude: ["README.md"]`` the file
README.md is still deleted, because ``*.md`` is not itself excluded.
"""

from collections.abc import Sequence

from drupal_cleanup.models.config import CleanupConfig, Scope

__all__ = [
    "Scope",
    "collect_rules",
    "is_package_type_eligible",
    "resolve_scopes",
]


def resolve_scopes(dev_mode: bool) -> tuple[Scope, Scope]:
    """Get the active rule scopes in application order.

    Args:
        dev_mode: Whether dev requirements are installed in this run.

    Returns:
        (DEFAULT, DEV) in dev mode, (DEFAULT, NO_DEV) otherwise.
    """
    return (Scope.DEFAULT, Scope.DEV if dev_mode else Scope.NO_DEV)


def is_package_type_eligible(
    config: CleanupConfig,
    package_type: str,
    scopes: Sequence[Scope],
) -> bool:
    """Check whether any active scope configures the package type.

    An entry counts as configured even when its pattern list is empty.

    Args:
        config: Cleanup configuration.
        package_type: Composer package type.
        scopes: Active scopes from resolve_scopes().

    Returns:
        True if at least one active rule scope has an entry for the type.
    """
    return any(
        config.rules_for(scope, package_type) is not None
        for scope in scopes
        if scope != Scope.EXCLUDE
    )


def collect_rules(
    config: CleanupConfig,
    package_type: str,
    scopes: Sequence[Scope],
) -> list[str]:
    """Build the effective rule set for a package type.

    Args:
        config: Cleanup configuration.
        package_type: Composer package type.
        scopes: Active scopes from resolve_scopes().

    Returns:
        Patterns in scope order, duplicates kept, excluded patterns removed.
    """
    rules: list[str] = []
    for scope in scopes:
        if scope == Scope.EXCLUDE:
            continue
        rules.extend(config.rules_for(scope, package_type) or [])

    excluded = set(config.exclude)
    return [rule for rule in rules if rule not in excluded]
