"""Models for the ``extra.drupal-cleanup`` section of composer.json.

The section is keyed first by scope, then by Composer package type::

    "drupal-cleanup": {
        "default": {"drupal-module": ["tests", "*.md"]},
        "dev":     {"drupal-module": []},
        "no-dev":  {"drupal-theme": ["node_modules"]},
        "exclude": ["README.md"]
    }

Every key is optional.
"""

from enum import Enum
from typing import Annotated

from pydantic import BaseModel, ConfigDict, Field

# Composer package type -> ordered glob patterns. A null value is
# treated exactly like a missing key.
ScopeRules = dict[str, list[str] | None]


class Scope(str, Enum):
    """Named configuration bucket controlling when a rule applies.

    Attributes:
        DEFAULT: Always applied.
        DEV: Applied when Composer installs dev requirements.
        NO_DEV: Applied when Composer runs with --no-dev.
        EXCLUDE: Global list of patterns removed from every rule set.
    """

    DEFAULT = "default"
    DEV = "dev"
    NO_DEV = "no-dev"
    EXCLUDE = "exclude"


class CleanupConfig(BaseModel):
    """Cleanup rules read from composer.json.

    Attributes:
        default: Rules applied on every run.
        dev: Rules applied only in dev mode.
        no_dev: Rules applied only when dev requirements are skipped.
        exclude: Patterns that are dropped from every effective rule set.
    """

    model_config = ConfigDict(extra="forbid", populate_by_name=True, frozen=True)

    default: Annotated[
        ScopeRules,
        Field(default_factory=dict, description="Rules applied on every run"),
    ]
    dev: Annotated[
        ScopeRules,
        Field(default_factory=dict, description="Rules applied in dev mode"),
    ]
    no_dev: Annotated[
        ScopeRules,
        Field(default_factory=dict, alias="no-dev", description="Rules applied with --no-dev"),
    ]
    exclude: Annotated[
        list[str],
        Field(default_factory=list, description="Patterns never applied"),
    ]

    def rules_for(self, scope: Scope, package_type: str) -> list[str] | None:
        """Get the configured patterns for a package type under one scope.

        Args:
            scope: A rule scope (default, dev or no-dev).
            package_type: Composer package type, e.g. "drupal-module".

        Returns:
            The pattern list, or None if the scope has no entry for the type.

        Raises:
            ValueError: If called with the exclude scope.
        """
        if scope == Scope.EXCLUDE:
            msg = "The exclude scope does not hold per-type rules"
            raise ValueError(msg)

        buckets: dict[Scope, ScopeRules] = {
            Scope.DEFAULT: self.default,
            Scope.DEV: self.dev,
            Scope.NO_DEV: self.no_dev,
        }
        return buckets[scope].get(package_type)

    @property
    def package_types(self) -> list[str]:
        """All package types mentioned under any rule scope, sorted."""
        return sorted({*self.default, *self.dev, *self.no_dev})
