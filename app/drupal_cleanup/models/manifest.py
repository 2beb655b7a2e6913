"""Model of the composer.json fields drupal-cleanup reads.

Only ``extra`` and ``config.vendor-dir`` matter; everything else in
composer.json is ignored.
"""

from functools import cached_property
from typing import Annotated, Any

from pydantic import BaseModel, ConfigDict, Field

from drupal_cleanup.core.paths import DEFAULT_VENDOR_DIR
from drupal_cleanup.models.config import CleanupConfig

# Key of the cleanup section inside composer.json "extra"
EXTRA_KEY = "drupal-cleanup"


class ComposerManifest(BaseModel):
    """The subset of composer.json used by the cleaner.

    Attributes:
        name: Root package name, if declared.
        extra: The free-form "extra" section.
        config: The "config" section.
        cleanup: Validated cleanup rules from extra["drupal-cleanup"].
    """

    model_config = ConfigDict(extra="ignore")

    name: Annotated[str | None, Field(description="Root package name")] = None
    extra: Annotated[
        dict[str, Any],
        Field(default_factory=dict, description="Composer extra section"),
    ]
    config: Annotated[
        dict[str, Any],
        Field(default_factory=dict, description="Composer config section"),
    ]

    @cached_property
    def cleanup(self) -> CleanupConfig:
        """Cleanup rules, empty when the section is absent.

        Raises:
            pydantic.ValidationError: If the section does not match the schema.
        """
        section = self.extra.get(EXTRA_KEY)
        if section is None:
            return CleanupConfig()
        return CleanupConfig.model_validate(section)

    @property
    def vendor_dir(self) -> str:
        """The configured vendor-dir, relative to the project root."""
        value = self.config.get("vendor-dir")
        return value if isinstance(value, str) and value else DEFAULT_VENDOR_DIR
