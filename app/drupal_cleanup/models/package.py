"""Package models.

Packages are owned by Composer; these are read-only views of the
metadata the cleaner needs.
"""

from dataclasses import dataclass
from pathlib import Path


@dataclass(frozen=True, slots=True)
class Package:
    """A Composer package identified by name and type.

    Attributes:
        name: Package name (e.g., 'drupal/token').
        type: Composer package type (e.g., 'drupal-module').
    """

    name: str
    type: str = "library"

    def __post_init__(self) -> None:
        """Validate package data after initialization."""
        if not self.name:
            msg = "Package name cannot be empty"
            raise ValueError(msg)
        if not self.type:
            msg = "Package type cannot be empty"
            raise ValueError(msg)


@dataclass(frozen=True, slots=True)
class InstalledPackage:
    """A package together with the directory Composer installed it into.

    Attributes:
        package: The package metadata.
        install_path: Absolute install directory.
    """

    package: Package
    install_path: Path

    @property
    def name(self) -> str:
        return self.package.name

    @property
    def type(self) -> str:
        return self.package.type
