"""Package operation models passed to the cleanup hook."""

from dataclasses import dataclass

from drupal_cleanup.models.package import Package

POST_PACKAGE_INSTALL = "post-package-install"
POST_PACKAGE_UPDATE = "post-package-update"


@dataclass(frozen=True, slots=True)
class InstallOperation:
    """A completed package installation."""

    package: Package


@dataclass(frozen=True, slots=True)
class UpdateOperation:
    """A completed package update.

    Attributes:
        initial_package: The package as it was before the update.
        target_package: The package that is now installed.
    """

    initial_package: Package
    target_package: Package
