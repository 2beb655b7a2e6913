"""drupal-cleanup - strip configured files from installed Composer packages."""

__version__ = "1.0.0"
