"""Bundled data files for drupal-cleanup."""
