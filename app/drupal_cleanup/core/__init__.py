"""Core cleanup logic: settings, rule resolution, manifest and hook."""
