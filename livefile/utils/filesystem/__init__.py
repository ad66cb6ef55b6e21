"""Filesystem helpers: path normalization, data URLs, platform opener."""
