"""Shared utilities for heexfmt."""
