"""Shared helpers for timestamps and query-string encoding."""
