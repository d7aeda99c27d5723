"""Integrations with OS-level schedulers that trigger a sync when the resume changes."""
