"""Keeps a web project's copy of a resume in sync with the local original."""

__version__ = "0.1.0"
