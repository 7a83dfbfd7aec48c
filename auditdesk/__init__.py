"""Data-access layer for audit templates, audits and store reports over a remote record store."""

__version__ = "0.1.0"
