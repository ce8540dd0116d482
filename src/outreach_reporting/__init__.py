"""Reporting engine for outreach entry records."""

__version__ = "0.1.0"
