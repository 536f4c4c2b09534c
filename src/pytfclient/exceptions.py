"""Custom exception hierarchy for pytfclient."""

from __future__ import annotations


class TfError(Exception):
    """Base exception for all pytfclient errors."""


class TfConfigError(TfError):
    """Invalid or missing configuration."""


class TfClientClosedError(TfError):
    """Operation attempted on a client that has been closed."""
