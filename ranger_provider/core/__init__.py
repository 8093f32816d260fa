"""Shared plumbing for the Ranger provider.

Contains the settings model, logging setup and the diagnostics/result types
that every lifecycle operation returns to the host runtime.
"""

from .config import Settings
from .diagnostics import Diagnostic, Diagnostics, Result, Severity

__all__ = [
    "Diagnostic",
    "Diagnostics",
    "Result",
    "Settings",
    "Severity",
]
