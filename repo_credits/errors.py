# repo_credits/errors.py
from __future__ import annotations


class CreditsError(Exception):
    """Base class for errors raised by repo-credits."""

    exit_code = 1


class ConfigError(CreditsError):
    """Invalid configuration value or unreadable config file."""

    exit_code = 2


class TerminalUnavailableError(CreditsError):
    """No interactive terminal to draw the presentation on."""
