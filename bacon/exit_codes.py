"""
Standard exit codes for bacon commands.

A command either succeeds or fails; there are no partial results.
"""

SUCCESS = 0              # Successful termination
FAILURE = 1              # Command failed (remote error, bad config, ...)


class ConfigError(Exception):
    """Raised when the configuration file cannot be read."""


class FatalError(Exception):
    """
    Unrecoverable error.

    Commands never turn this into an exit code; it propagates out of the
    command so the process terminates.
    """
