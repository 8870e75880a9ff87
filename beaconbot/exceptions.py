"""
Exception types shared across the bot.
"""


class BeaconBotError(Exception):
    """Base class for all bot errors."""


class RegistryError(BeaconBotError, ValueError):
    """Raised when the command registry is built with conflicting entries."""


class CommandError(BeaconBotError):
    """
    A command was recognised but its parameters were rejected.

    The message is meant to be shown to the user as-is.
    """

    def __init__(self, message: str):
        super().__init__(message)
        self.message = message


class BackendUnavailableError(BeaconBotError):
    """The beacon node could not be reached or answered with an error."""
