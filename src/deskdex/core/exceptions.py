"""Custom exceptions for deskdex"""


class DeskdexError(Exception):
    """Base exception for deskdex"""

    pass


class ConfigurationError(DeskdexError):
    """Configuration-related errors"""

    pass


class EntryNotFoundError(DeskdexError):
    """Requested application is not in the index"""

    pass


class LaunchError(DeskdexError):
    """Launch request could not be handed to the launcher"""

    pass
