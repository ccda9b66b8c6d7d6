"""
Canvas Pong exceptions
"""


class CanvasPongError(Exception):
    """Base class for every error raised by Canvas Pong"""


class GameConfigurationError(CanvasPongError):
    """A required collaborator is missing or unusable at construction time"""
