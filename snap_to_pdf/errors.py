# errors.py - exception types raised by snap_to_pdf


class SnapError(Exception):
    """Base class for every error raised by this package."""


class InvalidConfigurationError(SnapError, ValueError):
    pass


class InputFileNotFoundError(SnapError, FileNotFoundError):
    pass


class RenderError(SnapError, RuntimeError):
    """Chromium failed to load the input or to print it."""


class InputReadError(SnapError, OSError):
    """A path-shaped input exists but could not be read."""
