"""Exceptions raised by the painterly pipeline."""


class PainterlyError(Exception):
    """Base class for painterly errors."""


class LoadError(PainterlyError):
    """Source image is missing or could not be decoded."""


class InvalidParameterError(PainterlyError, ValueError):
    """A render or style parameter is outside its accepted range."""


class RenderCancelledError(PainterlyError):
    """Render pass was cancelled before all strokes were generated."""
