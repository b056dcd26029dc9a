class GridSnakeError(Exception):
    """Base class for errors raised by gridsnake."""


class RenderError(GridSnakeError):
    """The display could not draw or present a frame."""
