class DrawingError(Exception):
    pass


class ConfigurationError(DrawingError):
    pass


class GridOverflowError(DrawingError):
    pass
