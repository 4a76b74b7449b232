# smithchart/core/exceptions.py

class SmithChartError(Exception):
    """Base exception for smithchart errors."""
    pass

class InvalidArgumentError(SmithChartError, ValueError):
    """Raised when an input violates a geometric precondition (e.g. R = -1, X = 0)."""
    pass

class ConfigError(SmithChartError):
    """Raised when chart options fail validation."""
    pass

class RenderError(SmithChartError):
    """Raised when a drawing sink is driven into an invalid state."""
    pass
