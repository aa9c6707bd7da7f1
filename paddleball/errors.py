class ConfigurationError(ValueError):
    """Raised when game geometry cannot produce a valid simulation."""
