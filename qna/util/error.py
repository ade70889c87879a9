"""Utility layer errors."""


class UtilError(Exception):
    """Base utility error."""

    pass


class ConfigurationError(UtilError):
    """Raised when settings are inconsistent for the target environment."""

    pass


class DependencyInjectionError(UtilError):
    """Raised when a DI provider cannot be resolved for a component."""

    pass
