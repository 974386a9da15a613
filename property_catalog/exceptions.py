"""Exception hierarchy for the property catalog."""


class CatalogError(Exception):
    """Base exception for all catalog errors."""


class FetchError(CatalogError):
    """Raised when the property collection could not be loaded."""


class SubmitError(CatalogError):
    """Raised when a new property could not be stored."""


class ValidationError(SubmitError):
    """Raised when a new property is rejected before submission."""


class ConfigurationError(CatalogError):
    """Raised when configuration is invalid or missing."""
