"""Exceptions shared by the stores, services and API handlers."""


class ValidationError(Exception):
    """Raised when a required field is empty or a value is not acceptable."""


class ConfigError(Exception):
    """Raised when a component is configured with values it cannot work with."""


class RecordNotFoundError(Exception):
    """Raised when a collection holds no record with the requested id."""
