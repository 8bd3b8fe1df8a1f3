"""Custom exceptions for Infinispan dev-services configuration errors.

The value type itself never raises domain errors: malformed option values are
rejected while raw configuration is being loaded, and semantic problems (an
out-of-range port, an unknown cache template) only surface once the external
server tries to start.

Exception Hierarchy:
    DevServicesException (base)
    └── ConfigurationError
"""


class DevServicesException(Exception):
    """Base exception for all dev-services errors.

    Attributes:
        message: Descriptive error message
        error_code: Machine-readable error identifier
        details: Additional context about the error
    """

    def __init__(
        self,
        message: str,
        error_code: str | None = None,
        details: dict | None = None,
    ) -> None:
        """Initialize dev-services exception.

        Args:
            message: Descriptive error message for users
            error_code: Machine-readable error code (e.g., 'invalid_option')
            details: Additional context dict for debugging
        """
        self.message = message
        self.error_code = error_code or self.__class__.__name__
        self.details = details or {}
        super().__init__(self.message)

    def to_dict(self) -> dict:
        """Convert exception to dictionary for CLI or API output."""
        return {
            "error": self.error_code,
            "message": self.message,
            "details": self.details if self.details else None,
        }


class ConfigurationError(DevServicesException):
    """Raised when raw dev-services configuration cannot be loaded.

    Reasons might include:
    - A boolean option holding something other than a boolean
    - A port that is not an integer
    - A properties file that does not exist

    Example:
        >>> raise ConfigurationError(
        ...     message="Invalid value for dev-services option",
        ...     error_code="invalid_option",
        ...     details={"keys": ["quarkus.infinispan-client.devservices.port"]}
        ... )
    """

    pass
