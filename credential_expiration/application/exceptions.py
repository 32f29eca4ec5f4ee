"""Application layer exceptions."""


class ApplicationError(Exception):
    """Base exception for application errors."""


class CredentialRepositoryError(ApplicationError):
    """Raised when credential repository operations fail."""


class CredentialReadError(CredentialRepositoryError):
    """Raised when the credentials file cannot be read."""


class CredentialParseError(CredentialRepositoryError):
    """Raised when the credentials file or a timestamp in it is malformed."""


class SubscriptionError(ApplicationError):
    """Raised when the credentials file cannot be watched for changes."""


class NotificationError(ApplicationError):
    """Raised when notification sending fails."""


class ConfigurationError(ApplicationError):
    """Raised when configuration is invalid."""
