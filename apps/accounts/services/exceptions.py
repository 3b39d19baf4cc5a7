"""Domain-specific exceptions for accounts services."""


class AccountsServiceError(Exception):
    """Base exception for accounts services."""
    pass


class UserRegistrationError(AccountsServiceError):
    """Raised when a staff account cannot be created."""
    pass


class InvalidCredentialsError(AccountsServiceError):
    """Raised when email or password is wrong."""
    pass


class InactiveAccountError(AccountsServiceError):
    """Raised when a deactivated account tries to sign in."""
    pass
