class AccountNotFoundError(Exception):
    """Raised when an account id is missing from the store."""
