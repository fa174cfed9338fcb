class DataAccessError(Exception):
    """Raised when a query or write against the store fails. The current operation is aborted."""
