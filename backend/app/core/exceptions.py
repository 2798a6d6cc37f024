"""
Domain exceptions raised by the service layer.

The web layer translates each of these into a redirect or an inline error
response; none of them is fatal to the process.
"""
from typing import Any, Dict, List, Optional


class ApplicationException(Exception):
    """Base exception for all application-specific exceptions."""

    def __init__(self, message: str, details: Optional[Dict[str, Any]] = None):
        self.message = message
        self.details = details or {}
        super().__init__(self.message)


class Unauthenticated(ApplicationException):
    """Raised when an operation is attempted without an acting user."""

    def __init__(self, message: str = "You need to sign in before continuing."):
        super().__init__(message)


class Forbidden(ApplicationException):
    """Raised when the acting user does not own the requested project."""

    def __init__(self, message: str = "You are not authorized to access this project."):
        super().__init__(message)


class NotFound(ApplicationException):
    """Raised when a requested record does not exist."""

    def __init__(self, resource: str, identifier: Any):
        message = f"{resource} not found: {identifier}"
        super().__init__(message, {"resource": resource, "identifier": identifier})


class ValidationError(ApplicationException):
    """
    Raised when submitted attributes are invalid.

    ``errors`` maps a field name to the list of messages for that field,
    e.g. ``{"name": ["can't be blank"]}``.
    """

    def __init__(self, errors: Dict[str, List[str]]):
        self.errors = errors
        super().__init__("Validation failed", errors)


class CompletionFailed(ApplicationException):
    """Raised when marking a project completed could not be persisted."""

    MESSAGE = "Unable to complete project."

    def __init__(self, project_id: int):
        self.project_id = project_id
        super().__init__(self.MESSAGE, {"project_id": project_id})
