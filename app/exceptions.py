# app/exceptions.py
from typing import Any, Dict, List, Optional


class BusinessLogicError(Exception):
    """Base exception for business logic errors"""

    def __init__(self, message: str = ""):
        super().__init__(message)
        self.message = message


class ValidationError(BusinessLogicError):
    """Raised when input passes schema parsing but breaks a domain rule"""

    def __init__(self, message: str, errors: Optional[List[Dict[str, Any]]] = None):
        super().__init__(message)
        self.errors = errors or []


class NotFoundError(BusinessLogicError):
    """Raised when a resource is not found"""
    pass


class PermissionDeniedError(BusinessLogicError):
    """Raised when the caller is not a participant, owner or the required role"""
    pass


class InvalidStatusTransitionError(BusinessLogicError):
    """Raised when invalid status transition is attempted"""
    pass


class DuplicateRequestError(BusinessLogicError):
    """Raised when a unique value (username, email) is already taken"""
    pass


class ConfigurationError(BusinessLogicError):
    """Raised at startup when required configuration is unusable"""
    pass
