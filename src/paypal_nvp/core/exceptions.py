"""Custom exceptions for the payment adapter."""

from typing import Any, Dict, Optional


class BaseAPIException(Exception):
    """Base exception for all adapter exceptions."""

    def __init__(
        self,
        message: str = "An error occurred",
        status_code: int = 500,
        details: Optional[Dict[str, Any]] = None
    ):
        self.message = message
        self.status_code = status_code
        self.details = details or {}
        super().__init__(self.message)


class PaymentError(BaseAPIException):
    """Raised when a payment call to the gateway fails.

    Callers that do not care why a call failed catch this type only.
    """

    def __init__(self, message: str = "Payment processing failed", details: Optional[Dict[str, Any]] = None):
        super().__init__(message, 502, details)


class TransportError(PaymentError):
    """Raised when the gateway could not be reached or answered with an HTTP error."""

    def __init__(self, message: str = "Payment gateway unreachable", details: Optional[Dict[str, Any]] = None):
        super().__init__(message, details)


class ProtocolError(PaymentError):
    """Raised when the gateway answered with a response that cannot be interpreted."""

    def __init__(self, message: str = "Malformed payment gateway response", details: Optional[Dict[str, Any]] = None):
        super().__init__(message, details)


class ParseError(ProtocolError):
    """Raised when an NVP response body cannot be tokenized."""

    def __init__(
        self,
        message: str = "Unable to parse NVP response",
        body: Optional[str] = None,
        details: Optional[Dict[str, Any]] = None
    ):
        full_details = details or {}
        if body is not None:
            full_details["body"] = body
        super().__init__(message, full_details)
        self.body = body
