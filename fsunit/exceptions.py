"""
Typed exceptions for fsunit.

Provides structured failures with:
- FSUnitError: Base exception for all fsunit errors
- SandboxAssertionError: A sandbox assertion did not hold
- SandboxIOError: The filesystem refused an operation
- SandboxPathError: A path resolves outside the sandbox root

Assertion and I/O failures subclass AssertionError, so pytest and unittest
report them as test failures rather than errors.
"""

from __future__ import annotations

from typing import Any, Dict, Optional


class FSUnitError(Exception):
    """Base exception for all fsunit errors.

    Attributes:
        message: Human-readable error description
        code: Machine-readable error code for programmatic handling
        details: Additional context as key-value pairs
    """

    default_code = "sandbox_error"

    def __init__(
        self,
        message: str,
        *,
        code: Optional[str] = None,
        details: Optional[Dict[str, Any]] = None,
    ) -> None:
        self.message = message
        self.code = code or self.default_code
        self.details = dict(details or {})
        super().__init__(message)

    def to_dict(self) -> Dict[str, Any]:
        """Serialize exception for logging or reports."""
        return {
            "error": self.code,
            "message": self.message,
            "details": self.details,
        }


class SandboxAssertionError(FSUnitError, AssertionError):
    """A sandbox assertion did not hold.

    Attributes:
        path: Sandbox-relative path the assertion was about
        expected: Expected value, when the assertion compares values
        actual: Actual value, when the assertion compares values
    """

    default_code = "assertion_failed"

    def __init__(
        self,
        message: str,
        *,
        path: Optional[str] = None,
        expected: Any = None,
        actual: Any = None,
        code: Optional[str] = None,
        details: Optional[Dict[str, Any]] = None,
    ) -> None:
        details = dict(details or {})
        if path:
            details["path"] = path
        if expected is not None:
            details["expected"] = expected
        if actual is not None:
            details["actual"] = actual

        self.path = path
        self.expected = expected
        self.actual = actual

        super().__init__(message, code=code, details=details)


class SandboxIOError(SandboxAssertionError):
    """The filesystem refused a sandbox operation.

    Raised when:
    - A file or folder cannot be created or deleted
    - A file cannot be opened, read or written
    - An archive is unreadable or corrupt

    The underlying OSError, BadZipFile or decoding error is chained as
    __cause__.
    """

    default_code = "io_failed"

    def __init__(
        self,
        message: str,
        *,
        path: Optional[str] = None,
        operation: Optional[str] = None,
        code: Optional[str] = None,
        details: Optional[Dict[str, Any]] = None,
    ) -> None:
        details = dict(details or {})
        if operation:
            details["operation"] = operation

        self.operation = operation

        super().__init__(message, path=path, code=code, details=details)


class SandboxPathError(FSUnitError, ValueError):
    """A path resolves outside the sandbox root."""

    default_code = "outside_root"


__all__ = [
    "FSUnitError",
    "SandboxAssertionError",
    "SandboxIOError",
    "SandboxPathError",
]
