"""
Error types raised by instance manager clients.

A failed call raises; when the service answers with an output *and* an
error, the output travels on ``.response``.
"""

from typing import Any, Optional

# Error kind tags
TARGET_NOT_CONNECTED = "TargetNotConnected"
DOES_NOT_EXIST = "DoesNotExistException"
INVALID_COMMAND_ID = "InvalidCommandId"
UNRECOGNIZED_FIXTURE_KEY = "UnrecognizedFixtureKey"


class InstanceManagerError(Exception):
    """Base error. Unclassified failures are raised as this type with no code."""

    def __init__(
        self,
        message: str,
        code: Optional[str] = None,
        response: Optional[Any] = None,
    ):
        super().__init__(message)
        self.message = message
        self.code = code
        self.response = response

    def __reduce__(self):
        return (type(self), (self.message, self.code, self.response))


class ClientError(InstanceManagerError):
    """Classified service failure; ``code`` carries the kind tag"""

    def __init__(self, code: str, message: str, response: Optional[Any] = None):
        super().__init__(message, code=code, response=response)

    def __reduce__(self):
        return (type(self), (self.code, self.message, self.response))

    def __str__(self) -> str:
        return f"{self.code}: {self.message}"


class ParameterValidationError(InstanceManagerError, ValueError):
    """Raised for inconsistent request parameters (a caller bug)"""


class UnknownFixtureKeyError(ClientError):
    """Raised in strict mode for identifiers missing from the fixture tables"""

    def __init__(self, field: str, value: str):
        super().__init__(
            UNRECOGNIZED_FIXTURE_KEY,
            f"No simulated outcome registered for {field}={value!r}",
        )
        self.field = field
        self.value = value

    def __reduce__(self):
        return (type(self), (self.field, self.value))
