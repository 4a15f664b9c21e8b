"""
Pydantic models for instance manager requests and responses
"""

from .base import ApiModel
from .command import (
    Command,
    CommandInvocationStatus,
    GetCommandInvocationRequest,
    GetCommandInvocationResponse,
    SendCommandRequest,
    SendCommandResponse,
    Target,
)
from .inventory import (
    DescribeInstanceInformationRequest,
    DescribeInstanceInformationResponse,
    InstanceInformation,
    InstanceInformationStringFilter,
)
from .session import (
    StartSessionRequest,
    StartSessionResponse,
    TerminateSessionRequest,
    TerminateSessionResponse,
)

__all__ = [
    "ApiModel",
    # Session models
    "StartSessionRequest",
    "StartSessionResponse",
    "TerminateSessionRequest",
    "TerminateSessionResponse",
    # Command models
    "Command",
    "CommandInvocationStatus",
    "GetCommandInvocationRequest",
    "GetCommandInvocationResponse",
    "SendCommandRequest",
    "SendCommandResponse",
    "Target",
    # Inventory models
    "DescribeInstanceInformationRequest",
    "DescribeInstanceInformationResponse",
    "InstanceInformation",
    "InstanceInformationStringFilter",
]
