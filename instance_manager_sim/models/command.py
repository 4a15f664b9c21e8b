"""
Command submission and invocation status models
"""

from enum import Enum
from typing import Dict, List, Optional

from .base import ApiModel


class CommandInvocationStatus(str, Enum):
    """Invocation status reported for one instance"""

    SUCCESS = "Success"
    FAILED = "Failed"
    PENDING = "Pending"


class Target(ApiModel):
    """Tag-style instance selector, e.g. key="tag:Role", values=["web"]"""

    key: str
    values: List[str] = []


class SendCommandRequest(ApiModel):
    document_name: str
    instance_ids: List[str] = []
    targets: List[Target] = []
    parameters: Dict[str, List[str]] = {}


class Command(ApiModel):
    """Record of a submitted command"""

    command_id: str
    document_name: Optional[str] = None
    instance_ids: List[str] = []
    parameters: Dict[str, List[str]] = {}
    targets: List[Target] = []


class SendCommandResponse(ApiModel):
    command: Command


class GetCommandInvocationRequest(ApiModel):
    command_id: str
    instance_id: Optional[str] = None


class GetCommandInvocationResponse(ApiModel):
    command_id: str
    instance_id: Optional[str] = None
    # Empty when the command id has no registered status
    status_details: str = ""
