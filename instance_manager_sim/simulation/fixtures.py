"""
Default fixture tables for the simulated instance manager.

These identifiers are part of the contract with every test that uses the
simulator: renaming one breaks its callers.
"""

from typing import Any, Dict, List

from ..errors import DOES_NOT_EXIST, INVALID_COMMAND_ID, TARGET_NOT_CONNECTED
from ..models import CommandInvocationStatus
from .outcomes import Failure, Outcome, Success

# ---------------------------------------------------------------------------
# Sessions
# ---------------------------------------------------------------------------

READY_SESSION_ID = "ready-instance-id"
TERM_ERROR_SESSION_ID = "session-term-error"

SESSION_OUTCOMES: Dict[str, Outcome] = {
    # Working instance
    "i-123": Success({"session_id": READY_SESSION_ID}),
    # Instance whose role lacks the needed permissions
    "i-456": Failure(
        "bad instance role permissions make this fail on managed instances",
        code=TARGET_NOT_CONNECTED,
    ),
    # Arbitrary failure that is not TargetNotConnected
    "i-789": Failure("This represents any error other than TargetNotConnected."),
    # Starts fine, then fails on terminate
    "i-000": Success({"session_id": TERM_ERROR_SESSION_ID}),
}

TERMINATION_OUTCOMES: Dict[str, Outcome] = {
    TERM_ERROR_SESSION_ID: Failure(
        "this tends to occur when you hit rate limits",
        code=DOES_NOT_EXIST,
    ),
}

# ---------------------------------------------------------------------------
# Command invocations
# ---------------------------------------------------------------------------

COMMAND_OUTCOMES: Dict[str, Outcome] = {
    "success-id": Success({"status_details": CommandInvocationStatus.SUCCESS.value}),
    "failed-id": Success({"status_details": CommandInvocationStatus.FAILED.value}),
    "mixed-id": Success({"status_details": CommandInvocationStatus.FAILED.value}),
    "pending-id": Success({"status_details": CommandInvocationStatus.PENDING.value}),
    "bad-id": Failure(INVALID_COMMAND_ID, code=INVALID_COMMAND_ID, returns_response=False),
}

# Same value on every call; callers must not rely on uniqueness
SENT_COMMAND_ID = "1234561234561234561234561235456"

# ---------------------------------------------------------------------------
# Instance inventory
# ---------------------------------------------------------------------------

FIRST_PAGE_TOKEN = "eyJNYXJrZXIiOiBudWxsLCAiYm90b190cnVuY2F0ZV9hbW91bnQiOiAxfQ=="

FIRST_PAGE: List[Dict[str, Any]] = [
    {"platform_type": "Linux", "ping_status": "Offline", "instance_id": "i-23456", "is_latest_version": True},
    {"platform_type": "Linux", "ping_status": "Online", "instance_id": "i-45678", "is_latest_version": True},
    {"platform_type": "Windows", "ping_status": "Offline", "instance_id": "i-78901", "is_latest_version": True},
    {"platform_type": "Linux", "ping_status": "Online", "instance_id": "i-98765", "is_latest_version": False},
]

SECOND_PAGE: List[Dict[str, Any]] = [
    {"platform_type": "Linux", "ping_status": "Online", "instance_id": "i-12345", "is_latest_version": True},
    {"platform_type": "Linux", "ping_status": "Online", "instance_id": "i-34567", "is_latest_version": True},
    {"platform_type": "Windows", "ping_status": "Online", "instance_id": "i-67890", "is_latest_version": True},
]
