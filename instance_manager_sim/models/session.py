"""
Session models
"""

from typing import Optional

from .base import ApiModel


class StartSessionRequest(ApiModel):
    """Start an interactive session on a managed instance"""

    target: str


class StartSessionResponse(ApiModel):
    session_id: Optional[str] = None


class TerminateSessionRequest(ApiModel):
    session_id: str


class TerminateSessionResponse(ApiModel):
    session_id: Optional[str] = None
