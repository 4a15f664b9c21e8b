"""
Outcome descriptors for fixture tables.

A fixture table maps an identifier to either ``Success`` (fields merged into
the response) or ``Failure`` (an error to raise). Keeping outcomes as data
lets tests extend the tables without touching the client.
"""

from dataclasses import dataclass, field
from typing import Any, Dict, Optional, Union


@dataclass(frozen=True)
class Success:
    """Answer normally; ``payload`` holds response fields by name"""

    payload: Dict[str, Any] = field(default_factory=dict)


@dataclass(frozen=True)
class Failure:
    """Raise an error.

    ``code`` None means an unclassified failure. ``returns_response`` controls
    whether the response built for the call rides along on ``error.response``.
    """

    message: str
    code: Optional[str] = None
    returns_response: bool = True
    payload: Dict[str, Any] = field(default_factory=dict)

    @property
    def classified(self) -> bool:
        return self.code is not None


Outcome = Union[Success, Failure]
