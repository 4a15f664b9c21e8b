"""
instance-manager-sim: deterministic test double for a remote
instance-management service (sessions, commands, instance inventory).
"""

from .clients import BaseInstanceManagerClient
from .errors import (
    ClientError,
    InstanceManagerError,
    ParameterValidationError,
    UnknownFixtureKeyError,
)
from .simulation import SimulatedInstanceManagerClient

__version__ = "1.0.0"
__all__ = [
    "BaseInstanceManagerClient",
    "SimulatedInstanceManagerClient",
    "InstanceManagerError",
    "ClientError",
    "ParameterValidationError",
    "UnknownFixtureKeyError",
]
