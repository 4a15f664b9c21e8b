"""
Simulated instance manager for tests that must not reach a live backend.

Provides:
- SimulatedInstanceManagerClient: fixture-driven client implementation
- Success / Failure: outcome descriptors for fixture tables
- filter_instances: the inventory filter matcher
"""

from .client import SimulatedInstanceManagerClient
from .filters import filter_instances, instance_dump, instance_matches_filter
from .outcomes import Failure, Outcome, Success

__all__ = [
    "SimulatedInstanceManagerClient",
    "Success",
    "Failure",
    "Outcome",
    "filter_instances",
    "instance_dump",
    "instance_matches_filter",
]
