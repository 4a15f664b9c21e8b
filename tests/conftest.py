"""
Shared pytest fixtures for instance manager simulator tests
"""

import sys
from pathlib import Path

import pytest

# Add project root to path
sys.path.insert(0, str(Path(__file__).parent.parent))

from instance_manager_sim.models import DescribeInstanceInformationRequest
from instance_manager_sim.simulation import SimulatedInstanceManagerClient


@pytest.fixture
def client() -> SimulatedInstanceManagerClient:
    """Simulated client with default fixtures, lax about unknown ids"""
    return SimulatedInstanceManagerClient(strict=False, record_calls=False)


@pytest.fixture
def strict_client() -> SimulatedInstanceManagerClient:
    """Simulated client that rejects unregistered target/command ids"""
    return SimulatedInstanceManagerClient(strict=True, record_calls=False)


@pytest.fixture
def recording_client() -> SimulatedInstanceManagerClient:
    """Simulated client that records every call"""
    return SimulatedInstanceManagerClient(strict=False, record_calls=True)


@pytest.fixture
def first_page_request() -> DescribeInstanceInformationRequest:
    """Unfiltered inventory request without a continuation token"""
    return DescribeInstanceInformationRequest()
