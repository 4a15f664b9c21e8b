"""
Base instance manager client abstract class
"""

import logging
from abc import ABC, abstractmethod
from typing import Callable, Iterator

from ..models import (
    DescribeInstanceInformationRequest,
    DescribeInstanceInformationResponse,
    GetCommandInvocationRequest,
    GetCommandInvocationResponse,
    SendCommandRequest,
    SendCommandResponse,
    StartSessionRequest,
    StartSessionResponse,
    TerminateSessionRequest,
    TerminateSessionResponse,
)

logger = logging.getLogger(__name__)

PageVisitor = Callable[[DescribeInstanceInformationResponse, bool], bool]


class BaseInstanceManagerClient(ABC):
    """Operations a remote instance-management client exposes.

    Orchestration code depends on this interface only; the composition root
    decides whether it gets the simulated client or a real one.
    """

    @abstractmethod
    def start_session(self, request: StartSessionRequest) -> StartSessionResponse:
        """
        Start an interactive session on the request's target.

        Raises:
            ClientError: classified failure, e.g. code ``TargetNotConnected``
            InstanceManagerError: any other failure
        """
        pass

    @abstractmethod
    def terminate_session(
        self, request: TerminateSessionRequest
    ) -> TerminateSessionResponse:
        """
        Terminate a session.

        A failure may still carry the service's output on ``error.response``.
        """
        pass

    @abstractmethod
    def get_command_invocation(
        self, request: GetCommandInvocationRequest
    ) -> GetCommandInvocationResponse:
        """Fetch one instance's invocation status for a submitted command"""
        pass

    @abstractmethod
    def send_command(self, request: SendCommandRequest) -> SendCommandResponse:
        """
        Submit a command document for execution.

        Raises:
            ParameterValidationError: both instance ids and targets were given
        """
        pass

    @abstractmethod
    def describe_instance_information(
        self, request: DescribeInstanceInformationRequest
    ) -> DescribeInstanceInformationResponse:
        """Fetch one page of the instance inventory"""
        pass

    def iter_instance_information_pages(
        self, request: DescribeInstanceInformationRequest
    ) -> Iterator[DescribeInstanceInformationResponse]:
        """Lazily yield inventory pages until the continuation token runs out.

        Works on a copy of ``request``: every call starts over from the
        request's own token and the caller's object is left untouched.
        Errors from a page fetch propagate from the generator.
        """
        page_request = request.model_copy(deep=True)
        while True:
            page = self.describe_instance_information(page_request)
            yield page
            if page.next_token is None:
                return
            page_request.next_token = page.next_token

    def describe_instance_information_pages(
        self,
        request: DescribeInstanceInformationRequest,
        visit: PageVisitor,
    ) -> None:
        """
        Drive inventory pagination through a callback.

        Args:
            request: First-page request (filters apply to every page)
            visit: Called as ``visit(page, is_last_page)``; return False to stop

        The first fetch error propagates; pages already visited stay visited.
        """
        pages_seen = 0
        for page in self.iter_instance_information_pages(request):
            pages_seen += 1
            is_last_page = page.next_token is None
            if not visit(page, is_last_page) or is_last_page:
                break
        logger.debug(f"Inventory pagination finished after {pages_seen} page(s)")
