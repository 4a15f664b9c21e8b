"""
SimulatedInstanceManagerClient: a deterministic stand-in for the remote
instance-management service.

Usage:
    from instance_manager_sim.simulation import SimulatedInstanceManagerClient

    client = SimulatedInstanceManagerClient()
    client.start_session(StartSessionRequest(target="i-123"))

    # Register extra identifiers for one test
    client = SimulatedInstanceManagerClient(command_outcomes={
        "slow-id": Success({"status_details": "InProgress"}),
    })

Every answer is a pure function of the request and the fixture tables.
Optional call recording never changes an outcome.
"""

import logging
from typing import Any, Dict, List, Mapping, Optional, Type

from pydantic import BaseModel

from ..clients.base import BaseInstanceManagerClient
from ..config import settings
from ..errors import (
    ClientError,
    InstanceManagerError,
    ParameterValidationError,
    UnknownFixtureKeyError,
)
from ..models import (
    Command,
    DescribeInstanceInformationRequest,
    DescribeInstanceInformationResponse,
    GetCommandInvocationRequest,
    GetCommandInvocationResponse,
    InstanceInformation,
    SendCommandRequest,
    SendCommandResponse,
    StartSessionRequest,
    StartSessionResponse,
    TerminateSessionRequest,
    TerminateSessionResponse,
)
from .filters import filter_instances
from .fixtures import (
    COMMAND_OUTCOMES,
    FIRST_PAGE,
    FIRST_PAGE_TOKEN,
    SECOND_PAGE,
    SENT_COMMAND_ID,
    SESSION_OUTCOMES,
    TERMINATION_OUTCOMES,
)
from .outcomes import Failure, Outcome, Success

logger = logging.getLogger(__name__)


class SimulatedInstanceManagerClient(BaseInstanceManagerClient):
    """Instance manager client answering from fixture tables.

    Options:
        session_outcomes: target id -> Outcome, merged over the defaults
        termination_outcomes: session id -> Outcome, merged over the defaults
        command_outcomes: command id -> Outcome, merged over the defaults
        strict: raise UnknownFixtureKeyError for unregistered target and
            command ids. Defaults to ``settings.strict_fixture_keys``.
        record_calls: append every call to ``call_history``. Defaults to
            ``settings.record_calls``.
    """

    def __init__(
        self,
        session_outcomes: Optional[Mapping[str, Outcome]] = None,
        termination_outcomes: Optional[Mapping[str, Outcome]] = None,
        command_outcomes: Optional[Mapping[str, Outcome]] = None,
        strict: Optional[bool] = None,
        record_calls: Optional[bool] = None,
    ):
        self.session_outcomes: Dict[str, Outcome] = {**SESSION_OUTCOMES, **(session_outcomes or {})}
        self.termination_outcomes: Dict[str, Outcome] = {
            **TERMINATION_OUTCOMES,
            **(termination_outcomes or {}),
        }
        self.command_outcomes: Dict[str, Outcome] = {**COMMAND_OUTCOMES, **(command_outcomes or {})}
        self.strict = settings.strict_fixture_keys if strict is None else strict
        self.record_calls = settings.record_calls if record_calls is None else record_calls

        self.call_history: List[Dict[str, Any]] = []

    # ------------------------------------------------------------------
    # Sessions
    # ------------------------------------------------------------------

    def start_session(self, request: StartSessionRequest) -> StartSessionResponse:
        self._record("start_session", request)
        outcome = self._lookup(self.session_outcomes, "target", request.target)
        return self._resolve(outcome, StartSessionResponse)

    def terminate_session(
        self, request: TerminateSessionRequest
    ) -> TerminateSessionResponse:
        self._record("terminate_session", request)
        # Any session id terminates cleanly unless registered otherwise
        outcome = self.termination_outcomes.get(request.session_id, Success())
        return self._resolve(
            outcome, TerminateSessionResponse, session_id=request.session_id
        )

    # ------------------------------------------------------------------
    # Commands
    # ------------------------------------------------------------------

    def get_command_invocation(
        self, request: GetCommandInvocationRequest
    ) -> GetCommandInvocationResponse:
        self._record("get_command_invocation", request)
        outcome = self._lookup(self.command_outcomes, "command_id", request.command_id)
        return self._resolve(
            outcome,
            GetCommandInvocationResponse,
            command_id=request.command_id,
            instance_id=request.instance_id,
        )

    def send_command(self, request: SendCommandRequest) -> SendCommandResponse:
        if request.instance_ids and request.targets:
            raise ParameterValidationError(
                "Cannot specify instance IDs and targets in the same SendCommandRequest"
            )
        self._record("send_command", request)

        echoed = request.model_copy(deep=True)
        command = Command(
            command_id=SENT_COMMAND_ID,
            document_name=echoed.document_name,
            instance_ids=echoed.instance_ids,
            parameters=echoed.parameters,
            targets=echoed.targets,
        )
        logger.debug(
            f"[Simulation] Accepted command {command.command_id} "
            f"(document={command.document_name})"
        )
        return SendCommandResponse(command=command)

    # ------------------------------------------------------------------
    # Inventory
    # ------------------------------------------------------------------

    def describe_instance_information(
        self, request: DescribeInstanceInformationRequest
    ) -> DescribeInstanceInformationResponse:
        self._record("describe_instance_information", request)

        if request.next_token:
            records, next_token = SECOND_PAGE, None
        else:
            records, next_token = FIRST_PAGE, FIRST_PAGE_TOKEN

        # Fresh models per call so filtering never touches the fixtures
        instances = [InstanceInformation(**record) for record in records]
        matched = filter_instances(instances, request.filters)
        logger.debug(
            f"[Simulation] Inventory page: {len(matched)}/{len(instances)} "
            f"records after {len(request.filters)} filter(s), "
            f"last_page={next_token is None}"
        )
        return DescribeInstanceInformationResponse(
            instance_information_list=matched,
            next_token=next_token,
        )

    # ------------------------------------------------------------------
    # Call recording
    # ------------------------------------------------------------------

    def get_calls(self, operation: str) -> list:
        """Get all recorded calls for one operation."""
        return [c for c in self.call_history if c["operation"] == operation]

    def reset(self):
        """Reset call history for reuse across tests."""
        self.call_history.clear()

    # ------------------------------------------------------------------
    # Helpers
    # ------------------------------------------------------------------

    def _record(self, operation: str, request: BaseModel):
        if self.record_calls:
            self.call_history.append(
                {"operation": operation, "request": request.model_dump()}
            )

    def _lookup(self, table: Mapping[str, Outcome], field: str, key: str) -> Outcome:
        outcome = table.get(key)
        if outcome is not None:
            return outcome
        if self.strict:
            raise UnknownFixtureKeyError(field, key)
        logger.debug(f"[Simulation] No fixture for {field}={key!r}, answering empty")
        return Success()

    def _resolve(self, outcome: Outcome, response_cls: Type[BaseModel], **fields):
        # Echoed request ids take precedence over fixture payload fields
        response = response_cls(**{**outcome.payload, **fields})
        if isinstance(outcome, Failure):
            attached = response if outcome.returns_response else None
            logger.info(
                f"[Simulation] Injecting failure "
                f"({outcome.code or 'unclassified'}): {outcome.message}"
            )
            if outcome.classified:
                raise ClientError(outcome.code, outcome.message, response=attached)
            raise InstanceManagerError(outcome.message, response=attached)
        return response
