"""
Unit tests for the error hierarchy and simulator configuration
"""

import logging
import pickle
from unittest.mock import patch

import pytest

from instance_manager_sim import (
    ClientError,
    InstanceManagerError,
    ParameterValidationError,
    UnknownFixtureKeyError,
)
from instance_manager_sim.config import LOG_FORMAT, Settings, settings, setup_logging
from instance_manager_sim.models import (
    GetCommandInvocationRequest,
    StartSessionRequest,
    StartSessionResponse,
    TerminateSessionRequest,
)
from instance_manager_sim.simulation import SimulatedInstanceManagerClient

# ============================================
# Errors
# ============================================


class TestErrorHierarchy:
    """Tests for error types"""

    def test_subclasses(self):
        """All errors derive from InstanceManagerError"""
        assert issubclass(ClientError, InstanceManagerError)
        assert issubclass(ParameterValidationError, InstanceManagerError)
        assert issubclass(ParameterValidationError, ValueError)
        assert issubclass(UnknownFixtureKeyError, ClientError)

    def test_base_error_attributes(self):
        """The base error has no code and no response by default"""
        err = InstanceManagerError("something broke")
        assert str(err) == "something broke"
        assert err.message == "something broke"
        assert err.code is None
        assert err.response is None

    def test_client_error_attributes(self):
        """ClientError carries its kind tag and optional response"""
        err = ClientError("TargetNotConnected", "no agent", response={"x": 1})
        assert err.code == "TargetNotConnected"
        assert err.message == "no agent"
        assert err.response == {"x": 1}
        assert str(err) == "TargetNotConnected: no agent"

    def test_raised_client_error_survives_pickle(self, client):
        """A raised TargetNotConnected error keeps code, message and response through pickle"""
        with pytest.raises(ClientError) as exc_info:
            client.start_session(StartSessionRequest(target="i-456"))
        restored = pickle.loads(pickle.dumps(exc_info.value))
        assert type(restored) is ClientError
        assert restored.code == "TargetNotConnected"
        assert restored.message == exc_info.value.message
        assert restored.response == StartSessionResponse()

    def test_terminate_error_survives_pickle(self, client):
        """The echoed response rides along through pickle"""
        with pytest.raises(ClientError) as exc_info:
            client.terminate_session(TerminateSessionRequest(session_id="session-term-error"))
        restored = pickle.loads(pickle.dumps(exc_info.value))
        assert restored.code == "DoesNotExistException"
        assert restored.response.session_id == "session-term-error"

    def test_invalid_command_id_survives_pickle(self, client):
        """InvalidCommandId round-trips with no response"""
        with pytest.raises(ClientError) as exc_info:
            client.get_command_invocation(GetCommandInvocationRequest(command_id="bad-id"))
        restored = pickle.loads(pickle.dumps(exc_info.value))
        assert restored.code == "InvalidCommandId"
        assert restored.response is None

    def test_unknown_fixture_key_error_survives_pickle(self):
        """UnknownFixtureKeyError round-trips with its field and value"""
        restored = pickle.loads(pickle.dumps(UnknownFixtureKeyError("command_id", "nope")))
        assert type(restored) is UnknownFixtureKeyError
        assert restored.code == "UnrecognizedFixtureKey"
        assert restored.field == "command_id"
        assert restored.value == "nope"

    def test_unclassified_errors_survive_pickle(self):
        """Base and validation errors keep their attributes through pickle"""
        restored = pickle.loads(pickle.dumps(InstanceManagerError("boom", response={"x": 1})))
        assert restored.message == "boom"
        assert restored.code is None
        assert restored.response == {"x": 1}
        validation = pickle.loads(pickle.dumps(ParameterValidationError("both given")))
        assert isinstance(validation, ValueError)
        assert str(validation) == "both given"

    def test_unknown_fixture_key_error(self):
        """UnknownFixtureKeyError names the field and value"""
        err = UnknownFixtureKeyError("target", "i-999")
        assert err.code == "UnrecognizedFixtureKey"
        assert "target='i-999'" in err.message


# ============================================
# Settings
# ============================================


class TestSettings:
    """Tests for pydantic-settings configuration"""

    def test_defaults(self, monkeypatch):
        """Defaults keep the lax fixture behavior and no recording"""
        monkeypatch.delenv("IMS_STRICT_FIXTURE_KEYS", raising=False)
        monkeypatch.delenv("IMS_RECORD_CALLS", raising=False)
        monkeypatch.delenv("IMS_LOG_LEVEL", raising=False)
        config = Settings(_env_file=None)
        assert config.strict_fixture_keys is False
        assert config.record_calls is False
        assert config.log_level == "INFO"

    def test_env_overrides(self, monkeypatch):
        """IMS_ environment variables override defaults"""
        monkeypatch.setenv("IMS_STRICT_FIXTURE_KEYS", "true")
        monkeypatch.setenv("IMS_RECORD_CALLS", "1")
        monkeypatch.setenv("IMS_LOG_LEVEL", "DEBUG")
        config = Settings(_env_file=None)
        assert config.strict_fixture_keys is True
        assert config.record_calls is True
        assert config.log_level == "DEBUG"

    def test_client_reads_settings(self, monkeypatch):
        """The client falls back to module settings when options are omitted"""
        monkeypatch.setattr(settings, "strict_fixture_keys", True)
        monkeypatch.setattr(settings, "record_calls", True)
        client = SimulatedInstanceManagerClient()
        assert client.strict is True
        assert client.record_calls is True
        with pytest.raises(UnknownFixtureKeyError):
            client.start_session(StartSessionRequest(target="i-999"))

    def test_unrelated_dotenv_keys_ignored(self, monkeypatch, tmp_path):
        """Unknown IMS_ keys in a .env file do not fail settings loading"""
        (tmp_path / ".env").write_text("IMS_UNKNOWN=1\nIMS_RECORD_CALLS=true\n")
        monkeypatch.chdir(tmp_path)
        monkeypatch.delenv("IMS_RECORD_CALLS", raising=False)
        config = Settings()
        assert config.record_calls is True
        assert not hasattr(config, "unknown")

    def test_explicit_options_win(self, monkeypatch):
        """Constructor options override module settings"""
        monkeypatch.setattr(settings, "strict_fixture_keys", True)
        client = SimulatedInstanceManagerClient(strict=False)
        response = client.get_command_invocation(
            GetCommandInvocationRequest(command_id="unknown")
        )
        assert response.status_details == ""


class TestSetupLogging:
    """Tests for setup_logging"""

    def test_uses_given_level(self):
        """An explicit level is passed to basicConfig"""
        with patch("instance_manager_sim.config.logging.basicConfig") as basic_config:
            setup_logging("warning")
        basic_config.assert_called_once_with(level=logging.WARNING, format=LOG_FORMAT)

    def test_uses_settings_level(self, monkeypatch):
        """Without a level, settings.log_level is used"""
        monkeypatch.setattr(settings, "log_level", "ERROR")
        monkeypatch.setattr(settings, "debug", False)
        with patch("instance_manager_sim.config.logging.basicConfig") as basic_config:
            setup_logging()
        basic_config.assert_called_once_with(level=logging.ERROR, format=LOG_FORMAT)

    def test_debug_setting(self, monkeypatch):
        """debug=True turns on DEBUG when no level is given"""
        monkeypatch.setattr(settings, "debug", True)
        with patch("instance_manager_sim.config.logging.basicConfig") as basic_config:
            setup_logging()
        basic_config.assert_called_once_with(level=logging.DEBUG, format=LOG_FORMAT)
