"""Unit tests for kernel error hierarchy."""

from __future__ import annotations

import json

from storefront_discovery.config.validation import (
    ConfigError,
    InvalidSettingValueError,
    MissingRequiredSettingError,
)
from storefront_discovery.kernel.errors import (
    ApplicationError,
    BaseError,
    HistoryNotInitializedError,
    InfrastructureError,
    PersistenceError,
    SerializationError,
)


class TestBaseError:
    def test_default_code(self) -> None:
        assert BaseError("m").code == "base_error"

    def test_custom_code(self) -> None:
        assert BaseError("m", code="custom").code == "custom"

    def test_to_dict_basic(self) -> None:
        err = BaseError("m", code="my_code", detail={"key": "val"})
        assert err.to_dict() == {"code": "my_code", "message": "m", "detail": {"key": "val"}}

    def test_cause(self) -> None:
        cause = RuntimeError("root")
        err = BaseError("wrap", cause=cause)
        assert err.__cause__ is cause
        assert "root" in err.to_dict()["cause"]

    def test_str_is_valid_json(self) -> None:
        parsed = json.loads(str(BaseError("oops", detail={"x": 1})))
        assert parsed["detail"] == {"x": 1}

    def test_repr(self) -> None:
        assert repr(BaseError("m")) == "BaseError(code='base_error', message='m')"


class TestHierarchy:
    def test_application_errors(self) -> None:
        assert issubclass(HistoryNotInitializedError, ApplicationError)
        assert issubclass(ConfigError, ApplicationError)
        assert issubclass(InvalidSettingValueError, ConfigError)

    def test_infrastructure_errors(self) -> None:
        assert issubclass(PersistenceError, InfrastructureError)
        assert issubclass(SerializationError, InfrastructureError)
        assert issubclass(InfrastructureError, BaseError)


class TestHistoryNotInitializedError:
    def test_message_names_operation(self) -> None:
        err = HistoryNotInitializedError("record")
        assert err.message == "SearchHistoryStore.record() called before init()"
        assert err.detail == {"operation": "record"}
        assert err.code == "history_not_initialized"


class TestPersistenceError:
    def test_default_message(self) -> None:
        err = PersistenceError("@search_history", "write")
        assert err.message == "Could not write key '@search_history'"
        assert err.key == "@search_history"
        assert err.operation == "write"

    def test_custom_message_and_cause(self) -> None:
        cause = OSError("disk full")
        err = PersistenceError("k", "write", "quota exceeded", cause=cause)
        assert err.message == "quota exceeded"
        assert err.__cause__ is cause


class TestSerializationError:
    def test_payload_type(self) -> None:
        err = SerializationError("bad", payload_type="search_history", detail={"index": 2})
        assert err.payload_type == "search_history"
        assert err.detail == {"index": 2}
        assert err.code == "serialization_error"


class TestInvalidSettingValueError:
    def test_fields(self) -> None:
        err = InvalidSettingValueError("history_cap", 0, "must be >= 1")
        assert err.setting_name == "history_cap"
        assert err.value == 0
        assert err.detail == {"setting": "history_cap", "value": "0", "reason": "must be >= 1"}
        assert "history_cap" in err.message


class TestMissingRequiredSettingError:
    def test_fields(self) -> None:
        err = MissingRequiredSettingError("DISCOVERY_REDIS_URL")
        assert err.code == "missing_required_setting"
        assert err.detail == {"setting": "DISCOVERY_REDIS_URL"}
        assert json.loads(str(err))["message"] == "Required setting 'DISCOVERY_REDIS_URL' is not set"
