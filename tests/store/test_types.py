"""Tests for _types.py — Secret, UNDEFINED, and exception classes."""

import pytest
from pydantic import BaseModel, ValidationError

from paramfile.store._types import (
    UNDEFINED,
    ConfigError,
    ConfigFileNotFoundError,
    FatalConfigError,
    MalformedValueError,
    NotLoadedError,
    Secret,
    UndefinedParameterError,
    _Undefined,
)


class TestUndefined:
    def test_singleton(self):
        assert _Undefined() is _Undefined()
        assert _Undefined() is UNDEFINED

    def test_falsy(self):
        assert not UNDEFINED

    def test_repr(self):
        assert repr(UNDEFINED) == "UNDEFINED"


class TestErrors:
    def test_undefined_parameter_names_key_and_file(self):
        err = UndefinedParameterError("threads", "/etc/run.ini")
        assert str(err) == "The parameter threads is undefined in /etc/run.ini"
        assert err.key == "threads"
        assert issubclass(UndefinedParameterError, ConfigError)

    def test_not_loaded_is_distinct_from_undefined(self):
        assert not issubclass(NotLoadedError, UndefinedParameterError)
        assert issubclass(NotLoadedError, RuntimeError)

    def test_file_not_found_is_os_error(self):
        err = ConfigFileNotFoundError("missing.ini")
        assert isinstance(err, FileNotFoundError)
        assert isinstance(err, ConfigError)
        assert "missing.ini" in str(err)

    def test_malformed_value_is_value_error(self):
        assert issubclass(MalformedValueError, ValueError)

    def test_fatal_error_exits(self):
        err = FatalConfigError("boom")
        assert isinstance(err, SystemExit)
        assert err.code == "boom"
        assert str(err) == "boom"


class TestSecret:
    def test_hidden_in_repr_and_str(self):
        password = Secret("tiger")
        assert "tiger" not in repr(password)
        assert str(password) == "***"

    def test_secret_value(self):
        assert Secret("tiger").secret_value == "tiger"

    def test_compares_by_value(self):
        assert Secret("tiger") == Secret("tiger")
        assert Secret("tiger") != Secret("lion")
        assert Secret("tiger") != "tiger"


class _Login(BaseModel):
    password: Secret


class TestSecretField:
    def test_plain_string_wrapped(self):
        login = _Login(password="tiger")
        assert login.password == Secret("tiger")

    def test_dumped_redacted(self):
        assert _Login(password="tiger").model_dump() == {"password": "***"}

    def test_non_string_rejected(self):
        with pytest.raises(ValidationError):
            _Login(password=42)

    def test_required(self):
        with pytest.raises(ValidationError):
            _Login()
