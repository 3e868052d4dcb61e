from collections.abc import Set
import logging
from typing import Callable, Final

import pytest
from returns.result import Failure, Result, Success

from settings import get_settings
from utils.logger import FailureLevel, log_railway_function


SUCCESS_MESSAGE: Final[str] = "Operation succeeded"
FAILURE_MESSAGE: Final[str] = "Operation failed"
ERROR_VALUE: Final[Exception] = RuntimeError("Something went wrong")


@pytest.fixture
def loaded_settings(clear_settings_cache):
    """Settings loaded before log capture starts."""
    return get_settings()


@log_railway_function(failure_message=FAILURE_MESSAGE, success_message=SUCCESS_MESSAGE)
def some_function(should_succeed: bool):
    if should_succeed:
        return Success(42)
    return Failure(ERROR_VALUE)


@log_railway_function(
    failure_message=FAILURE_MESSAGE, failure_level=FailureLevel.WARNING
)
def some_tolerated_function(should_succeed: bool):
    if should_succeed:
        return Success(42)
    return Failure(ERROR_VALUE)


@pytest.mark.parametrize(
    "function, should_succeed, message, level",
    (
        pytest.param(some_function, True, SUCCESS_MESSAGE, {"INFO"}, id="Success"),
        pytest.param(
            some_function, False, FAILURE_MESSAGE, {"DEBUG", "ERROR"}, id="Failure"
        ),
        pytest.param(
            some_tolerated_function,
            False,
            FAILURE_MESSAGE,
            {"DEBUG", "WARNING"},
            id="Failure as warning",
        ),
    ),
)
@pytest.mark.usefixtures("loaded_settings")
def test_log_railway_function_capture_log_message(
    function: Callable[[bool], Result],
    should_succeed: bool,
    message: str,
    level: Set[str],
    caplog: pytest.LogCaptureFixture,
):
    with caplog.at_level(logging.DEBUG):
        _ = function(should_succeed)

    assert message in caplog.text
    assert {record.levelname for record in caplog.records} == level


def test_failure_logs_error_detail_at_debug(caplog: pytest.LogCaptureFixture):
    with caplog.at_level(logging.DEBUG):
        _ = some_function(False)

    assert f"{FAILURE_MESSAGE}: {ERROR_VALUE}" in caplog.text


@pytest.mark.parametrize("success_message", (None, ""))
@pytest.mark.usefixtures("loaded_settings")
def test_empty_success_message_does_not_log_on_success(
    success_message: str | None, caplog: pytest.LogCaptureFixture
):
    @log_railway_function(
        failure_message=FAILURE_MESSAGE, success_message=success_message
    )
    def empty_success_message_func():
        return Success(100)

    with caplog.at_level(logging.DEBUG):
        _ = empty_success_message_func()

    assert not caplog.records


def test_verbose_logging_logs_signature(
    monkeypatch: pytest.MonkeyPatch, caplog: pytest.LogCaptureFixture
):
    monkeypatch.setenv("RGBA_FILTERS_VERBOSE_LOGGING", "true")

    with caplog.at_level(logging.DEBUG):
        _ = some_function(True)

    assert "Calling some_function(True)" in caplog.text


def test_decorator_preserves_result_and_metadata():
    @log_railway_function(failure_message=FAILURE_MESSAGE)
    def documented():
        """My function docstring."""
        return Success({"a": 1})

    assert documented() == Success({"a": 1})
    assert documented.__name__ == "documented"
    assert documented.__doc__ == "My function docstring."
