import io

import pytest

from minigin.logger import Logger, LoggingSystem, NullLoggingSystem


class _Collecting(LoggingSystem):
    def __init__(self):
        self.messages = []

    def log(self, message):
        self.messages.append(message)


@pytest.fixture(autouse=True)
def _reset_logger():
    yield
    Logger.register_service(None)


def test_logging_system_is_abstract():
    with pytest.raises(TypeError):
        LoggingSystem()


def test_default_service_is_silent(capsys):
    Logger.get().log("quiet")
    captured = capsys.readouterr()
    assert captured.out == ""
    assert captured.err == ""


def test_registered_service_receives_messages():
    service = _Collecting()
    Logger.register_service(service)
    Logger.get().log("started")
    assert Logger.get() is service
    assert service.messages == ["started"]


def test_registering_none_restores_null_service(capsys):
    service = _Collecting()
    Logger.register_service(service)
    Logger.register_service(None)
    Logger.get().log("dropped")
    assert service.messages == []
    assert capsys.readouterr().out == ""


def test_null_logger_is_silent_by_default():
    stream = io.StringIO()
    NullLoggingSystem(stream=stream).log("quiet")
    assert stream.getvalue() == ""


def test_null_logger_echo_prefixes_message():
    stream = io.StringIO()
    NullLoggingSystem(echo=True, stream=stream).log("hello")
    assert stream.getvalue() == "Log: hello\n"