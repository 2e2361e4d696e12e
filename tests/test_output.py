import io
import logging

import pytest

from mindset.interfaces import IOutput
from mindset.output import CapturingOutput, ConsoleOutput, LoggingOutput


@pytest.mark.parametrize("output_type", [ConsoleOutput, CapturingOutput, LoggingOutput])
def test_outputs_implement_ioutput(output_type: type[IOutput]):
    assert isinstance(output_type(), IOutput)


def test_console_output_prints(capsys: pytest.CaptureFixture[str]):
    ConsoleOutput().write("hello")
    assert capsys.readouterr().out == "hello\n"


def test_console_output_writes_to_stream():
    stream = io.StringIO()
    output = ConsoleOutput(stream)

    output.write("first")
    output.write("second")

    assert stream.getvalue() == "first\nsecond\n"


def test_capturing_output_keeps_lines_in_order():
    output = CapturingOutput()
    output.write("a")
    output.write("b")

    assert output.lines == ["a", "b"]
    assert list(output) == ["a", "b"]
    assert len(output) == 2
    assert "a" in output
    assert "c" not in output


def test_capturing_output_lines_is_a_copy():
    output = CapturingOutput()
    output.write("a")

    output.lines.append("b")
    assert output.lines == ["a"]


def test_capturing_output_clear():
    output = CapturingOutput()
    output.write("a")
    output.clear()

    assert len(output) == 0
    assert repr(output) == "CapturingOutput(lines=[])"


def test_logging_output(caplog: pytest.LogCaptureFixture):
    logger = logging.getLogger("mindset.tests.output")
    output = LoggingOutput(logger, level=logging.WARNING)

    with caplog.at_level(logging.WARNING, logger="mindset.tests.output"):
        output.write("Welcome email sent to alice@example.com.")

    assert caplog.records[-1].getMessage() == "Welcome email sent to alice@example.com."
    assert caplog.records[-1].levelno == logging.WARNING
