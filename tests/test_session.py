import pytest

from rush.config import Config
from rush.errors import RushError, SourceOpenError, UnsupportedModeError
from rush.interface import FileLineSource, create_session


def test_script_path_builds_a_file_source(tmp_path):
    script = tmp_path / "script.sh"
    script.write_text("echo hi\n")
    with create_session(Config(input_file=str(script))) as session:
        assert isinstance(session.reader, FileLineSource)
        assert session.reader.read_line() == "echo hi\n"
    assert session.reader.closed


def test_file_is_released_when_the_body_raises(tmp_path):
    script = tmp_path / "script.sh"
    script.write_text("echo hi\n")
    with pytest.raises(RuntimeError):
        with create_session(Config(input_file=str(script))) as session:
            raise RuntimeError("boom")
    assert session.reader.closed


def test_missing_script_is_a_source_open_error(tmp_path):
    with pytest.raises(SourceOpenError):
        create_session(Config(input_file=str(tmp_path / "missing.sh")))


def test_no_script_selects_the_unsupported_console():
    with pytest.raises(UnsupportedModeError) as excinfo:
        create_session(Config())
    assert isinstance(excinfo.value, RushError)
