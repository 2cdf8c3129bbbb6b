import io

from rush.errors import SourceReadError
from rush.interface import Driver, FileLineSource, LoopState, Session
from rush.interface.sources import LineSource


class _ListSource(LineSource):
    """Yields the given items; an exception instance is raised instead of returned."""

    def __init__(self, items):
        self.items = list(items)
        self.reads = 0
        self.closed = False

    def read_line(self):
        self.reads += 1
        if not self.items:
            return None
        item = self.items.pop(0)
        if isinstance(item, Exception):
            raise item
        return item

    def close(self):
        self.closed = True


def _driver(items):
    executed = []
    source = _ListSource(items)
    driver = Driver(Session(reader=source), executor=executed.append)
    return driver, source, executed


def test_empty_source_terminates_clean_on_first_cycle():
    driver, source, executed = _driver([])
    assert driver.step() is LoopState.TERMINATED_CLEAN
    result = driver.run()
    assert result.exit_code == 0
    assert result.error is None
    assert executed == []
    assert source.reads == 1


def test_lines_are_tokenized_and_executed_in_order():
    driver, _, executed = _driver(["echo a\n", "echo b\n"])
    result = driver.run()
    assert executed == [["echo", "a"], ["echo", "b"]]
    assert result.state is LoopState.TERMINATED_CLEAN
    assert result.lines_read == 2
    assert result.commands_run == 2


def test_blank_lines_execute_nothing():
    driver, _, executed = _driver(["\n", "   \n", "ls\n"])
    result = driver.run()
    assert executed == [["ls"]]
    assert result.lines_read == 3
    assert result.commands_run == 1


def test_read_failure_terminates_failed():
    failure = SourceReadError("disk on fire")
    driver, _, executed = _driver(["echo a\n", failure, "echo never\n"])
    result = driver.run()
    assert result.state is LoopState.TERMINATED_FAILED
    assert result.error is failure
    assert result.exit_code == 1
    assert executed == [["echo", "a"]]


def test_terminal_states_are_absorbing():
    driver, source, _ = _driver([SourceReadError("boom"), "echo a\n"])
    assert driver.step() is LoopState.TERMINATED_FAILED
    reads = source.reads
    assert driver.step() is LoopState.TERMINATED_FAILED
    assert driver.run().state is LoopState.TERMINATED_FAILED
    assert source.reads == reads


def test_spawn_failure_does_not_stop_the_loop(capsys):
    source = FileLineSource(io.StringIO("rush-test-no-such-program\nrush-test-no-such-program\n"))
    result = Driver(Session(reader=source)).run()
    assert result.state is LoopState.TERMINATED_CLEAN
    assert result.commands_run == 2
    out, _ = capsys.readouterr()
    assert out.count("rush-test-no-such-program: ") == 2


def test_state_is_reading_between_cycles():
    driver, _, _ = _driver(["a\n", "b\n"])
    assert driver.state is LoopState.READING
    assert driver.step() is LoopState.READING
    assert driver.step() is LoopState.READING
    assert driver.step() is LoopState.TERMINATED_CLEAN


def test_carriage_return_in_a_script_line_is_one_command(tmp_path):
    script = tmp_path / "script.sh"
    script.write_bytes(b"echo a\rrm -rf victim\n")
    executed = []
    with FileLineSource.open(script) as source:
        Driver(Session(reader=source), executor=executed.append).run()
    assert executed == [["echo", "a\rrm", "-rf", "victim"]]
