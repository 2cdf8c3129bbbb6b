import logging

from rush.boot import boot_sequence
from rush.config import Mode


def test_boot_traces_only_steps_that_run(tmp_path, monkeypatch):
    log_file = tmp_path / "rush.log"
    monkeypatch.setenv("RUSH_LOG_LEVEL", "debug")
    monkeypatch.setenv("RUSH_LOG_FILE", str(log_file))

    state = boot_sequence(["rush", "job.sh"])

    assert state.config.input_file == "job.sh"
    assert state.settings.log_level == "DEBUG"
    assert state.logger.level == logging.DEBUG
    text = log_file.read_text(encoding="utf-8")
    assert "[  OK  ] Resolve invocation" in text
    assert "Load settings" not in text


def test_log_settings_do_not_change_the_invocation(monkeypatch):
    quiet = boot_sequence(["rush", "job.sh"]).config
    monkeypatch.setenv("RUSH_LOG_LEVEL", "debug")
    loud = boot_sequence(["rush", "job.sh"]).config
    assert quiet == loud
    assert loud.mode is Mode.BOURNE
