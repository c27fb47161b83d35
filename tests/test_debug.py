"""Tests for the logging layer"""
import logging

from connect4_engine.debug import DebugLevel, debug
from connect4_engine.game.rules import ConnectFourGame


def test_component_filtering(caplog):
    debug.configure(level=DebugLevel.DEBUG, components=['game'])
    with caplog.at_level(logging.DEBUG, logger="connect4_engine"):
        game = ConnectFourGame()
        for column in [0, 1, 0, 1, 0, 1, 0]:
            game.drop_counter(column)
    messages = [record.getMessage() for record in caplog.records]
    assert any(m.startswith("[game] ONE dropped into column 0") for m in messages)
    assert not any(m.startswith("[winlines]") for m in messages)


def test_win_logged_at_info(caplog):
    debug.configure(level=DebugLevel.INFO)
    with caplog.at_level(logging.DEBUG, logger="connect4_engine"):
        game = ConnectFourGame()
        for column in [0, 1, 0, 1, 0, 1, 0]:
            game.drop_counter(column)
    assert [r.levelno for r in caplog.records] == [logging.INFO]
    assert "ONE wins with move at (0, 3)" in caplog.records[0].getMessage()


def test_disabled_logs_nothing(caplog):
    debug.configure(level=DebugLevel.TRACE, enabled=False)
    with caplog.at_level(logging.DEBUG, logger="connect4_engine"):
        debug.error("not shown")
    assert caplog.records == []


def test_set_from_string():
    assert debug.set_from_string("Trace")
    assert debug.level == DebugLevel.TRACE
    assert not debug.set_from_string("loud")
    assert debug.level == DebugLevel.TRACE


def test_timer():
    assert debug.end_timer("never-started") is None
    debug.start_timer("work")
    elapsed = debug.end_timer("work")
    assert elapsed is not None and elapsed >= 0


def test_log_file(tmp_path):
    log_file = tmp_path / "engine.log"
    debug.configure(level=DebugLevel.INFO, log_file=str(log_file))
    debug.info("written to file", "test")
    debug.configure(log_file="")
    assert "[test] written to file" in log_file.read_text()
