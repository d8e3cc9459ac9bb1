"""
Unit tests for the controller decorators.
"""

import logging

import pytest

from cardmatch.controller import logged_action


class Worker:

    def __init__(self, logger=None):
        self._logger = logger

    @logged_action("Deal")
    def deal(self, count):
        return count * 2

    @logged_action()
    def explode(self):
        raise RuntimeError("no cards")


class TestLoggedAction:

    def test_logs_start_and_completion(self, caplog):
        worker = Worker(logging.getLogger("test.worker"))

        with caplog.at_level(logging.DEBUG, logger="test.worker"):
            assert worker.deal(4) == 8

        assert "Starting Deal" in caplog.text
        assert "Completed Deal successfully" in caplog.text

    def test_logs_and_reraises_failures(self, caplog):
        worker = Worker(logging.getLogger("test.worker"))

        with caplog.at_level(logging.DEBUG, logger="test.worker"):
            with pytest.raises(RuntimeError):
                worker.explode()

        assert "Failed explode: no cards" in caplog.text

    def test_runs_without_logger(self):
        assert Worker().deal(1) == 2

    def test_preserves_metadata(self):
        assert Worker.deal.__name__ == "deal"
