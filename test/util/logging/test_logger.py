# SPDX-License-Identifier: GPLv3-or-later
# Copyright © 2025 pyoptreg Rui Pinheiro

import logging

import pytest

from optreg.util.logging import Logger, getLogger
from optreg.util.logging.formatters import ConditionalFormatter, HandlerFilter
from optreg.util.mixins import LoggableMixin


@pytest.mark.logging
class TestLogger:
    def test_getLogger_returns_logger(self, caplog):
        logger = getLogger("testLogger")
        assert isinstance(logger, Logger)
        with caplog.at_level(logging.INFO):
            logger.debug("debug message")
            logger.info("info message")
            logger.warning("warning message")
        assert "debug message" not in caplog.text
        assert "info message" in caplog.text
        assert "warning message" in caplog.text

    def test_getLogger_with_parent(self):
        parent = getLogger("parentLogger")
        child = getLogger("childLogger", parent=parent)
        assert child.parent is parent
        assert child.name == "parentLogger.childLogger"

    def test_getLogger_names_after_object_class(self):
        class Widget:
            pass

        assert getLogger(Widget()).name == "Widget"

    def test_logger_isEnabledFor(self):
        logger = getLogger("enabledLogger")
        assert logger.isEnabledFor(logging.INFO)
        assert logger.isEnabledForTty(logging.INFO)
        assert not logger.isEnabledForFile(logging.INFO)
        assert logger.isEnabledFor(logging.INFO, handler="tty")

    def test_logger_invalid_handler(self):
        with pytest.raises(ValueError, match="Unknown handler"):
            getLogger("invalidHandlerLogger").isEnabledFor(logging.INFO, handler="invalid")


@pytest.mark.logging
class TestLoggableMixin:
    def test_log_named_after_class(self):
        class Component(LoggableMixin):
            pass

        component = Component()
        assert component.log.name == "Component"
        assert component.log is component.log
        assert repr(component) == "<Component>"

    def test_log_child_of_parent(self):
        class Parent(LoggableMixin):
            pass

        class Child(LoggableMixin):
            instance_name = "kid"

        parent = Parent()
        child = Child()
        child.log_parent = parent
        assert child.log.name == "Parent.kid"
        assert repr(child) == "<Child kid>"


@pytest.mark.logging
class TestFormatters:
    def make_record(self, **extra) -> logging.LogRecord:
        record = logging.LogRecord("name", logging.INFO, __file__, 1, "hello %s", ("world",), None)
        for key, value in extra.items():
            setattr(record, key, value)
        return record

    def test_simple_records_skip_format(self):
        formatter = ConditionalFormatter("[%(levelname)s] %(message)s")
        assert formatter.format(self.make_record()) == "[INFO] hello world"
        assert formatter.format(self.make_record(simple=True)) == "hello world"

    def test_handler_filter(self):
        tty = HandlerFilter("tty")
        assert tty.filter(self.make_record())
        assert tty.filter(self.make_record(handler="tty"))
        assert not tty.filter(self.make_record(handler="file"))
