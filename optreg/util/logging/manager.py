# SPDX-License-Identifier: GPLv3-or-later
# Copyright © 2025 pyoptreg Rui Pinheiro

"""Logging configuration for pyoptreg.

Configures file and TTY logging, log levels, and per-logger level overrides.
"""

import logging
import pathlib
import sys

from typing import Any, ClassVar, Self

from ..config.models import LoggingConfig
from ..helpers import script_info
from .formatters import ConditionalFormatter, HandlerFilter
from .levels import LoggingLevel


######
# MARK: Logging Manager
class LoggingManager:
    _instance: ClassVar["LoggingManager | None"] = None

    initialized: bool
    fh: logging.Handler | None = None
    ch: logging.Handler | None = None

    def __new__(cls) -> Self:
        if (instance := cls._instance) is None:
            instance = cls._instance = super().__new__(cls)
            instance.initialized = False
        return instance

    def initialize(self, config: LoggingConfig | dict[str, Any]) -> None:
        if not isinstance(config, LoggingConfig):
            config = LoggingConfig.model_validate(config)

        if self.initialized:
            msg = f"Must not initialise {type(self).__name__} twice"
            raise RuntimeError(msg)
        self.initialized = True

        self.config = config
        self.log_file_path = pathlib.Path(config.dir) / f"{script_info.get_script_name()}.log"

        self._configure_root_logger()
        self._configure_file_handler()
        self._configure_tty_handler()
        self._configure_custom_logger_levels()

    def _configure_root_logger(self) -> None:
        logging.captureWarnings(capture=True)
        logging.root.setLevel(self.config.levels.root.value)

    def _configure_file_handler(self) -> None:
        self.fh = None
        if self.config.levels.file.value < 0:
            return

        self.log_file_path.parent.mkdir(parents=True, exist_ok=True)

        self.fh = logging.FileHandler(self.log_file_path, mode="w", encoding="UTF-8")
        self.fh.setLevel(self.config.levels.file.value)
        self.fh.setFormatter(ConditionalFormatter("%(asctime)s [%(levelname)s:%(name)s] %(message)s"))
        self.fh.addFilter(HandlerFilter("file"))
        logging.root.addHandler(self.fh)

    def _configure_tty_handler(self) -> None:
        self.ch = None
        if self.config.levels.tty.value < 0:
            return

        if self.config.rich:
            from .rich_handler import CustomRichHandler

            self.ch = CustomRichHandler()
        else:
            self.ch = logging.StreamHandler(sys.stderr)
            self.ch.setFormatter(ConditionalFormatter("[%(levelname).1s:%(name)s] %(message)s"))

        self.ch.setLevel(self.config.levels.tty.value)
        self.ch.addFilter(HandlerFilter("tty"))

        # pytest captures output on its own
        if not script_info.is_unit_test():
            logging.root.addHandler(self.ch)

    def apply_logging_level(self, logger: logging.Logger) -> None:
        # Explicit levels win
        if logger.level != logging.NOTSET:
            return

        # Most specific (longest) matching custom pattern wins
        level: LoggingLevel = self.config.levels.default
        matched_len = -1
        for pattern, custom_level in self.config.levels.custom.items():
            if (match := pattern.match(logger.name)) is not None and len(match.group(0)) > matched_len:
                level = custom_level
                matched_len = len(match.group(0))

        if level == logging.NOTSET:
            return
        logger.setLevel(level.value)

    def _configure_custom_logger_levels(self) -> None:
        # Placeholders become real loggers later and go through getLogger then
        for logger in list(logging.root.manager.loggerDict.values()):
            if isinstance(logger, logging.Logger):
                self.apply_logging_level(logger)
