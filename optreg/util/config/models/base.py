# SPDX-License-Identifier: GPLv3-or-later
# Copyright © 2025 pyoptreg Rui Pinheiro

import logging

from reprlib import Repr

from pydantic import Field

from ...logging import getLogger
from ...logging.config import LoggingConfig
from .app_info import AppInfo
from .base_model import BaseConfigModel


class ConfigBase(BaseConfigModel):
    app: AppInfo = Field(description="Application information, gathered at startup")
    logging: LoggingConfig = Field(default_factory=LoggingConfig, description="Logging configuration")

    def debug(self) -> None:
        log = getLogger(type(self).__name__)
        model_dump = None

        # TTY
        if log.isEnabledForTty(logging.DEBUG):
            if self.logging.rich:
                from rich import pretty

                pretty.pprint(self, indent_guides=True, expand_all=True)
            else:
                model_dump = self.model_dump()
                log.debug(Repr(indent=4).repr(model_dump), extra={"handler": "tty"})

        # File
        if log.isEnabledForFile(logging.DEBUG):
            if model_dump is None:
                model_dump = self.model_dump()
            log.debug("Configuration: %s", Repr(indent=4).repr(model_dump), extra={"handler": "file"})
