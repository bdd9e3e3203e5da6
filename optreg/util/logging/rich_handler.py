# SPDX-License-Identifier: GPLv3-or-later
# Copyright © 2025 pyoptreg Rui Pinheiro

import logging

from typing import override

from rich.console import Console, ConsoleRenderable
from rich.logging import RichHandler
from rich.text import Text


class CustomRichHandler(RichHandler):
    """Rich handler rendering ``[L:logger] message`` without the time column."""

    def __init__(self, *args, show_name: bool = True, level_color_everything: bool = True, **kwargs) -> None:
        kwargs.setdefault("console", Console(stderr=True))
        kwargs.setdefault("show_time", False)
        kwargs.setdefault("show_level", False)
        kwargs.setdefault("rich_tracebacks", True)
        super().__init__(*args, **kwargs)

        self.show_name = show_name
        self.level_color_everything = level_color_everything

    @override
    def render_message(self, record: logging.LogRecord, message: str) -> ConsoleRenderable:
        level_style = f"logging.level.{record.levelname.lower()}"

        text = Text()
        if not getattr(record, "simple", False):
            text.append("[", style="dim")
            text.append(record.levelname[:1], style=level_style)
            if self.show_name:
                text.append(f":{record.name}", style="dim")
            text.append("] ", style="dim")

        text.append(message, style=level_style if self.level_color_everything else "log.message")
        return text
