# SPDX-License-Identifier: GPLv3-or-later
# Copyright © 2025 pyoptreg Rui Pinheiro

from collections.abc import Sequence

from rich import box
from rich.console import Console
from rich.table import Table
from rich.text import Text

from ..config import CFG, Config, Options
from ..util.config.wrapper import ConfigManager
from ..util.helpers import script_info
from ..util.logging import exception_handler
from ..util.logging.manager import LoggingManager
from ..util.mixins import LoggableMixin


class Runtime(LoggableMixin):
    initialized: bool
    config: ConfigManager[Config, Options]

    def __init__(self, *, config: ConfigManager[Config, Options] | None = None, console: Console | None = None) -> None:
        super().__init__()
        self.initialized = False
        self.config = CFG if config is None else config
        self.console = Console() if console is None else console

    def initialize(self, argv: Sequence[str] | None = None) -> None:
        if self.initialized:
            return

        self.config.initialize(argv)
        self._initialize_logging()

        self.initialized = True

    def _initialize_logging(self) -> None:
        manager = LoggingManager()
        # Tests set up logging once per session
        if manager.initialized:
            return

        manager.initialize(self.config.logging)
        exception_handler.install()

        self.log.info("****** %s %s ******", self.config.app.name, self.config.app.version, extra={"simple": True})
        self.config.debug()

    # MARK: Run
    def run(self, argv: Sequence[str] | None = None) -> None:
        if not self.initialized:
            self.initialize(argv)

        self.console.print(self.build_summary())

    def build_summary(self) -> Table:
        """Tabulate every option's current value and the positional arguments."""
        table = Table(title=f"{script_info.get_script_name()} options", box=box.SIMPLE, header_style="bold")
        table.add_column("Option", no_wrap=True)
        table.add_column("Value")
        table.add_column("Source")

        applied = set(self.config.parsed.applied) if self.config.parsed is not None else set()
        for info in self.config.command_line.registry:
            table.add_row(Text(info.name), Text(info.current_value_string), Text("command line" if info.name in applied else "default"))

        positionals = self.config.parsed.positionals if self.config.parsed is not None else []
        for index, positional in enumerate(positionals):
            table.add_row(Text(f"#{index}"), Text(positional), Text("positional"))

        return table
