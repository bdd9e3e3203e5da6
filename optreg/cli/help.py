# SPDX-License-Identifier: GPLv3-or-later
# Copyright © 2025 pyoptreg Rui Pinheiro

"""Usage and help rendering for an :class:`~optreg.registry.OptionRegistry`."""

from collections.abc import Sequence

from rich import box
from rich.console import Console
from rich.table import Table
from rich.text import Text

from ..registry import OptionInfo, OptionRegistry


type Positional = tuple[str, str]

HELP_WIDTH = 120


def metavar(info: OptionInfo) -> str:
    if info.is_enum:
        return "{" + "|".join(info.enum_values) + "}"
    return "<value>"


def format_usage(prog: str, registry: OptionRegistry, positionals: Sequence[Positional] = ()) -> str:
    parts = [f"usage: {prog}"]
    for info in registry:
        value = metavar(info)
        parts.append("[" + " | ".join(f"{flag} {value}" for flag in info.flags) + "]")
    parts.extend(f"[{name}]..." if i == len(positionals) - 1 else f"[{name}]" for i, (name, _) in enumerate(positionals))
    return " ".join(parts)


def build_options_table(registry: OptionRegistry) -> Table:
    table = Table(box=box.SIMPLE, header_style="bold")
    table.add_column("Option", no_wrap=True)
    table.add_column("Description")
    table.add_column("Default")
    table.add_column("Current")
    table.add_column("Choices")

    for info in registry:
        table.add_row(
            Text(", ".join(info.flags)),
            Text(info.description),
            Text(info.default_value_string),
            Text(info.current_value_string),
            Text(", ".join(info.enum_values)),
        )
    return table


def print_help(prog: str, description: str, registry: OptionRegistry, positionals: Sequence[Positional] = (), console: Console | None = None) -> None:
    if console is None:
        console = Console()

    console.print(format_usage(prog, registry, positionals), markup=False, highlight=False)
    if description:
        console.print()
        console.print(description, markup=False, highlight=False)

    if positionals:
        console.print()
        table = Table(box=box.SIMPLE, header_style="bold")
        table.add_column("Positional", no_wrap=True)
        table.add_column("Description")
        for name, text in positionals:
            table.add_row(Text(name), Text(text))
        console.print(table)

    console.print()
    console.print(build_options_table(registry))


def format_help(prog: str, description: str, registry: OptionRegistry, positionals: Sequence[Positional] = (), width: int = HELP_WIDTH) -> str:
    console = Console(width=width, color_system=None, force_terminal=False)
    with console.capture() as capture:
        print_help(prog, description, registry, positionals, console=console)
    return capture.get()
