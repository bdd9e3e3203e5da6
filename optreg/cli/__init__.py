# SPDX-License-Identifier: GPLv3-or-later
# Copyright © 2025 pyoptreg Rui Pinheiro

from .command_line import CommandLine, ParsedCommandLine
from .help import format_help, format_usage, print_help
from .tokenizer import FlagToken, TokenStream, tokenize


__all__ = [
    "CommandLine",
    "FlagToken",
    "ParsedCommandLine",
    "TokenStream",
    "format_help",
    "format_usage",
    "print_help",
    "tokenize",
]
