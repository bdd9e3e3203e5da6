# SPDX-License-Identifier: GPLv3-or-later
# Copyright © 2025 pyoptreg Rui Pinheiro

"""Main entry point for the pyoptreg CLI application.

Parses the command line into typed options, initializes logging, and prints the resulting values.
"""

from optreg.runtime import Runtime


def main() -> None:
    runtime = Runtime()
    runtime.run()


if __name__ == "__main__":
    main()
