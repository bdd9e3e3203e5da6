# SPDX-License-Identifier: GPLv3-or-later
# Copyright © 2025 pyoptreg Rui Pinheiro

"""Command-line option registry with typed bindings and prefix-matched enum values."""
