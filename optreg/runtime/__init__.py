# SPDX-License-Identifier: GPLv3-or-later
# Copyright © 2025 pyoptreg Rui Pinheiro

from .runtime import Runtime


__all__ = [
    "Runtime",
]
