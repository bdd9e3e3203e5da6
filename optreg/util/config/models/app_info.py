# SPDX-License-Identifier: GPLv3-or-later
# Copyright © 2025 pyoptreg Rui Pinheiro

from .base_model import BaseConfigModel


class AppInfo(BaseConfigModel):
    name: str
    exe: str
    version: str
    test: bool
