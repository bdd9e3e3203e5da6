# SPDX-License-Identifier: GPLv3-or-later
# Copyright © 2025 pyoptreg Rui Pinheiro

import logging


# Quieten rich's internal logging during tests
logging.getLogger("rich").setLevel(logging.WARNING)
