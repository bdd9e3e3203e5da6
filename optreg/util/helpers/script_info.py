# SPDX-License-Identifier: GPLv3-or-later
# Copyright © 2025 pyoptreg Rui Pinheiro

import os
import pathlib
import re
import sys
import tomllib


_IS_UNIT_TEST: bool | None = None


def is_unit_test() -> bool:
    """Test whether running in a unit test environment.

    Returns:
        bool: True if running under pytest or with a truthy ``UNIT_TEST`` environment variable.

    """
    global _IS_UNIT_TEST  # noqa: PLW0603

    if _IS_UNIT_TEST is None:
        _IS_UNIT_TEST = _is_unit_test()
    return _IS_UNIT_TEST


def _is_unit_test() -> bool:
    if os.environ.get("PYTEST_VERSION") is not None:
        return True

    env = os.environ.get("UNIT_TEST", "").strip()
    if not env:
        return False
    return env.lower() not in ("false", "0", "no")


DEFAULT_EXE_NAME = "pyoptreg.py"


def get_exe_name() -> str:
    if (not is_unit_test()) and sys.argv and sys.argv[0]:
        return pathlib.Path(sys.argv[0]).name
    return DEFAULT_EXE_NAME


def get_script_name() -> str:
    return re.sub(r"\.py$", "", get_exe_name(), flags=re.IGNORECASE)


def get_script_home() -> pathlib.Path:
    if (not is_unit_test()) and sys.argv and sys.argv[0]:
        return pathlib.Path(sys.argv[0]).resolve().parent
    return pathlib.Path.cwd()


def get_version() -> str:
    """Return the project version declared in ``pyproject.toml`` next to the script, or ``"unknown"``."""
    pyproject_path = get_script_home() / "pyproject.toml"
    try:
        with pyproject_path.open("rb") as f:
            data = tomllib.load(f)
        return data["project"]["version"]
    except (OSError, KeyError, tomllib.TOMLDecodeError):
        return "unknown"
