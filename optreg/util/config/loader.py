# SPDX-License-Identifier: GPLv3-or-later
# Copyright © 2025 pyoptreg Rui Pinheiro

from collections.abc import Mapping
from typing import Any

from ..helpers import script_info
from ..mixins import LoggableMixin
from .models import ConfigBase


def merge_dotted(data: dict[str, Any], values: Mapping[str, Any]) -> dict[str, Any]:
    """Insert ``values`` keyed by dotted paths (``'logging.levels.tty'``) into the nested dict ``data``.

    >>> merge_dotted({"logging": {"rich": True}}, {"logging.levels.tty": "debug"})
    {'logging': {'rich': True, 'levels': {'tty': 'debug'}}}
    """
    for path, value in values.items():
        *parents, key = path.split(".")

        d = data
        for parent in parents:
            next_d = d.get(parent)
            if not isinstance(next_d, dict):
                next_d = d[parent] = {}
            d = next_d

        current = d.get(key)
        if isinstance(value, dict) and isinstance(current, dict):
            current.update(value)
        else:
            d[key] = value
    return data


class ConfigLoader[C: ConfigBase](LoggableMixin):
    def __init__(self, config_class: type[C]) -> None:
        super().__init__()
        self.config_class = config_class
        self.config: C | None = None

    def load(self, values: Mapping[str, Any], data: dict[str, Any] | None = None) -> C:
        if self.config is not None:
            msg = "Configuration already loaded. Cannot load again."
            raise RuntimeError(msg)

        data = merge_dotted({} if data is None else data, values)

        if "app" in data:
            msg = "Configuration contains 'app' section. This is reserved for internal use."
            raise ValueError(msg)
        data["app"] = {
            "name": script_info.get_script_name(),
            "exe": script_info.get_exe_name(),
            "version": script_info.get_version(),
            "test": script_info.is_unit_test(),
        }

        self.config = self.config_class.model_validate(data)
        self.log.debug("Configuration loaded successfully")
        return self.config
