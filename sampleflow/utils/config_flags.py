# Copyright 2026 The SampleFlow Authors - All rights reserved.
#
# Licensed under the Apache License, Version 2.0 (the "License");
# you may not use this file except in compliance with the License.
# You may obtain a copy of the License at
#
#    http://www.apache.org/licenses/LICENSE-2.0
#
# Unless required by applicable law or agreed to in writing, software
# distributed under the License is distributed on an "AS IS" BASIS,
# WITHOUT WARRANTIES OR CONDITIONS OF ANY KIND, either express or implied.
# See the License for the specific language governing permissions and
# limitations under the License.

import logging
import os
from dataclasses import dataclass
from textwrap import dedent
from types import MappingProxyType
from typing import Any, Callable, Optional

_TRUE_STRINGS = ("y", "yes", "t", "true", "on", "1")
_FALSE_STRINGS = ("n", "no", "f", "false", "off", "0")


def bool_env(varname: str, default: bool) -> bool:
    """Read an environment variable and interpret it as a boolean.
    True: 'y', 'yes', 't', 'true', 'on', and '1';
    False: 'n', 'no', 'f', 'false', 'off', and '0'.
    Case and surrounding whitespace are ignored.

    Args:
        varname: the name of the variable
        default: the value returned if the variable is not set
    """
    raw = os.environ.get(varname)
    if raw is None:
        return bool(default)

    val = raw.strip().lower()
    if val in _TRUE_STRINGS:
        return True
    if val in _FALSE_STRINGS:
        return False
    raise ValueError(f"invalid truth value {raw!r} for environment {varname!r}")


@dataclass
class _Flag:
    value: bool
    help: str
    runtime: bool
    callback: Optional[Callable[[bool], None]]


class Config:
    """
    Switches controlling the behaviour of SampleFlow.

    Every flag is a boolean whose initial value is read from the environment
    variable with the same name, and is accessed as a lowercase attribute:

    .. code:: python

        sampleflow.config.sampleflow_show_progress = True

    Only flags defined with ``runtime=True`` can be changed after import.
    """

    def __init__(self):
        object.__setattr__(self, "_flags", {})

    def define(self, name, default, *, help, runtime=False, callback=None):
        """
        Defines a new flag

        Args:
            name: the flag name, an uppercase string like "SAMPLEFLOW_XXX"
            default: default value, overridden by the environment variable
                with the same name if it is set
            help: a string to use as description of this flag
            runtime: whether the flag can be modified at runtime
            callback: an optional function taking the value as argument, called
                at definition and every time the flag is changed
        """
        if name in self._flags:
            raise KeyError(f"Flag {name} already defined.")

        flag = _Flag(bool_env(name, default), help, runtime, callback)
        self._flags[name] = flag
        if callback is not None:
            callback(flag.value)

    @property
    def FLAGS(self):
        """Read-only mapping from the flag names to their current value."""
        return MappingProxyType({k: f.value for k, f in self._flags.items()})

    def update(self, name, value):
        """
        Updates a runtime flag.

        Args:
            name: the name of the flag, in any case
            value: the new value, a bool
        """
        name = name.upper()
        flag = self._flags[name]

        if not flag.runtime:
            raise RuntimeError(
                f"\n\nFlag `{name}` can only be set through an environment "
                "variable before importing sampleflow.\n"
                "Try launching python with:\n\n"
                f"\t{name}={int(flag.value)} python\n\n"
            )
        if not isinstance(value, bool):
            raise TypeError(
                f"Flag {name} must be a bool, but the value {value!r} is a "
                f"{type(value)}."
            )

        flag.value = value
        if flag.callback is not None:
            flag.callback(value)

    def help(self, name) -> str:
        """Returns the description of the flag `name`."""
        return self._flags[name.upper()].help

    def __repr__(self):
        lines = [f" - {k} = {f.value}" for k, f in self._flags.items()]
        return "\nGlobal configurations for SampleFlow\n" + "\n".join(lines) + "\n"

    def __dir__(self):
        return [k.lower() for k in self._flags]

    def __getattr__(self, name: str) -> Any:
        if name == name.lower() and name.upper() in self._flags:
            return self._flags[name.upper()].value
        raise AttributeError(f"'Config' object has no attribute '{name}'")

    def __setattr__(self, name: str, value: Any) -> None:
        if name == name.lower() and name.upper() in self._flags:
            self.update(name, value)
            return
        super().__setattr__(name, value)


config = Config()

# level of the sampleflow logger before SAMPLEFLOW_DEBUG was switched on
_level_before_debug = None


def _set_debug_logging(enabled):
    global _level_before_debug
    sampleflow_logger = logging.getLogger("sampleflow")
    if enabled:
        if _level_before_debug is None:
            _level_before_debug = sampleflow_logger.level
        sampleflow_logger.setLevel(logging.DEBUG)
    elif _level_before_debug is not None:
        sampleflow_logger.setLevel(_level_before_debug)
        _level_before_debug = None


config.define(
    "SAMPLEFLOW_DEBUG",
    default=False,
    help=dedent(
        """
        Force the level of the `sampleflow` logger to DEBUG. Switching it off
        restores the level the logger had before. While it is off the level
        is left to the application.
        """
    ),
    runtime=True,
    callback=_set_debug_logging,
)

config.define(
    "SAMPLEFLOW_SHOW_PROGRESS",
    default=False,
    help=dedent(
        """
        Default value of the `show_progress` argument of the producers shipped
        with SampleFlow. When enabled, a tqdm progress bar is displayed while
        samples are being generated.
        """
    ),
    runtime=True,
)
