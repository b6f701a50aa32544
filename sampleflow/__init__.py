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

__all__ = [
    "config",
    "consumers",
    "errors",
    "filters",
    "producers",
    "utils",
    "AuxiliaryData",
    "Consumer",
    "Filter",
    "Producer",
]

from ._version import version as __version__  # noqa: F401

from .utils import config

from . import utils
from . import errors

from .utils.types import AuxiliaryData
from .producer import Producer
from .consumer import Consumer
from .filter import Filter

from . import consumers, filters, producers
