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

from typing import Any, Union
from collections.abc import Callable

import numpy as _np

AuxiliaryData = dict[str, Any]
"""Opaque per-sample metadata. No part of the library inspects its content."""

Scalar = Union[int, float, complex, _np.generic]

Sample = Any
"""Any vector-like sample accepted by :func:`sampleflow.utils.as_vector`."""

SeedT = Union[int, None]

LogLikelihoodFun = Callable[[Sample], float]
PerturbFun = Callable[[Sample], Sample]
