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

"""
Conversion of user samples to flat numpy vectors.

Accumulators only need indexed access to the components of a sample, its
size, and elementwise arithmetic. Rather than requiring a specific container,
every incoming sample goes through :func:`as_vector`, which is dispatched on
the type of the sample. Support for new container types is added by
registering a new method:

.. code:: python

    from sampleflow.utils import as_vector
    from sampleflow.utils.dispatch import dispatch

    @dispatch
    def as_vector(x: MyTensor):
        return x.to_numpy().reshape(-1)

"""

import numpy as np

from .dispatch import dispatch
from .types import Scalar


@dispatch
def as_vector(x: np.ndarray):
    """Returns the sample `x` as a flat vector. Arrays are flattened."""
    return np.ravel(x)


@dispatch
def as_vector(x: Scalar):  # noqa: F811
    return np.asarray([x])


@dispatch
def as_vector(x: object):  # noqa: F811
    vec = np.asarray(x)
    if vec.dtype.kind not in "biufc":
        raise TypeError(
            f"Samples of type {type(x)} cannot be interpreted as a numerical "
            f"vector (got dtype {vec.dtype})."
        )
    return vec.reshape(-1)


def copy_vector(x):
    """Returns a flat vector owning its own copy of the data of `x`."""
    return np.array(as_vector(x), copy=True)


def differs(x, y) -> bool:
    """Returns True if any component of `x` is different from the same
    component of `y`. Both vectors must have the same size."""
    return bool(np.any(x != y))
