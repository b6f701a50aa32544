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

import numpy as np

from sampleflow.errors import InvalidComponentIndexError
from sampleflow.filter import Filter
from sampleflow.utils import as_vector


class ComponentPairSplitter(Filter):
    """
    Extracts two components of every vector-valued sample and passes them on
    as a two-component sample in their own right.

    This is useful, for example, to compute the joint statistics of a pair of
    components of a sample (their autocovariance, or a 2d histogram).

    .. code:: python

        splitter = sampleflow.filters.ComponentPairSplitter(1, 3)
        splitter.connect_to_producer(sampler)

        autocovariance = sampleflow.consumers.SpuriousAutocovariance(10)
        autocovariance.connect_to_producer(splitter)

    The auxiliary data is forwarded unchanged. The filter holds no state other
    than the two indices, so it can be fed concurrently from multiple threads.
    """

    def __init__(self, component_1: int, component_2: int):
        """
        Constructs the filter.

        Args:
            component_1: The index of the first component to extract.
            component_2: The index of the second component to extract.
        """
        super().__init__()

        for index in (component_1, component_2):
            if isinstance(index, bool) or not isinstance(index, (int, np.integer)):
                raise TypeError(f"Component indices must be integers, got {index!r}.")
            if index < 0:
                raise ValueError(
                    f"Component indices must be non-negative, got {index}."
                )

        self._selected_components = (int(component_1), int(component_2))

    @property
    def selected_components(self) -> tuple[int, int]:
        """The indices of the two extracted components."""
        return self._selected_components

    def filter(self, sample, aux_data):
        """
        Process one sample by extracting the two selected components.

        Args:
            sample: The sample to process.
            aux_data: Auxiliary data about this sample. It is passed on as is.

        Returns:
            The array ``[sample[component_1], sample[component_2]]`` and
            `aux_data`.

        Raises:
            InvalidComponentIndexError: if the sample has too few components.
        """
        x = as_vector(sample)
        for index in self._selected_components:
            if index >= x.size:
                raise InvalidComponentIndexError(index, x.size)

        i, j = self._selected_components
        return np.array([x[i], x[j]]), aux_data

    def __repr__(self):
        i, j = self._selected_components
        return f"ComponentPairSplitter({i}, {j})"
