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

import abc

from sampleflow.consumer import Consumer
from sampleflow.producer import Producer
from sampleflow.utils.types import AuxiliaryData, Sample


class Filter(Consumer, Producer):
    """
    A stage that is both a consumer and a producer: it receives samples from
    an upstream producer, transforms them, and emits the result to its own
    consumers.

    Subclasses implement :meth:`filter`. Returning None drops the sample, in
    which case the downstream consumers do not see it.
    """

    def __init__(self):
        Consumer.__init__(self)
        Producer.__init__(self)

    def consume(self, sample: Sample, aux_data: AuxiliaryData):
        result = self.filter(sample, aux_data)
        if result is not None:
            self.emit(*result)

    @abc.abstractmethod
    def filter(
        self, sample: Sample, aux_data: AuxiliaryData
    ) -> tuple[Sample, AuxiliaryData] | None:
        """
        Transforms one sample.

        Args:
            sample: The incoming sample.
            aux_data: Auxiliary data about this sample.

        Returns:
            A tuple ``(new_sample, new_aux_data)`` to be emitted downstream, or
            None if the sample is to be dropped.
        """
