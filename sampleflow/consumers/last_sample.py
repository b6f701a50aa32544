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

import threading

from sampleflow.consumer import Consumer
from sampleflow.errors import EmptyAccumulatorError


class LastSample(Consumer):
    """
    Keeps the most recent sample it received.

    The sample is stored as received, without copying or conversion, so
    samples of any type (not only numerical vectors) are supported.
    """

    def __init__(self):
        super().__init__()
        self._lock = threading.Lock()
        self._n_samples = 0
        self._last_sample = None

    def consume(self, sample, aux_data):
        with self._lock:
            self._n_samples += 1
            self._last_sample = sample

    @property
    def n_samples(self) -> int:
        """Number of samples consumed so far."""
        with self._lock:
            return self._n_samples

    def get(self):
        """
        Returns the last sample consumed.

        Raises:
            EmptyAccumulatorError: if no sample has been consumed yet.
        """
        with self._lock:
            if self._n_samples == 0:
                raise EmptyAccumulatorError(self)
            return self._last_sample
