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
from sampleflow.errors import EmptyAccumulatorError, SampleShapeMismatchError
from sampleflow.utils import copy_vector, differs


class AcceptanceRatio(Consumer):
    """
    Computes the acceptance ratio of the samples seen so far.

    A sample is counted as *accepted* if any of its components differs from
    the corresponding component of the sample that preceded it. This is a
    proxy for the true accept/reject decision of a Markov-chain sampler such
    as :class:`~sampleflow.producers.MetropolisHastings`, and relies on the
    assumption that every accepted proposal differs from the current state.
    A proposal that is accepted but identical to the current state is counted
    as rejected. The first sample is always counted as accepted.

    Samples can be numpy arrays, sequences of numbers or scalars. The
    number of components is fixed by the first sample.

    This consumer can be fed concurrently from multiple threads.
    """

    def __init__(self):
        super().__init__()
        self._lock = threading.Lock()

        self._n_samples = 0
        self._n_accepted = 0
        self._previous_sample = None

    def consume(self, sample, aux_data):
        """
        Process one sample by comparing it with the previous one.

        Args:
            sample: The sample to process.
            aux_data: Auxiliary data about this sample. It is ignored.
        """
        sample = copy_vector(sample)

        with self._lock:
            if self._n_samples == 0:
                self._n_samples = 1
                self._n_accepted = 1
            else:
                if sample.size != self._previous_sample.size:
                    raise SampleShapeMismatchError(
                        self._previous_sample.size, sample.size
                    )

                self._n_samples += 1
                if differs(sample, self._previous_sample):
                    self._n_accepted += 1

            self._previous_sample = sample

    @property
    def n_samples(self) -> int:
        """Number of samples consumed so far."""
        with self._lock:
            return self._n_samples

    @property
    def n_accepted(self) -> int:
        """Number of samples that differed from their predecessor (the first
        one included)."""
        with self._lock:
            return self._n_accepted

    def get(self) -> float:
        """
        Returns the fraction of accepted samples among all the samples
        consumed so far.

        Raises:
            EmptyAccumulatorError: if no sample has been consumed yet.
        """
        with self._lock:
            if self._n_samples == 0:
                raise EmptyAccumulatorError(self)
            return self._n_accepted / self._n_samples

    def __repr__(self):
        with self._lock:
            return (
                f"AcceptanceRatio(# accepted = {self._n_accepted}/{self._n_samples})"
            )
