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
import threading

from sampleflow.errors import ConsumerAlreadyConnectedError
from sampleflow.utils.types import AuxiliaryData, Sample


class Consumer(abc.ABC):
    """
    Base class of every object receiving samples from a
    :class:`~sampleflow.Producer`.

    Subclasses implement :meth:`consume`, which is called once for every
    sample emitted by the producer they are connected to. Because a producer
    may be fed from several threads, :meth:`consume` can be called
    concurrently; consumers with internal state must serialize access to it.
    """

    def __init__(self):
        self._producer = None
        self._connection_lock = threading.Lock()

    def connect_to_producer(self, producer):
        """
        Connects this consumer to a producer, so that it receives every sample
        emitted by the producer from now on.

        This is the same as ``producer.attach(consumer)``. A consumer can only
        be connected to a single producer, whichever of the two is used.

        Args:
            producer: the upstream :class:`~sampleflow.Producer` (or
                :class:`~sampleflow.Filter`).

        Raises:
            ConsumerAlreadyConnectedError: if the consumer is already connected.
        """
        producer.attach(self)

    def _set_producer(self, producer):
        # called by Producer.attach before the consumer is registered
        with self._connection_lock:
            if self._producer is not None:
                raise ConsumerAlreadyConnectedError(self)
            self._producer = producer

    @property
    def producer(self):
        """The producer this consumer is connected to, or None."""
        return self._producer

    @abc.abstractmethod
    def consume(self, sample: Sample, aux_data: AuxiliaryData):
        """
        Process one sample.

        Args:
            sample: The sample to process.
            aux_data: Auxiliary data about this sample.
        """
