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
import threading

from sampleflow.consumer import Consumer
from sampleflow.errors import ConsumerAlreadyConnectedError
from sampleflow.utils.types import AuxiliaryData, Sample

logger = logging.getLogger(__name__)


class Producer:
    """
    Base class of every object that generates a stream of samples.

    A producer does not store the samples it generates. Instead, it hands each
    of them, together with its auxiliary data, to every consumer (or filter)
    attached to it by calling :meth:`emit`. Delivery is synchronous: :meth:`emit`
    returns only once every attached consumer, and recursively every consumer
    attached to a filter downstream, has processed the sample.

    Consumers are usually attached from the consumer side, via
    :meth:`sampleflow.Consumer.connect_to_producer`:

    .. code:: python

        sampler = sampleflow.producers.MetropolisHastings()

        ratio = sampleflow.consumers.AcceptanceRatio()
        ratio.connect_to_producer(sampler)

    Producers can be fed from several threads at the same time. Attaching a
    consumer while another thread is emitting is safe: the new consumer will
    receive the samples emitted after :meth:`attach` returns.
    """

    def __init__(self):
        self._consumers = ()
        self._consumers_lock = threading.Lock()

    def attach(self, consumer):
        """
        Registers a consumer that will receive every sample emitted from now on.

        Consumers are called in the order in which they have been attached.
        A consumer can be attached to a single producer, and only once.

        Args:
            consumer: an object with a ``consume(sample, aux_data)`` method,
                usually a :class:`~sampleflow.Consumer` or a
                :class:`~sampleflow.Filter`.

        Raises:
            ConsumerAlreadyConnectedError: if the consumer is already attached
                to this or another producer.
        """
        if not callable(getattr(consumer, "consume", None)):
            raise TypeError(
                f"Cannot attach an object of type {type(consumer)} to a producer: "
                "it has no `consume(sample, aux_data)` method."
            )

        # Consumers record their upstream, other objects can only be checked
        # against this producer.
        if isinstance(consumer, Consumer):
            consumer._set_producer(self)

        with self._consumers_lock:
            if any(c is consumer for c in self._consumers):
                raise ConsumerAlreadyConnectedError(consumer)
            self._consumers = self._consumers + (consumer,)
            n_consumers = len(self._consumers)

        logger.debug(
            "Attached %s to %s (%d consumer(s))",
            type(consumer).__name__,
            type(self).__name__,
            n_consumers,
        )

    @property
    def consumers(self) -> tuple:
        """The attached consumers, in the order in which they receive samples."""
        return self._consumers

    @property
    def n_consumers(self) -> int:
        """Number of attached consumers."""
        return len(self._consumers)

    def emit(self, sample: Sample, aux_data: AuxiliaryData | None = None):
        """
        Hands a sample to every attached consumer.

        Any exception raised by a consumer propagates to the caller. Consumers
        attached before the failing one have already processed the sample and
        are not rolled back; those attached after it do not see the sample.

        Args:
            sample: The sample.
            aux_data: Auxiliary data associated with the sample. Consumers
                receive this very object. Defaults to an empty dictionary.
        """
        if aux_data is None:
            aux_data = {}

        # the tuple is replaced, never mutated, so iterating it needs no lock
        for consumer in self._consumers:
            consumer.consume(sample, aux_data)
