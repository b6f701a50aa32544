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
from collections.abc import Iterable

from tqdm.auto import tqdm

from sampleflow.producer import Producer
from sampleflow.utils import config

logger = logging.getLogger(__name__)


class Range(Producer):
    """
    A producer that emits the elements of a given collection, one after the
    other, each with an empty auxiliary data dictionary.

    This is mostly useful to test consumers and filters on a known sequence
    of samples:

    .. code:: python

        range_producer = sampleflow.producers.Range()

        last = sampleflow.consumers.LastSample()
        last.connect_to_producer(range_producer)

        range_producer.sample([1, 2, 3, 4, 5, 6, 7, 8, 9])
        last.get()  # 9
    """

    def sample(self, samples: Iterable, *, show_progress: bool | None = None):
        """
        Emits every element of `samples` in order.

        Args:
            samples: The samples to emit.
            show_progress: Whether to display a progress bar. Defaults to the
                value of the `SAMPLEFLOW_SHOW_PROGRESS` configuration flag.
        """
        if show_progress is None:
            show_progress = config.sampleflow_show_progress

        logger.debug("Range: emitting samples to %d consumer(s)", self.n_consumers)

        n_emitted = 0
        for sample in tqdm(samples, disable=not show_progress, dynamic_ncols=True):
            self.emit(sample, {})
            n_emitted += 1

        logger.debug("Range: emitted %d sample(s)", n_emitted)
