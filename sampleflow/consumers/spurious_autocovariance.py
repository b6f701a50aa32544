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
from collections import deque

import numpy as np

from sampleflow.consumer import Consumer
from sampleflow.errors import SampleShapeMismatchError
from sampleflow.utils import copy_vector

logger = logging.getLogger(__name__)


class SpuriousAutocovariance(Consumer):
    r"""
    Computes the running sample autocovariance function of the samples seen
    so far, for the lags :math:`l = 0, \dots, k-1`, where :math:`k` is the
    `lag_length` given to the constructor.

    .. note::

        For vector-valued samples the quantity computed here is a *spurious*
        autocovariance: the scalar product of the deviations from the mean,
        i.e. the trace of the lagged autocovariance matrix. For scalar samples
        it coincides with the usual autocovariance.

    The estimate for lag :math:`l` after :math:`n` samples is

    .. math::

        \hat\gamma(l) = \frac{1}{n-l} \sum_{t=1}^{n-l}
            (x_{t+l}-\bar{x})^T (x_t-\bar{x}),

    so that :math:`\hat\gamma(0)` is the (population) variance of the samples.
    Expanding the product gives

    .. math::

        \hat\gamma(l) = \alpha(l) - \bar{x}^T \beta(l) + \bar{x}^T \bar{x},

    with the scalar :math:`\alpha(l)` the mean of :math:`x_{t+l}^T x_t` and the
    vector :math:`\beta(l)` the mean of :math:`x_{t+l} + x_t` over the
    :math:`n-l` pairs of samples at distance :math:`l`. When a new sample
    :math:`x_n` arrives, exactly one new pair per lag becomes available,
    :math:`(x_n, x_{n-l})`, and both :math:`\alpha(l)` and :math:`\beta(l)` are
    updated with the same incremental-mean recurrence used for
    :math:`\bar{x}`:

    .. math::

        \alpha(l) \leftarrow \alpha(l) + \frac{x_n^T x_{n-l} - \alpha(l)}{n-l}.

    This only requires the last :math:`k` samples, which are kept in a
    double-ended queue, newest first. The cost of consuming a sample is
    :math:`O(k d)` for samples with :math:`d` components, independent of the
    number of samples seen.

    The values :math:`\alpha` (a vector of length :math:`k`) and :math:`\beta`
    (a :math:`k \times d` matrix) are stored, while :math:`\hat\gamma` is
    assembled from them on every call to :meth:`get`. Lags for which no pair
    is available yet (:math:`l \geq n`) are reported as zero.

    The number of components :math:`d` is discovered from the first sample.
    Samples are converted to float64 vectors with
    :func:`~sampleflow.utils.as_vector`.

    This consumer can be fed concurrently from multiple threads. Updates are
    serialized, so the result is the one obtained by feeding the samples
    sequentially in the order in which they acquired the lock.
    """

    def __init__(self, lag_length: int):
        """
        Constructs the accumulator.

        Args:
            lag_length: The number of lags for which the autocovariance is
                computed, i.e., how far back in the past each sample is
                compared with. Must be at least 1.
        """
        super().__init__()

        if isinstance(lag_length, bool) or not isinstance(
            lag_length, (int, np.integer)
        ):
            raise TypeError(f"lag_length must be an integer, got {type(lag_length)}.")
        if lag_length < 1:
            raise ValueError(f"lag_length must be at least 1, got {lag_length}.")

        self._lag_length = int(lag_length)
        self._lock = threading.Lock()

        self._n_samples = 0
        self._alpha = np.zeros(self._lag_length, dtype=np.float64)
        # beta and the mean depend on the size of the samples, which is only
        # known once the first one arrives.
        self._beta = None
        self._mean = None
        self._previous_samples = deque(maxlen=self._lag_length)

    def _initialize(self, n_components):
        logger.debug(
            "Initializing autocovariance state: %d lag(s), %d component(s)",
            self._lag_length,
            n_components,
        )
        self._beta = np.zeros((self._lag_length, n_components), dtype=np.float64)
        self._mean = np.zeros(n_components, dtype=np.float64)

    def consume(self, sample, aux_data):
        """
        Process one sample by updating the running autocovariance.

        Args:
            sample: The sample to process.
            aux_data: Auxiliary data about this sample. It is ignored.
        """
        x = copy_vector(sample).astype(np.float64, copy=False)

        with self._lock:
            if self._n_samples == 0:
                self._initialize(x.size)
            elif x.size != self._mean.size:
                raise SampleShapeMismatchError(self._mean.size, x.size)

            self._n_samples += 1
            n = self._n_samples

            # After the push, previous_samples[i] is the sample i steps back,
            # the new sample itself being the partner at lag 0.
            self._previous_samples.appendleft(x)
            n_lags = len(self._previous_samples)
            window = np.stack(self._previous_samples)
            n_pairs = n - np.arange(n_lags)

            alpha = self._alpha[:n_lags]
            alpha += (window @ x - alpha) / n_pairs

            beta = self._beta[:n_lags]
            beta += (window + x - beta) / n_pairs[:, None]

            self._mean += (x - self._mean) / n

    @property
    def lag_length(self) -> int:
        """Number of lags for which the autocovariance is computed."""
        return self._lag_length

    @property
    def n_samples(self) -> int:
        """Number of samples consumed so far."""
        with self._lock:
            return self._n_samples

    @property
    def mean(self):
        """The running mean of the samples, or None if no sample was consumed."""
        with self._lock:
            if self._mean is None:
                return None
            return self._mean.copy()

    def get(self) -> np.ndarray:
        """
        Returns the autocovariance computed from the samples seen so far.

        Returns:
            A float64 array of length `lag_length`, whose entry `l` is the
            autocovariance at lag `l`. Entries for lags larger than the number
            of samples seen so far, and all entries if no sample has been
            consumed, are zero.
        """
        with self._lock:
            autocovariance = np.zeros(self._lag_length, dtype=np.float64)
            if self._n_samples == 0:
                return autocovariance

            n_lags = min(self._n_samples, self._lag_length)
            autocovariance[:n_lags] = (
                self._alpha[:n_lags]
                - self._beta[:n_lags] @ self._mean
                + self._mean @ self._mean
            )
            return autocovariance

    def __repr__(self):
        return (
            f"SpuriousAutocovariance(lag_length={self._lag_length}, "
            f"n_samples={self.n_samples})"
        )
