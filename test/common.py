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

# File containing common helpers for the SampleFlow test infrastructure

import os
import threading

import numpy as np
import pytest


def _is_true(x):
    if isinstance(x, str):
        return x.lower() in ("1", "true")
    return x == 1


skipif_ci = pytest.mark.skipif(
    _is_true(os.environ.get("CI", False)), reason="Test too slow/broken on CI"
)
"""Use as a decorator to mark a test to be skipped when running on CI."""


def autocovariance_reference(samples, lag_length):
    """Direct (non-incremental) evaluation of the autocovariance estimated by
    :class:`sampleflow.consumers.SpuriousAutocovariance`."""
    x = np.asarray(samples, dtype=np.float64)
    x = x.reshape(x.shape[0], -1)
    n = x.shape[0]
    dev = x - x.mean(axis=0)

    res = np.zeros(lag_length)
    for lag in range(min(n, lag_length)):
        res[lag] = np.sum(dev[lag:] * dev[: n - lag]) / (n - lag)
    return res


def feed(consumer, samples, aux_data=None):
    """Calls consumer.consume on every sample."""
    for sample in samples:
        consumer.consume(sample, {} if aux_data is None else aux_data)


def run_in_threads(fun, args_list, n_threads=8):
    """Runs `fun(*args)` for every element of `args_list` on `n_threads`
    threads, all started together. Re-raises the first exception."""
    barrier = threading.Barrier(n_threads)
    errors = []
    chunks = [args_list[i::n_threads] for i in range(n_threads)]

    def worker(chunk):
        barrier.wait()
        try:
            for args in chunk:
                fun(*args)
        except Exception as e:  # noqa: B902
            errors.append(e)

    threads = [threading.Thread(target=worker, args=(c,)) for c in chunks]
    for t in threads:
        t.start()
    for t in threads:
        t.join()

    if errors:
        raise errors[0]
