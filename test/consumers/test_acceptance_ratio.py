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
import pytest

import sampleflow as sf
from sampleflow.consumers import AcceptanceRatio
from sampleflow.errors import EmptyAccumulatorError, SampleShapeMismatchError

from .. import common


@pytest.mark.parametrize("n", [1, 2, 10, 1000])
def test_constant_sequence(n):
    ratio = AcceptanceRatio()
    common.feed(ratio, [np.array([1.0])] * n)

    assert ratio.n_samples == n
    assert ratio.n_accepted == 1
    assert ratio.get() == pytest.approx(1 / n)


def test_changing_sequence():
    ratio = AcceptanceRatio()
    common.feed(ratio, [np.array([t, -t]) for t in range(50)])

    assert ratio.get() == 1.0


def test_scalar_samples_from_range():
    range_producer = sf.producers.Range()
    ratio = AcceptanceRatio()
    ratio.connect_to_producer(range_producer)

    range_producer.sample([1, 2, 3, 4, 5, 6, 7, 8, 9])

    assert ratio.n_samples == 9
    assert ratio.get() == 1.0


def test_any_component_counts():
    ratio = AcceptanceRatio()
    common.feed(
        ratio,
        [
            [0, 0, 0],
            [0, 0, 0],  # repeated
            [0, 0, 1],  # last component changed
            [1, 0, 1],  # first component changed
            [1, 0, 1],  # repeated
        ],
    )

    assert ratio.n_accepted == 3
    assert ratio.get() == pytest.approx(3 / 5)


def test_accepted_never_exceeds_samples(rng):
    ratio = AcceptanceRatio()
    x = np.zeros(3)
    for _ in range(200):
        if rng.uniform() < 0.3:
            x = x + rng.normal(size=3)
        ratio.consume(x, {})
        assert ratio.n_accepted <= ratio.n_samples


def test_previous_sample_is_copied():
    ratio = AcceptanceRatio()
    x = np.zeros(2)
    ratio.consume(x, {})
    # modifying the sample in place after emission must not affect the result
    x[0] = 1.0
    ratio.consume(x, {})

    assert ratio.n_accepted == 2


def test_empty():
    ratio = AcceptanceRatio()
    assert ratio.n_samples == 0

    with pytest.raises(EmptyAccumulatorError):
        ratio.get()


def test_shape_mismatch():
    ratio = AcceptanceRatio()
    ratio.consume([1.0, 2.0], {})

    with pytest.raises(SampleShapeMismatchError):
        ratio.consume([1.0, 2.0, 3.0], {})

    # the failed call must not change the state nor keep the lock
    assert ratio.n_samples == 1
    ratio.consume([1.0, 2.0], {})
    assert ratio.get() == pytest.approx(0.5)


def test_concurrent_consume():
    n_samples = 4000
    ratio = AcceptanceRatio()
    samples = [(np.array([float(i)]), {}) for i in range(n_samples)]

    common.run_in_threads(ratio.consume, samples)

    assert ratio.n_samples == n_samples
    # all samples are different, whatever the order in which they arrived
    assert ratio.get() == 1.0
