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

import numpy as np
import pytest

import sampleflow as sf
from sampleflow.errors import ConsumerAlreadyConnectedError

from .. import common


class Recorder(sf.Consumer):
    def __init__(self, name=None, log=None):
        super().__init__()
        self.name = name
        self.log = [] if log is None else log

    def consume(self, sample, aux_data):
        self.log.append((self.name, sample, aux_data))


class Failing(sf.Consumer):
    def consume(self, sample, aux_data):
        raise RuntimeError("failure in consumer")


class DropOdd(sf.Filter):
    def filter(self, sample, aux_data):
        if sample % 2:
            return None
        return sample // 2, aux_data


def test_fan_out_in_attachment_order():
    producer = sf.Producer()
    log = []
    for name in "abc":
        Recorder(name, log).connect_to_producer(producer)

    producer.emit(1.0, {"k": 1})
    producer.emit(2.0, {"k": 2})

    assert [(name, sample) for name, sample, _ in log] == [
        ("a", 1.0),
        ("b", 1.0),
        ("c", 1.0),
        ("a", 2.0),
        ("b", 2.0),
        ("c", 2.0),
    ]
    assert producer.n_consumers == 3


def test_default_aux_data():
    producer = sf.Producer()
    rec = Recorder()
    rec.connect_to_producer(producer)

    producer.emit(np.zeros(2))

    assert rec.log[0][2] == {}


def test_filter_output_delivered_before_emit_returns():
    producer = sf.Producer()
    log = []
    halver = DropOdd()
    halver.connect_to_producer(producer)
    Recorder("filtered", log).connect_to_producer(halver)
    Recorder("direct", log).connect_to_producer(producer)

    producer.emit(4)
    assert [(name, s) for name, s, _ in log] == [("filtered", 2), ("direct", 4)]


def test_filter_can_drop():
    producer = sf.producers.Range()
    halver = DropOdd()
    halver.connect_to_producer(producer)
    last = sf.consumers.LastSample()
    last.connect_to_producer(halver)

    producer.sample([2, 4, 5, 7])

    assert last.n_samples == 2
    assert last.get() == 2


def test_connect_twice():
    producer_1 = sf.Producer()
    producer_2 = sf.Producer()
    ratio = sf.consumers.AcceptanceRatio()
    ratio.connect_to_producer(producer_1)

    with pytest.raises(ConsumerAlreadyConnectedError):
        ratio.connect_to_producer(producer_2)

    assert ratio.producer is producer_1
    assert producer_2.n_consumers == 0


def test_attach_requires_consume():
    with pytest.raises(TypeError):
        sf.Producer().attach(object())


def test_attach_twice():
    producer_1 = sf.Producer()
    producer_2 = sf.Producer()
    last = sf.consumers.LastSample()
    last.connect_to_producer(producer_1)

    with pytest.raises(ConsumerAlreadyConnectedError):
        producer_2.attach(last)
    with pytest.raises(ConsumerAlreadyConnectedError):
        producer_1.attach(last)

    producer_1.emit(1.0)
    producer_2.emit(2.0)

    assert last.n_samples == 1
    assert last.get() == 1.0
    assert producer_1.n_consumers == 1
    assert producer_2.n_consumers == 0


def test_attach_records_producer():
    producer = sf.Producer()
    last = sf.consumers.LastSample()
    producer.attach(last)

    assert last.producer is producer
    with pytest.raises(ConsumerAlreadyConnectedError):
        last.connect_to_producer(sf.Producer())


def test_attach_plain_object_once():
    class Sink:
        def __init__(self):
            self.samples = []

        def consume(self, sample, aux_data):
            self.samples.append(sample)

    producer = sf.Producer()
    sink = Sink()
    producer.attach(sink)

    with pytest.raises(ConsumerAlreadyConnectedError):
        producer.attach(sink)

    producer.emit(3)
    assert sink.samples == [3]


def test_error_propagates_without_rollback():
    producer = sf.Producer()
    before = sf.consumers.LastSample()
    before.connect_to_producer(producer)
    Failing().connect_to_producer(producer)
    after = sf.consumers.LastSample()
    after.connect_to_producer(producer)

    with pytest.raises(RuntimeError, match="failure in consumer"):
        producer.emit(1.0)

    assert before.get() == 1.0
    assert after.n_samples == 0


def test_error_propagates_through_filter():
    producer = sf.Producer()
    halver = DropOdd()
    halver.connect_to_producer(producer)
    Failing().connect_to_producer(halver)

    # dropped sample never reaches the failing consumer
    producer.emit(3)
    with pytest.raises(RuntimeError):
        producer.emit(2)


def test_concurrent_emit():
    n_samples = 3000
    producer = sf.Producer()
    ratio = sf.consumers.AcceptanceRatio()
    ratio.connect_to_producer(producer)
    acf = sf.consumers.SpuriousAutocovariance(3)
    acf.connect_to_producer(producer)

    common.run_in_threads(producer.emit, [(float(i),) for i in range(n_samples)])

    assert ratio.n_samples == n_samples
    assert acf.n_samples == n_samples
    assert ratio.get() == 1.0
    assert acf.get()[0] == pytest.approx(np.var(np.arange(n_samples)), rel=1e-8)


def test_debug_logging(caplog):
    caplog.set_level(logging.DEBUG, logger="sampleflow")

    producer = sf.Producer()
    sf.consumers.LastSample().connect_to_producer(producer)

    assert any("Attached LastSample" in r.getMessage() for r in caplog.records)
