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

import pytest

import sampleflow


@pytest.fixture(autouse=True)
def _restore_config():
    """
    Restores the runtime configuration flags modified by a test.
    """
    old_values = {
        name: getattr(sampleflow.config, name) for name in dir(sampleflow.config)
    }
    yield
    for name, value in old_values.items():
        setattr(sampleflow.config, name, value)


@pytest.fixture
def rng():
    import numpy as np

    return np.random.default_rng(1234)
