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
import math

import numpy as np
from tqdm.auto import tqdm

from sampleflow.producer import Producer
from sampleflow.utils import config
from sampleflow.utils.types import LogLikelihoodFun, PerturbFun, Sample, SeedT

logger = logging.getLogger(__name__)


class MetropolisHastings(Producer):
    r"""
    A producer generating samples through the Metropolis-Hastings algorithm.

    Starting from a given point :math:`x_0`, at every step a trial point
    :math:`\tilde{x} = \text{perturb}(x_k)` is proposed and accepted with
    probability

    .. math::

        \min\left(1, \exp\left[\log\pi(\tilde{x}) - \log\pi(x_k)\right]\right),

    where :math:`\log\pi` is the user-provided log-likelihood. If accepted,
    :math:`x_{k+1} = \tilde{x}`, otherwise :math:`x_{k+1} = x_k`. Every
    :math:`x_{k+1}` is emitted (the starting point is not), together with the
    auxiliary data

    - ``"relative log likelihood"``: :math:`\log\pi(x_{k+1})`;
    - ``"sample is repeated"``: True if the trial point was rejected.

    The perturbation is assumed to be symmetric; the algorithm does not
    include a correction for asymmetric proposal distributions.

    .. code:: python

        sampler = sampleflow.producers.MetropolisHastings()

        ratio = sampleflow.consumers.AcceptanceRatio()
        ratio.connect_to_producer(sampler)

        sampler.sample(
            np.zeros(2),
            lambda x: -0.5 * x @ x,
            lambda x: x + rng.normal(scale=0.5, size=x.shape),
            n_samples=10000,
        )
    """

    def sample(
        self,
        starting_point: Sample,
        log_likelihood: LogLikelihoodFun,
        perturb: PerturbFun,
        n_samples: int,
        *,
        random_seed: SeedT = None,
        show_progress: bool | None = None,
    ):
        """
        Runs the Markov chain for `n_samples` steps, emitting every sample.

        Args:
            starting_point: The initial state of the chain.
            log_likelihood: Function returning the logarithm of the (not
                necessarily normalized) target density at a point.
            perturb: Function returning a trial point given the current one.
                It must not modify its argument in place.
            n_samples: The number of samples to emit.
            random_seed: Seed of the random number generator used to accept or
                reject trial points. If None, a fresh seed is drawn.
            show_progress: Whether to display a progress bar. Defaults to the
                value of the `SAMPLEFLOW_SHOW_PROGRESS` configuration flag.
        """
        if n_samples < 0:
            raise ValueError(f"n_samples must be non-negative, got {n_samples}.")

        if show_progress is None:
            show_progress = config.sampleflow_show_progress

        rng = np.random.default_rng(random_seed)

        current_sample = starting_point
        current_log_likelihood = log_likelihood(current_sample)

        logger.debug(
            "MetropolisHastings: emitting %d sample(s) to %d consumer(s)",
            n_samples,
            self.n_consumers,
        )

        n_accepted = 0
        for _ in tqdm(range(n_samples), disable=not show_progress, dynamic_ncols=True):
            trial_sample = perturb(current_sample)
            trial_log_likelihood = log_likelihood(trial_sample)

            delta = trial_log_likelihood - current_log_likelihood
            accepted = delta >= 0 or rng.uniform() < math.exp(delta)
            if accepted:
                current_sample = trial_sample
                current_log_likelihood = trial_log_likelihood
                n_accepted += 1

            self.emit(
                current_sample,
                {
                    "relative log likelihood": current_log_likelihood,
                    "sample is repeated": not accepted,
                },
            )

        logger.debug(
            "MetropolisHastings: accepted %d/%d trial sample(s)", n_accepted, n_samples
        )
