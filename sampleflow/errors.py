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

# Use an empty top-level docstring so Sphinx won't output the one below.
""""""

from textwrap import dedent as _dedent

"""SampleFlow error classes.

=== When to create a SampleFlow error class?

Every violation of the contract between producers, filters and consumers
that a user can trigger by wiring a pipeline incorrectly, or by feeding it
samples that do not respect its assumptions, should have its own error class.
The docstring of the class should explain why the error happened and how to
fix it.

=== How to name the error class?

* If the error occurs when doing something, name the error
  <Verb><Object><TypeOfError>Error

* If there is no concrete action involved the only a description of the error is
  sufficient. For instance: InvalidComponentIndexError.

Errors that signal a contract violation also inherit from the builtin
exception that best describes them (IndexError, ValueError, ...), so that
generic handlers keep working.
"""


class SampleflowError(Exception):
    def __init__(self, message):
        error_index = "https://sampleflow.readthedocs.io/en/latest/api/errors.html"
        module_name = self.__class__.__module__
        class_name = self.__class__.__name__
        error_msg = (
            f"{_dedent(message)}"
            f"\n"
            f"\n-------------------------------------------------------"
            f"\n"
            f"For more detailed informations on {module_name}.{class_name},"
            f"\nvisit the list of all common errors at"
            f"\n\t {error_index}"
            f"\n-------------------------------------------------------"
            f"\n"
        )
        super().__init__(error_msg)


#################################################
# Connection errors                             #
#################################################


class ConsumerAlreadyConnectedError(SampleflowError, RuntimeError):
    """Illegal attempt to connect a consumer to a second producer.

    Every consumer (and therefore every filter) receives its samples from
    exactly one upstream producer, while a producer can feed an arbitrary
    number of consumers. This error is raised when
    :meth:`~sampleflow.Consumer.connect_to_producer` or
    :meth:`~sampleflow.Producer.attach` is called with a consumer that is
    already connected.

    If you want to compute the same statistic over two different streams,
    create two consumers:

    .. code:: python

        ratio_a = sampleflow.consumers.AcceptanceRatio()
        ratio_a.connect_to_producer(sampler_a)

        ratio_b = sampleflow.consumers.AcceptanceRatio()
        ratio_b.connect_to_producer(sampler_b)

    """

    def __init__(self, consumer):
        super().__init__(
            f"""
            The consumer {type(consumer).__name__} is already connected to a
            producer, and cannot be connected to another one.
            """
        )


#################################################
# Sample errors                                 #
#################################################


class InvalidComponentIndexError(SampleflowError, IndexError):
    """A filter was asked to extract a component that does not exist.

    Filters such as :class:`~sampleflow.filters.ComponentPairSplitter` are
    constructed with fixed component indices, and every sample flowing into
    them must have more components than the largest of those indices.
    A sample that is too short is a programming error in the way the
    pipeline was set up, so the error is raised immediately and propagates to
    the producer that emitted the sample.

    To fix this error, check that the indices given to the filter are valid
    for the samples generated by the producer it is connected to.
    """

    def __init__(self, index, size):
        super().__init__(
            f"""
            Cannot extract component {index} from a sample with {size}
            component(s). Valid indices are 0 <= index < {size}.
            """
        )


class SampleShapeMismatchError(SampleflowError, ValueError):
    """A sample with a different number of components than the previous ones
    was consumed.

    Accumulators discover the dimensionality of the samples from the first
    one they receive, and size their internal state accordingly. Every
    subsequent sample must have the same number of components.

    This usually happens when a producer emits samples of varying length, or
    when two producers with different sample types feed the same consumer
    through a filter.
    """

    def __init__(self, expected, got):
        super().__init__(
            f"""
            Expected a sample with {expected} component(s), as established by
            the first sample consumed, but got one with {got} component(s).
            """
        )


#################################################
# Accumulator errors                            #
#################################################


class EmptyAccumulatorError(SampleflowError, RuntimeError):
    """The value of an accumulator was requested before any sample reached it.

    Some statistics, like the acceptance ratio, are undefined until at least
    one sample has been consumed. Instead of returning a meaningless default
    value, :meth:`get` raises this error.

    To fix this error, make sure that the producer has emitted at least one
    sample before reading the accumulator, or check
    :attr:`n_samples` first:

    .. code:: python

        if ratio.n_samples > 0:
            print(ratio.get())

    """

    def __init__(self, consumer):
        super().__init__(
            f"""
            {type(consumer).__name__}.get() was called before any sample was
            consumed.
            """
        )
