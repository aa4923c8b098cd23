"""
Exceptions raised by n-gram estimation and corpus ingestion.
"""

from typing import Iterable, Tuple


class NGramError(Exception):
    """Base class for all errors raised by this package."""


class InputError(NGramError, ValueError):
    """The corpus or vocabulary passed by the caller cannot be estimated."""


class UnknownContextError(InputError):
    """
    A bigram's first word never occurs in the corpus.

    The first-word count is the denominator of a bigram probability, so
    such a bigram has no defined estimate.
    """

    def __init__(self, bigrams: Iterable[Tuple[str, str]]):
        self.bigrams = sorted(set(bigrams))
        listed = ", ".join(f"({first}, {second})" for first, second in self.bigrams)
        super().__init__(
            f"First word of bigram(s) not found in corpus unigrams: {listed}"
        )


class OptionsError(NGramError, ValueError):
    """Smoothing options are out of range."""


class CorpusFormatError(NGramError):
    """A JSON or XML corpus could not be turned into lines."""
