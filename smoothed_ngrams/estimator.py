"""
N-gram Probability Estimation

This module merges corpus counts with a caller-supplied vocabulary,
applies the selected smoothing and returns a table of rounded
probabilities for every unigram or bigram.
"""

import logging
from collections import Counter
from enum import Enum
from typing import Dict, Iterable, List, Optional, Set, Tuple, Union

from .counting import Bigram, count_bigrams, count_unigrams, seed_vocabulary, split
from .errors import InputError, UnknownContextError
from .smoothing import AddKSmoothing, GoodTuringReestimator, Options, round_probability


logger = logging.getLogger(__name__)

Gram = Union[str, Bigram]
ProbabilityTable = Dict[Gram, float]


class Order(Enum):
    """N-gram order."""
    UNIGRAM = "unigram"
    BIGRAM = "bigram"


class _Estimation:
    """Count adjustment and normalization shared by both orders."""

    def __init__(self, counts: Counter, options: Options):
        self.smoother = AddKSmoothing(options.add_k)
        self.reestimator = GoodTuringReestimator(counts) if options.good_turing else None
        if self.reestimator:
            logger.debug("Frequency of frequencies: %s", dict(self.reestimator.freq_of_freq))

    def probability(self, count: int, base: int, vocab_size: int) -> float:
        c = self.reestimator.adjusted_count(count) if self.reestimator else float(count)
        # Only reachable with an empty corpus and no add-k mass.
        if base + self.smoother.k * vocab_size == 0:
            return 0.0
        return round_probability(self.smoother.smooth(c, base, vocab_size))


def effective_vocabulary_size(word_counts: Counter, vocabulary: Iterable[Bigram]) -> int:
    """
    Number of distinct words in the corpus or in either position of a
    vocabulary bigram.
    """
    words: Set[str] = set(word_counts)
    for first, second in vocabulary:
        words.add(first)
        words.add(second)
    return len(words)


def _as_unigram_vocabulary(vocabulary: Iterable) -> List[str]:
    # A bare string would otherwise be taken as a vocabulary of characters.
    if isinstance(vocabulary, str):
        raise InputError(f"Unigram vocabulary must be a collection of words, got {vocabulary!r}")
    words = list(vocabulary)
    for entry in words:
        if not isinstance(entry, str):
            raise InputError(f"Unigram vocabulary entries must be words, got {entry!r}")
    return words


def _as_bigram_vocabulary(vocabulary: Iterable) -> List[Bigram]:
    pairs = []
    for entry in vocabulary:
        if (not isinstance(entry, (tuple, list)) or len(entry) != 2
                or not all(isinstance(word, str) for word in entry)):
            raise InputError(f"Bigram vocabulary entries must be word pairs, got {entry!r}")
        pairs.append(tuple(entry))
    return pairs


def _unigram_probabilities(word_lists: List[List[str]], vocabulary: List[str],
                           options: Options) -> ProbabilityTable:
    total_counts = seed_vocabulary(count_unigrams(word_lists), vocabulary)
    total_words = sum(total_counts.values())
    vocabulary_size = len(total_counts)

    logger.debug("Unigrams: %d tokens, %d types", total_words, vocabulary_size)

    estimation = _Estimation(total_counts, options)
    return {
        word: estimation.probability(count, total_words, vocabulary_size)
        for word, count in total_counts.items()
    }


def _bigram_probabilities(word_lists: List[List[str]], vocabulary: List[Bigram],
                          options: Options) -> ProbabilityTable:
    word_counts = count_unigrams(word_lists)
    total_counts = seed_vocabulary(count_bigrams(word_lists), vocabulary)

    unknown = [pair for pair in total_counts if pair[0] not in word_counts]
    if unknown:
        raise UnknownContextError(unknown)

    vocabulary_size = effective_vocabulary_size(word_counts, vocabulary)

    logger.debug("Bigrams: %d types, effective vocabulary size %d",
                 len(total_counts), vocabulary_size)

    estimation = _Estimation(total_counts, options)
    return {
        pair: estimation.probability(count, word_counts[pair[0]], vocabulary_size)
        for pair, count in total_counts.items()
    }


def estimate(order: Union[Order, str], corpus: Iterable[str],
             vocabulary: Iterable[Gram] = (),
             options: Optional[Options] = None) -> ProbabilityTable:
    """
    Estimate smoothed probabilities for every gram of the given order.

    Args:
        order: Order.UNIGRAM or Order.BIGRAM (or "unigram"/"bigram")
        corpus: Lines of text; each line is an independent sequence
        vocabulary: Words (unigram) or word pairs (bigram) that must appear
            in the result even when absent from the corpus
        options: Smoothing options (default: no smoothing)

    Returns:
        Mapping from gram to probability rounded to 2 decimals

    Raises:
        OptionsError: If add_k is not a non-negative integer
        InputError: If a unigram vocabulary entry is not a word, or a
            bigram vocabulary entry is not a word pair
        UnknownContextError: If a bigram's first word is not in the corpus
    """
    order = Order(order)
    options = (options or Options()).validate()
    word_lists = split(corpus)

    logger.debug("Estimating %s probabilities over %d lines (%s)",
                 order.value, len(word_lists), options.method.value)

    if order == Order.UNIGRAM:
        return _unigram_probabilities(word_lists, _as_unigram_vocabulary(vocabulary), options)
    return _bigram_probabilities(word_lists, _as_bigram_vocabulary(vocabulary), options)


def unigrams(corpus: Iterable[str], vocabulary: Iterable[str] = (),
             options: Optional[Options] = None) -> Dict[str, float]:
    """Unigram probabilities; see ``estimate``."""
    return estimate(Order.UNIGRAM, corpus, vocabulary, options)


def bigrams(corpus: Iterable[str], vocabulary: Iterable[Tuple[str, str]] = (),
            options: Optional[Options] = None) -> Dict[Bigram, float]:
    """Bigram probabilities; see ``estimate``."""
    return estimate(Order.BIGRAM, corpus, vocabulary, options)
