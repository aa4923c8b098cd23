"""
Word Splitting and N-gram Counting

This module turns corpus lines into word sequences and aggregates
unigram and bigram frequency tables from them.
"""

from collections import Counter
from functools import reduce
from typing import Callable, Hashable, Iterable, Iterator, List, Sequence, Tuple


Bigram = Tuple[str, str]


def split(corpus: Iterable[str]) -> List[List[str]]:
    """
    Split every corpus line into its whitespace-delimited words.

    Tokens are kept exactly as given; empty lines yield an empty sequence.

    Args:
        corpus: Lines of text

    Returns:
        One word sequence per line
    """
    return [line.split() for line in corpus]


def bigram_windows(words: Sequence[str]) -> Iterator[Bigram]:
    """Yield every adjacent (first, second) pair of a single word sequence."""
    for i in range(len(words) - 1):
        yield (words[i], words[i + 1])


def count_unigrams(word_sequences: Iterable[Sequence[str]]) -> Counter:
    """Count every token of every sequence."""
    counts = Counter()
    for words in word_sequences:
        counts.update(words)
    return counts


def count_bigrams(word_sequences: Iterable[Sequence[str]]) -> Counter:
    """
    Count adjacent word pairs.

    Pairs never span two sequences, so each line is an independent
    sequence of bigrams.
    """
    counts = Counter()
    for words in word_sequences:
        counts.update(bigram_windows(words))
    return counts


def merge_counts(left: Counter, right: Counter) -> Counter:
    """
    Merge two count tables by adding counts of shared keys.

    Unlike ``Counter.__add__`` this keeps zero-valued entries, which is
    what seeded vocabulary grams rely on.
    """
    merged = Counter(left)
    for gram, count in right.items():
        merged[gram] = merged.get(gram, 0) + count
    return merged


def seed_vocabulary(counts: Counter, vocabulary: Iterable[Hashable]) -> Counter:
    """
    Return a copy of ``counts`` with a zero entry for unseen vocabulary grams.

    Grams already present keep their count.

    Args:
        counts: Raw corpus counts
        vocabulary: Grams that must appear in the result

    Returns:
        New count table containing every corpus and vocabulary gram
    """
    seed = Counter({gram: 0 for gram in vocabulary})
    return merge_counts(counts, seed)


def frequency_of_frequencies(counts: Counter) -> Counter:
    """Map each count value to the number of distinct grams having it."""
    return Counter(counts.values())


def count_partitioned(corpus: Iterable[str],
                      counter: Callable[[List[List[str]]], Counter]) -> Counter:
    """
    Count each line on its own and reduce the partial tables.

    The reduction only adds integers, so the result does not depend on
    the order of the partial tables and equals ``counter(split(corpus))``.

    Args:
        corpus: Lines of text
        counter: ``count_unigrams`` or ``count_bigrams``

    Returns:
        Combined count table
    """
    partials = (counter(split([line])) for line in corpus)
    return reduce(merge_counts, partials, Counter())
