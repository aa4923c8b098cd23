"""
Smoothing Methods for N-gram Probability Estimates

This module implements the count adjustments applied before counts are
turned into probabilities: add-k (Laplace) smoothing and Good-Turing
reestimation. Both may be active at once, in which case add-k is
applied to the Good-Turing adjusted count.
"""

import math
from collections import Counter
from dataclasses import dataclass, replace
from enum import Enum
from typing import Dict

from .counting import frequency_of_frequencies
from .errors import OptionsError


class SmoothingMethod(Enum):
    """Named smoothing setups."""
    NONE = "none"
    LAPLACE = "laplace"                            # Add-one smoothing
    ADD_K = "add_k"                                # Add-k smoothing
    GOOD_TURING = "good_turing"                    # Good-Turing reestimation
    GOOD_TURING_LAPLACE = "good_turing_laplace"    # Add-k on Good-Turing counts


@dataclass(frozen=True)
class Options:
    """
    Estimation options.

    Attributes:
        add_k: Constant added to every count (0 disables add-k smoothing)
        good_turing: Whether counts are reestimated with Good-Turing
    """
    add_k: int = 0
    good_turing: bool = False

    def with_add_k_smoothing(self, k: int) -> 'Options':
        return replace(self, add_k=k)

    def with_good_turing(self, on: bool = True) -> 'Options':
        return replace(self, good_turing=on)

    def validate(self) -> 'Options':
        """Raise OptionsError unless add_k is a non-negative integer."""
        if isinstance(self.add_k, bool) or not isinstance(self.add_k, int):
            raise OptionsError(f"add_k must be an integer, got {self.add_k!r}")
        if self.add_k < 0:
            raise OptionsError(f"add_k must be non-negative, got {self.add_k}")
        return self

    @property
    def method(self) -> SmoothingMethod:
        if self.good_turing:
            return SmoothingMethod.GOOD_TURING_LAPLACE if self.add_k else SmoothingMethod.GOOD_TURING
        if self.add_k == 1:
            return SmoothingMethod.LAPLACE
        return SmoothingMethod.ADD_K if self.add_k else SmoothingMethod.NONE

    @classmethod
    def from_method(cls, method: SmoothingMethod, k: int = 1) -> 'Options':
        """
        Build options for a named smoothing method.

        Args:
            method: Smoothing method (or its string value)
            k: Constant used by ADD_K and GOOD_TURING_LAPLACE

        Returns:
            Matching Options
        """
        method = SmoothingMethod(method)
        if method == SmoothingMethod.NONE:
            return cls()
        elif method == SmoothingMethod.LAPLACE:
            return cls(add_k=1)
        elif method == SmoothingMethod.ADD_K:
            return cls(add_k=k)
        elif method == SmoothingMethod.GOOD_TURING:
            return cls(good_turing=True)
        return cls(add_k=k, good_turing=True)


class GoodTuringReestimator:
    """
    Good-Turing count reestimation

    For count c, the adjusted count is c* = (c+1) * N(c+1) / N(c), where
    N(c) is the number of grams that occur exactly c times. Unseen grams
    (c = 0) get N(1), the number of grams seen once.
    """

    def __init__(self, counts: Counter):
        self.freq_of_freq = frequency_of_frequencies(counts)
        self._cache: Dict[int, float] = {}

    def adjusted_count(self, c: int) -> float:
        if c in self._cache:
            return self._cache[c]

        n_c = self.freq_of_freq.get(c, 0)
        n_next = self.freq_of_freq.get(c + 1, 0)

        if c == 0:
            result = float(n_next)
        elif n_c == 0:
            # Undefined ratio; taken as 0 rather than falling back to c.
            result = 0.0
        else:
            result = (c + 1) * n_next / n_c

        self._cache[c] = result
        return result


class AddKSmoothing:
    """
    Add-K Smoothing

    P = (count + k) / (base + k*V)

    Where base is the normalizing count and V the vocabulary size.
    """

    def __init__(self, k: int = 1):
        self.k = k

    def smooth(self, count: float, base: int, vocab_size: int) -> float:
        return (count + self.k) / (base + self.k * vocab_size)


def round_probability(p: float, places: int = 2) -> float:
    """Round half away from zero on the scaled value (p is never negative)."""
    scale = 10 ** places
    return math.floor(p * scale + 0.5) / scale
