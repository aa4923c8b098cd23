"""
Smoothed N-gram Probabilities

Unigram and bigram probability estimates from a corpus of lines, with
add-k (Laplace) and Good-Turing smoothing.
"""

from .counting import count_bigrams, count_unigrams, merge_counts, seed_vocabulary, split
from .errors import CorpusFormatError, InputError, NGramError, OptionsError, UnknownContextError
from .estimator import Order, bigrams, estimate, unigrams
from .smoothing import Options, SmoothingMethod

__version__ = "0.1.0"
__all__ = [
    "Order", "Options", "SmoothingMethod", "estimate", "unigrams", "bigrams",
    "split", "count_unigrams", "count_bigrams", "merge_counts", "seed_vocabulary",
    "NGramError", "InputError", "UnknownContextError", "OptionsError", "CorpusFormatError",
]
