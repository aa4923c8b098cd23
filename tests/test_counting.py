from collections import Counter

from smoothed_ngrams.counting import (
    bigram_windows,
    count_bigrams,
    count_partitioned,
    count_unigrams,
    frequency_of_frequencies,
    merge_counts,
    seed_vocabulary,
    split,
)


class TestSplit:
    def test_splits_on_any_whitespace(self):
        assert split(["chicago is", "  cold\tand windy "]) == [
            ["chicago", "is"],
            ["cold", "and", "windy"],
        ]

    def test_empty_lines_yield_empty_sequences(self):
        assert split(["", "   ", "is"]) == [[], [], ["is"]]

    def test_keeps_case_and_punctuation(self):
        assert split(["Chicago, chicago."]) == [["Chicago,", "chicago."]]


class TestCounting:
    def test_count_unigrams(self):
        counts = count_unigrams([["chicago", "is", "cold"], ["africa", "is", "hot"]])
        assert counts == Counter({"is": 2, "chicago": 1, "cold": 1, "africa": 1, "hot": 1})

    def test_count_bigrams(self):
        counts = count_bigrams([["chicago", "is", "cold", "is", "cold"]])
        assert counts == Counter({
            ("chicago", "is"): 1,
            ("is", "cold"): 2,
            ("cold", "is"): 1,
        })

    def test_bigrams_do_not_cross_sequences(self):
        counts = count_bigrams([["a", "b"], ["c", "d"], ["e"]])
        assert set(counts) == {("a", "b"), ("c", "d")}

    def test_single_word_has_no_bigrams(self):
        assert list(bigram_windows(["alone"])) == []
        assert list(bigram_windows([])) == []

    def test_count_partitioned_matches_whole_corpus(self, chicago_corpus):
        word_lists = split(chicago_corpus)
        assert count_partitioned(chicago_corpus, count_unigrams) == count_unigrams(word_lists)
        assert count_partitioned(chicago_corpus, count_bigrams) == count_bigrams(word_lists)


class TestMerging:
    def test_merge_adds_shared_keys(self):
        left = Counter({"one": 1, "two": 1, "three": 2})
        right = Counter({"two": 1, "three": 1, "four": 4})
        assert merge_counts(left, right) == Counter({"one": 1, "two": 2, "three": 3, "four": 4})

    def test_merge_is_order_independent(self):
        left = Counter({"a": 3, "b": 1})
        right = Counter({"b": 2, "c": 0})
        assert merge_counts(left, right) == merge_counts(right, left)

    def test_merge_keeps_zero_counts(self):
        merged = merge_counts(Counter({"a": 1}), Counter({"b": 0}))
        assert "b" in merged
        assert merged["b"] == 0

    def test_merge_does_not_mutate_inputs(self):
        left = Counter({"a": 1})
        merge_counts(left, Counter({"a": 1}))
        assert left == Counter({"a": 1})


class TestVocabularySeeding:
    def test_unseen_vocabulary_starts_at_zero(self):
        seeded = seed_vocabulary(Counter({"is": 8}), ["hot"])
        assert dict(seeded) == {"is": 8, "hot": 0}

    def test_corpus_counts_are_never_reset(self):
        seeded = seed_vocabulary(Counter({"is": 8}), ["is", "is"])
        assert dict(seeded) == {"is": 8}

    def test_seeding_is_idempotent(self):
        counts = Counter({("chicago", "is"): 2})
        vocabulary = [("is", "hot"), ("chicago", "is")]
        once = seed_vocabulary(counts, vocabulary)
        twice = seed_vocabulary(once, vocabulary)
        assert dict(once) == dict(twice)


def test_frequency_of_frequencies(species_corpus):
    counts = seed_vocabulary(count_unigrams(split(species_corpus)), ["catfish", "bass"])
    assert frequency_of_frequencies(counts) == Counter({10: 1, 3: 1, 2: 1, 1: 3, 0: 2})
