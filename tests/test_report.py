import csv
from pathlib import Path

from smoothed_ngrams.report import (
    format_gram,
    probability_table,
    report_path,
    sorted_rows,
    write_probabilities_csv,
)


def test_format_gram():
    assert format_gram("chicago") == "chicago"
    assert format_gram(("chicago", "is")) == "(chicago, is)"


def test_sorted_rows_orders_by_probability_then_gram():
    table = {"is": 0.44, "hot": 0.0, "cold": 0.33, "chicago": 0.22, "warm": 0.0}
    assert sorted_rows(table) == [
        ("is", 0.44), ("cold", 0.33), ("chicago", 0.22), ("hot", 0.0), ("warm", 0.0),
    ]


def test_report_path():
    assert report_path("data/words.txt", "bigrams.laplacian") == Path("data/words.txt.bigrams.laplacian.csv")
    assert report_path("data/words.txt", "unigrams", out_dir="out") == Path("out/words.txt.unigrams.csv")


def test_write_probabilities_csv(tmp_path):
    table = {("chicago", "is"): 0.5, ("is", "cold"): 0.5, ("is", "hot"): 0.0}
    path = write_probabilities_csv(table, tmp_path / "bigrams.csv")

    with open(path, newline="", encoding="utf-8") as f:
        rows = list(csv.reader(f))

    assert rows == [
        ["w", "p(w)"],
        ["(chicago, is)", "0.50"],
        ["(is, cold)", "0.50"],
        ["(is, hot)", "0.00"],
    ]


def test_probability_table_limits_rows():
    table = {"is": 0.44, "cold": 0.33, "chicago": 0.22, "hot": 0.0}
    assert probability_table(table, title="unigrams", limit=2).row_count == 2
    assert probability_table(table).row_count == 4
