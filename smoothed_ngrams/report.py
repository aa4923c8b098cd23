"""
Probability Reports

Writers for probability tables: two-column CSV files (``w,p(w)``) and
rich tables for terminal display.
"""

import csv
from pathlib import Path
from typing import Dict, List, Optional, Tuple, Union

from rich import box
from rich.table import Table

from .estimator import Gram


HEADER = ("w", "p(w)")


def format_gram(gram: Gram) -> str:
    """Render a unigram as-is and a bigram as ``(w1, w2)``."""
    if isinstance(gram, tuple):
        return "(" + ", ".join(gram) + ")"
    return gram


def sorted_rows(table: Dict[Gram, float]) -> List[Tuple[str, float]]:
    """Rows ordered by descending probability, then by gram."""
    rows = [(format_gram(gram), p) for gram, p in table.items()]
    rows.sort(key=lambda row: (-row[1], row[0]))
    return rows


def report_path(corpus_path: Union[str, Path], name: str,
                out_dir: Optional[Union[str, Path]] = None) -> Path:
    """
    Path of a report for a corpus: ``<corpus>.<name>.csv``.

    Args:
        corpus_path: Path of the corpus the report was computed from
        name: Report name, e.g. "bigrams.laplacian"
        out_dir: Directory for the report (default: next to the corpus)
    """
    corpus_path = Path(corpus_path)
    directory = Path(out_dir) if out_dir else corpus_path.parent
    return directory / f"{corpus_path.name}.{name}.csv"


def write_probabilities_csv(table: Dict[Gram, float], path: Union[str, Path]) -> Path:
    """Write a probability table as a ``w,p(w)`` CSV file."""
    path = Path(path)
    with open(path, 'w', newline='', encoding='utf-8') as f:
        writer = csv.writer(f)
        writer.writerow(HEADER)
        for gram, p in sorted_rows(table):
            writer.writerow((gram, f"{p:.2f}"))
    return path


def probability_table(table: Dict[Gram, float], title: str = "",
                      limit: Optional[int] = None) -> Table:
    """Create a Rich table showing the most probable grams."""
    rich_table = Table(title=title or None, box=box.ROUNDED,
                       show_header=True, header_style="bold cyan")
    rich_table.add_column("w", style="green")
    rich_table.add_column("p(w)", style="yellow", justify="right")

    rows = sorted_rows(table)
    for gram, p in rows[:limit] if limit else rows:
        rich_table.add_row(gram, f"{p:.2f}")

    return rich_table
