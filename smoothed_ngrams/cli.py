"""
Command Line Interface with Rich Terminal UI

Computes the unigram and bigram probability reports of a corpus and
converts JSON or XML corpora into line-delimited text.

Usage:
    smoothed-ngrams corpus.txt
    smoothed-ngrams corpus.txt --vocabulary words.txt --bigram-vocabulary pairs.txt
    smoothed-ngrams --brown --categories news --out-dir reports
    smoothed-ngrams --list-categories
    json-to-lines corpus.json -o words.txt
    xml-to-lines corpus.xml w -o words.txt
"""

import argparse
import sys
from pathlib import Path
from typing import List, Optional, Tuple

from rich import box
from rich.console import Console
from rich.markup import escape
from rich.panel import Panel
from rich.table import Table

from .corpus import (
    get_brown_categories, lines_from_json, lines_from_xml, load_brown_corpus, read_lines, write_lines
)
from .errors import NGramError
from .estimator import Order, estimate
from .logging_setup import setup_logging
from .report import probability_table, report_path, write_probabilities_csv
from .smoothing import Options, SmoothingMethod


console = Console()

# Report name suffix for each smoothing method the reports are computed with
REPORT_SUFFIXES = {
    SmoothingMethod.NONE: "",
    SmoothingMethod.ADD_K: ".laplacian",
    SmoothingMethod.GOOD_TURING: ".good_turing",
}


def read_vocabulary(path: Optional[str]) -> List[str]:
    """One word per line; blank lines are ignored."""
    if not path:
        return []
    return [line.strip() for line in read_lines(path) if line.strip()]


def read_bigram_vocabulary(path: Optional[str]) -> List[Tuple[str, str]]:
    """Two whitespace-separated words per line; blank lines are ignored."""
    if not path:
        return []

    pairs = []
    for number, line in enumerate(read_lines(path), 1):
        words = line.split()
        if not words:
            continue
        if len(words) != 2:
            raise NGramError(f"{path}:{number}: expected two words, got {len(words)}")
        pairs.append((words[0], words[1]))
    return pairs


def create_config_table(args: argparse.Namespace, num_lines: int) -> Table:
    """Create a Rich table displaying the run configuration."""
    config_table = Table(box=box.SIMPLE, show_header=False)
    config_table.add_column("Setting", style="cyan")
    config_table.add_column("Value", style="white")
    config_table.add_row("Corpus", "Brown" if args.brown else str(args.corpus))
    config_table.add_row("Lines", f"{num_lines:,}")
    config_table.add_row("Laplace k", str(args.k))
    config_table.add_row("Vocabulary", args.vocabulary or "-")
    config_table.add_row("Bigram Vocabulary", args.bigram_vocabulary or "-")
    return config_table


def run_reports(lines: List[str], base_path: Path, vocabulary: List[str],
                bigram_vocabulary: List[Tuple[str, str]], k: int = 1,
                out_dir: Optional[str] = None, show: int = 0) -> List[Path]:
    """
    Estimate every order with every report method and write the CSV files.

    Args:
        lines: Corpus lines
        base_path: Corpus path the report names are derived from
        vocabulary: Extra unigram vocabulary
        bigram_vocabulary: Extra bigram vocabulary
        k: Constant used for the Laplace reports
        out_dir: Directory for the reports (default: next to the corpus)
        show: Number of rows of each table to print (0 prints none)

    Returns:
        Paths of the written reports
    """
    written = []
    for order, extra in ((Order.UNIGRAM, vocabulary), (Order.BIGRAM, bigram_vocabulary)):
        for method, suffix in REPORT_SUFFIXES.items():
            name = f"{order.value}s{suffix}"
            with console.status(f"[cyan]Estimating {name}..."):
                table = estimate(order, lines, extra, Options.from_method(method, k=k))
                path = write_probabilities_csv(table, report_path(base_path, name, out_dir))

            console.print(f"[green]✓[/green] {name}: {len(table):,} grams → [bold]{path}[/bold]")
            if show:
                console.print(probability_table(table, title=name, limit=show))
            written.append(path)
    return written


def main(argv: Optional[List[str]] = None) -> int:
    parser = argparse.ArgumentParser(
        description="Compute smoothed unigram and bigram probabilities of a corpus",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Writes six reports next to the corpus (or into --out-dir):
  CORPUS.unigrams.csv               CORPUS.bigrams.csv
  CORPUS.unigrams.laplacian.csv     CORPUS.bigrams.laplacian.csv
  CORPUS.unigrams.good_turing.csv   CORPUS.bigrams.good_turing.csv
        """
    )
    parser.add_argument('corpus', nargs='?', help='Line-delimited corpus file')
    parser.add_argument('--brown', action='store_true',
                        help='Use the NLTK Brown corpus instead of a file')
    parser.add_argument('-c', '--categories', nargs='+', default=None,
                        help='Brown corpus categories to use (default: all)')
    parser.add_argument('--vocabulary', default=None,
                        help='File of extra unigram vocabulary, one word per line')
    parser.add_argument('--bigram-vocabulary', default=None,
                        help='File of extra bigram vocabulary, two words per line')
    parser.add_argument('-k', type=int, default=1,
                        help='Constant for the Laplace reports (default: 1)')
    parser.add_argument('--out-dir', default=None,
                        help='Directory for the reports (default: next to the corpus)')
    parser.add_argument('--show', type=int, default=0,
                        help='Print the top N rows of each report')
    parser.add_argument('-v', '--verbose', action='store_true',
                        help='Log estimation details')
    parser.add_argument('--list-categories', action='store_true',
                        help='List available Brown corpus categories and exit')

    args = parser.parse_args(argv)

    if args.list_categories:
        console.print("Available Brown corpus categories:")
        for category in get_brown_categories():
            console.print(f"  - {category}")
        return 0

    if not args.brown and not args.corpus:
        parser.error("a corpus path or --brown is required")

    setup_logging(args.verbose, console=console)

    try:
        if args.brown:
            with console.status("[cyan]Loading Brown corpus..."):
                lines = load_brown_corpus(categories=args.categories)
            base_path = Path(args.out_dir or '.') / 'brown'
        else:
            lines = read_lines(args.corpus)
            base_path = Path(args.corpus)

        console.print()
        console.print(Panel(create_config_table(args, len(lines)),
                            title="[bold]Configuration[/bold]", border_style="green"))

        run_reports(
            lines,
            base_path,
            read_vocabulary(args.vocabulary),
            read_bigram_vocabulary(args.bigram_vocabulary),
            k=args.k,
            out_dir=args.out_dir,
            show=args.show
        )
    except (NGramError, OSError) as e:
        console.print(f"[bold red]Error:[/bold red] {escape(str(e))}")
        return 1

    return 0


def json_to_lines_main(argv: Optional[List[str]] = None) -> int:
    parser = argparse.ArgumentParser(
        description="Convert a JSON array of strings to a line-delimited corpus"
    )
    parser.add_argument('input', help='JSON file')
    parser.add_argument('-o', '--output', default='words.txt', help='Output file (default: words.txt)')
    args = parser.parse_args(argv)

    try:
        text = Path(args.input).read_text(encoding='utf-8')
        count = write_lines(lines_from_json(text), args.output)
    except (NGramError, OSError) as e:
        console.print(f"[bold red]Error:[/bold red] {escape(str(e))}")
        return 1

    console.print(f"[green]✓[/green] Wrote {count:,} lines to [bold]{args.output}[/bold]")
    return 0


def xml_to_lines_main(argv: Optional[List[str]] = None) -> int:
    parser = argparse.ArgumentParser(
        description="Extract the text of XML elements to a line-delimited corpus"
    )
    parser.add_argument('input', help='XML file')
    parser.add_argument('tag_name', help='Name of the elements whose text is extracted')
    parser.add_argument('-o', '--output', default='words.txt', help='Output file (default: words.txt)')
    args = parser.parse_args(argv)

    try:
        text = Path(args.input).read_text(encoding='utf-8')
        count = write_lines(lines_from_xml(text, args.tag_name), args.output)
    except (NGramError, OSError) as e:
        console.print(f"[bold red]Error:[/bold red] {escape(str(e))}")
        return 1

    console.print(f"[green]✓[/green] Wrote {count:,} lines to [bold]{args.output}[/bold]")
    return 0


if __name__ == '__main__':
    sys.exit(main())
