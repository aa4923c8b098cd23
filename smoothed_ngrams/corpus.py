"""
Corpus Loading

This module turns corpora in various formats into the plain lines the
estimator consumes: line-delimited text files, JSON arrays of strings,
XML documents (text of elements with a given tag) and the Brown corpus
shipped with NLTK.
"""

import json
import logging
import xml.etree.ElementTree as ElementTree
from pathlib import Path
from typing import Iterable, List, Optional, Union

import nltk
from nltk.corpus import brown

from .errors import CorpusFormatError


logger = logging.getLogger(__name__)

PathLike = Union[str, Path]


def read_lines(path: PathLike) -> List[str]:
    """
    Read a line-delimited UTF-8 corpus.

    Lines that fail to decode are skipped, so the estimator never sees
    malformed input.

    Args:
        path: Path to the corpus file

    Returns:
        Lines without their terminators
    """
    lines = []
    skipped = 0
    with open(path, 'rb') as f:
        for raw in f:
            try:
                lines.append(raw.decode('utf-8').rstrip('\r\n'))
            except UnicodeDecodeError:
                skipped += 1

    if skipped:
        logger.warning("Skipped %d undecodable line(s) in %s", skipped, path)
    return lines


def lines_from_json(text: str) -> List[str]:
    """Parse a JSON array of strings into corpus lines."""
    try:
        data = json.loads(text)
    except json.JSONDecodeError as e:
        raise CorpusFormatError(f"Invalid JSON corpus: {e}") from e

    if not isinstance(data, list) or not all(isinstance(item, str) for item in data):
        raise CorpusFormatError("JSON corpus must be an array of strings")
    return data


def _local_name(tag) -> str:
    # ElementTree writes namespaced tags as "{uri}name".
    if not isinstance(tag, str):
        return ""
    return tag.rsplit('}', 1)[-1]


def lines_from_xml(text: str, tag_name: str) -> List[str]:
    """
    Extract the text of every element named ``tag_name``.

    Args:
        text: XML document
        tag_name: Local tag name to collect (namespaces are ignored)

    Returns:
        Element texts in document order; empty elements are skipped
    """
    try:
        root = ElementTree.fromstring(text)
    except ElementTree.ParseError as e:
        raise CorpusFormatError(f"Invalid XML corpus: {e}") from e

    return [
        element.text
        for element in root.iter()
        if _local_name(element.tag) == tag_name and element.text
    ]


def write_lines(lines: Iterable[str], path: PathLike) -> int:
    """Write one line per item and return the number written."""
    count = 0
    with open(path, 'w', encoding='utf-8') as f:
        for line in lines:
            f.write(line)
            f.write('\n')
            count += 1
    return count


def ensure_nltk_data():
    """Download the Brown corpus if not present."""
    try:
        nltk.data.find('corpora/brown')
    except LookupError:
        logger.info("Downloading Brown corpus...")
        nltk.download('brown', quiet=True)


def load_brown_corpus(categories: Optional[List[str]] = None) -> List[str]:
    """
    Load Brown corpus sentences as space-joined lines.

    Args:
        categories: Optional list of Brown corpus categories to load
                   (e.g., ['news', 'fiction']). If None, loads all categories.

    Returns:
        One line per sentence, tokens as tagged in the corpus
    """
    ensure_nltk_data()

    if categories:
        sents = brown.sents(categories=categories)
    else:
        sents = brown.sents()

    return [' '.join(sent) for sent in sents]


def get_brown_categories() -> List[str]:
    """Return list of available Brown corpus categories."""
    ensure_nltk_data()
    return brown.categories()
