"""
Triangle file reader.

One triangle per line, six integers separated by commas and/or whitespace:

    -340,495,-153,-910,835,-947

Tokens are returned unparsed; Triangle.from_record converts and validates
them so that a bad line becomes a per-record error instead of stopping the
read.
"""

import re
from pathlib import Path
from typing import Iterator, List

_SEPARATOR = re.compile(r"[,\s]+")


def parse_line(line: str) -> List[str]:
    """Split one line into tokens; an empty list for a blank line."""
    stripped = line.strip()
    if not stripped:
        return []
    return [token for token in _SEPARATOR.split(stripped) if token]


def read_records(path: Path) -> Iterator[List[str]]:
    """
    Yield the tokens of every non-blank line.

    Raises:
        FileNotFoundError: If the file doesn't exist
    """
    with open(path) as f:
        for line in f:
            tokens = parse_line(line)
            if tokens:
                yield tokens
