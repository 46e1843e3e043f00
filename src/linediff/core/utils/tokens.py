"""Line tokenizer and comparison-key normalization"""

import re

from linediff.core.models import DiffOptions


_WS_RUN = re.compile(r"\s+")


def tokenize(text: str) -> list[str]:
    """Split text on literal newlines. An empty string is one empty line, never zero."""
    return text.split("\n")


def comparison_key(line: str, options: DiffOptions) -> str:
    """Return the normalized form of line used only for equality during matching."""
    key = line
    if options.ignore_whitespace:
        key = _WS_RUN.sub(" ", key.strip())
    if options.ignore_case:
        key = key.lower()
    return key


def comparison_keys(lines: list[str], options: DiffOptions) -> list[str]:
    if not (options.ignore_whitespace or options.ignore_case):
        return list(lines)
    return [comparison_key(line, options) for line in lines]
