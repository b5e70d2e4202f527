"""
Module: parsing.blocks

Purpose:
    Block splitting and labelled-field scanning shared by the format
    detector and the dialect parsers. Generated text arrives as markdown
    blocks separated by a horizontal rule, each holding labelled lines
    such as ``**Question 1:** ...`` or ``**Correct Answer:** B`` and
    lettered option lines ``A) ...``.

Key Functions:
    - split_blocks(): Split raw text into non-empty line lists
    - scan_block(): Collect labelled fields from one block
    - parse_tags(): Comma-separated tag list
    - option_letter(): Extract a bare A-D answer letter

Key Classes:
    - BlockFields: Labelled values found in one block

Dependencies:
    - re (std)

Used By:
    - parsing.detection
    - parsing.dialects.*
"""

from __future__ import annotations

import re
from dataclasses import dataclass, field
from typing import Dict, List, Optional, Tuple

BLOCK_DELIMITER = "---"

# A line holding only the horizontal rule separates blocks
_DELIMITER_RE = re.compile(r"^[ \t]*-{3,}[ \t]*$", re.MULTILINE)

# Labelled line, with or without markdown bold: "**Question 1:** text", "Answer: True"
_LABEL_RE = re.compile(
    r"^\*{0,2}\s*"
    r"(?P<label>question(?:\s*\d+)?|theme|tags|difficulty|correct\s+answer|answer"
    r"|explanation|correction|statement|is_true)"
    r"\s*:\s*\*{0,2}\s*(?P<value>.*?)\s*$",
    re.IGNORECASE,
)

OPTION_LETTERS = ("A", "B", "C", "D")
_OPTION_RE = re.compile(r"^(?P<letter>[A-D])\)\s*(?P<text>.+)$")
_LETTER_RE = re.compile(r"^(?P<letter>[A-D])(?:\)|\.|\s|$)")


@dataclass
class BlockFields:
    """
    Labelled values collected from one block.

    Later lines overwrite earlier ones for the same label, except options
    which are keyed by letter.
    """

    question: str = ""
    theme: str = ""
    tags: Tuple[str, ...] = ()
    difficulty: str = ""
    answer: str = ""
    correct_answer: str = ""
    explanation: str = ""
    statement: str = ""
    is_true: str = ""
    options: Dict[str, str] = field(default_factory=dict)

    @property
    def has_options(self) -> bool:
        return bool(self.options)


def split_blocks(text: str) -> List[List[str]]:
    """
    Split raw text on the block delimiter.

    Args:
        text: Raw generated text

    Returns:
        One list of stripped, non-blank lines per non-empty block
    """
    if not text:
        return []
    blocks = []
    for chunk in _DELIMITER_RE.split(text):
        lines = [line.strip() for line in chunk.splitlines() if line.strip()]
        if lines:
            blocks.append(lines)
    return blocks


def first_block(text: str) -> List[str]:
    """Lines of the first non-empty block, or an empty list."""
    blocks = split_blocks(text)
    return blocks[0] if blocks else []


def _clean_value(value: str) -> str:
    return value.strip().strip("*").strip()


def scan_block(lines: List[str]) -> BlockFields:
    """
    Scan a block line by line for labelled fields and options.

    Args:
        lines: Stripped, non-blank lines of one block

    Returns:
        BlockFields with every recognised value
    """
    fields = BlockFields()
    for line in lines:
        option = _OPTION_RE.match(line)
        if option:
            fields.options[option.group("letter")] = option.group("text").strip()
            continue

        labelled = _LABEL_RE.match(line)
        if not labelled:
            continue

        label = re.sub(r"\s+", " ", labelled.group("label").lower())
        value = _clean_value(labelled.group("value"))
        if label.startswith("question"):
            fields.question = value
        elif label == "theme":
            fields.theme = value
        elif label == "tags":
            fields.tags = parse_tags(value)
        elif label == "difficulty":
            fields.difficulty = value
        elif label == "correct answer":
            fields.correct_answer = value
        elif label == "answer":
            fields.answer = value
        elif label in ("explanation", "correction"):
            fields.explanation = value
        elif label == "statement":
            fields.statement = value
        elif label == "is_true":
            fields.is_true = value
    return fields


def parse_tags(value: str) -> Tuple[str, ...]:
    """Split a comma-separated tag list, dropping blanks."""
    return tuple(tag.strip() for tag in value.split(",") if tag.strip())


def option_letter(value: str) -> Optional[str]:
    """
    Extract an answer letter from values like "B", "b", "B) Paris".

    Returns:
        Upper-case letter A-D, or None
    """
    match = _LETTER_RE.match(value.strip().upper())
    return match.group("letter") if match else None


def is_bare_letter(value: str) -> bool:
    """True for a lone option letter like "C"."""
    return value.strip().upper() in OPTION_LETTERS


def has_option_lines(lines: List[str]) -> bool:
    return any(_OPTION_RE.match(line) for line in lines)


def optional(value: str) -> Optional[str]:
    return value or None
