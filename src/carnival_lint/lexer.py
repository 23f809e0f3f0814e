from __future__ import annotations
import bisect
import re
from dataclasses import dataclass
from typing import List, Tuple

LINE_SPLIT_RE = re.compile(r"\r?\n")
LINE_BREAK_RE = re.compile(r"\r\n|\n")

# A quoted span is one token even if it contains spaces
TOKEN_RE = re.compile(r"'[^']*'|\S+")

@dataclass(frozen=True)
class Token:
    text: str
    start: int
    end: int

def split_lines(text: str) -> List[str]:
    return LINE_SPLIT_RE.split(text)

def tokenize(line: str) -> List[Token]:
    """Split a line into tokens; columns are relative to `line`."""
    return [Token(m.group(0), m.start(), m.end()) for m in TOKEN_RE.finditer(line)]

def is_comment(token: str) -> bool:
    return token.startswith('#')

def is_directive(token: str) -> bool:
    return token.startswith('.')

class LineIndex:
    """Maps absolute offsets in a document to (line, col) pairs."""

    def __init__(self, text: str):
        self.starts = [0]
        for m in LINE_BREAK_RE.finditer(text):
            self.starts.append(m.end())

    def position(self, offset: int) -> Tuple[int, int]:
        line = bisect.bisect_right(self.starts, offset) - 1
        return line, offset - self.starts[line]
