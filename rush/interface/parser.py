#!/usr/bin/env python3
# rush/interface/parser.py
from __future__ import annotations

"""
Line tokenizer.

The whole grammar: space and line feed separate words; every maximal run
of other characters is one word. No quoting, escapes or operators, so
'|', '>' and '&' reach the program as literal arguments.
"""

SEPARATORS = frozenset(" \n")


def tokenize(command_line: str) -> list[str]:
    """Split a raw line into non-empty words."""
    tokens: list[str] = []
    word: list[str] = []
    for ch in command_line:
        if ch in SEPARATORS:
            if word:
                tokens.append("".join(word))
                word.clear()
        else:
            word.append(ch)
    if word:
        tokens.append("".join(word))
    return tokens
