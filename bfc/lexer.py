"""Turn Brainfuck source text into a flat list of tokens."""

from __future__ import annotations

import enum
from dataclasses import dataclass


class TokenType(enum.Enum):
    """Kinds of token produced by the lexer."""

    VAL_INC = enum.auto()
    VAL_DEC = enum.auto()
    PTR_INC = enum.auto()
    PTR_DEC = enum.auto()
    OPEN_LOOP = enum.auto()
    CLOSE_LOOP = enum.auto()
    INPUT = enum.auto()
    OUTPUT = enum.auto()
    EOF = enum.auto()


@dataclass(frozen=True)
class Token:
    """A token and, for folded arithmetic runs, how many steps it stands for."""

    type: TokenType
    count: int = 0


_SIMPLE = {
    ",": TokenType.INPUT,
    ".": TokenType.OUTPUT,
    "[": TokenType.OPEN_LOOP,
    "]": TokenType.CLOSE_LOOP,
}

# Each run group: (up char, down char, token when net > 0, token when net < 0).
_RUNS = {
    "+": ("+", "-", TokenType.VAL_INC, TokenType.VAL_DEC),
    "-": ("+", "-", TokenType.VAL_INC, TokenType.VAL_DEC),
    ">": (">", "<", TokenType.PTR_INC, TokenType.PTR_DEC),
    "<": (">", "<", TokenType.PTR_INC, TokenType.PTR_DEC),
}


def tokenize(source: str) -> list[Token]:
    """Lex ``source`` into tokens, ending with a single EOF token.

    Adjacent ``+``/``-`` and ``>``/``<`` characters are folded into one token
    carrying their net count; runs that cancel out produce nothing. Any other
    character is ignored. A NUL character ends the source.
    """
    text = source.split("\0", 1)[0]
    tokens: list[Token] = []
    pos = 0
    length = len(text)
    while pos < length:
        ch = text[pos]
        run = _RUNS.get(ch)
        if run is not None:
            up, down, inc_type, dec_type = run
            net = 0
            while pos < length and text[pos] in (up, down):
                net += 1 if text[pos] == up else -1
                pos += 1
            if net > 0:
                tokens.append(Token(inc_type, net))
            elif net < 0:
                tokens.append(Token(dec_type, -net))
            continue
        pos += 1
        simple = _SIMPLE.get(ch)
        if simple is not None:
            tokens.append(Token(simple, 0))
    tokens.append(Token(TokenType.EOF, 1))
    return tokens