"""Build a syntax tree from lexer tokens."""

from __future__ import annotations

import enum
from collections.abc import Iterable
from dataclasses import dataclass, field

from bfc.lexer import Token, TokenType


class NodeType(enum.Enum):
    """Kinds of syntax tree node."""

    PROGRAM = enum.auto()
    VAL_INC = enum.auto()
    VAL_DEC = enum.auto()
    PTR_INC = enum.auto()
    PTR_DEC = enum.auto()
    INPUT = enum.auto()
    OUTPUT = enum.auto()
    LOOP = enum.auto()


@dataclass
class Node:
    """A syntax tree node; programs and loops hold children, leaves a count."""

    type: NodeType
    count: int = 0
    children: list[Node] = field(default_factory=list)


class ParseError(Exception):
    """Raised when loop brackets do not match."""


_LEAVES = {
    TokenType.VAL_INC: NodeType.VAL_INC,
    TokenType.VAL_DEC: NodeType.VAL_DEC,
    TokenType.PTR_INC: NodeType.PTR_INC,
    TokenType.PTR_DEC: NodeType.PTR_DEC,
    TokenType.INPUT: NodeType.INPUT,
    TokenType.OUTPUT: NodeType.OUTPUT,
}


def parse(tokens: Iterable[Token]) -> Node:
    """Parse tokens into a PROGRAM node.

    Parsing stops at the first EOF token or at the end of ``tokens``.
    Raises ParseError on an unmatched ``]`` or an unclosed ``[``.
    """
    program = Node(NodeType.PROGRAM)
    stack = [program]
    for token in tokens:
        if token.type is TokenType.EOF:
            break
        if token.type is TokenType.OPEN_LOOP:
            loop = Node(NodeType.LOOP)
            stack[-1].children.append(loop)
            stack.append(loop)
        elif token.type is TokenType.CLOSE_LOOP:
            if len(stack) == 1:
                raise ParseError("Unexpected ]")
            stack.pop()
        else:
            stack[-1].children.append(Node(_LEAVES[token.type], token.count))
    if len(stack) > 1:
        raise ParseError("Unclosed [")
    return program