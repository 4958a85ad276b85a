"""Brainfuck compiler: lexer, parser, aarch64/x86_64 assembly generator and command-line driver."""

__version__ = "0.1.0"
__all__ = ["lexer", "parser", "codegen", "cli"]