"""Generate GNU assembler source from a Brainfuck syntax tree."""

from __future__ import annotations

import enum
import itertools
from dataclasses import dataclass

from bfc.parser import Node, NodeType

_TAPE_SIZE = 30000


class Arch(enum.Enum):
    """Target architectures the code generator can emit."""

    AARCH64 = "aarch64"
    X86_64 = "x86_64"


@dataclass(frozen=True)
class _Templates:
    prologue: str
    epilogue: str
    val_inc: str
    val_dec: str
    ptr_inc: str
    ptr_dec: str
    loop_start: str
    loop_end: str
    input: str
    output: str


def _code(*instructions: str) -> str:
    """Indent each instruction and terminate it with a newline."""
    return "".join(f"  {ins}\n" for ins in instructions)


def _label(name: str) -> str:
    return f"{name}:\n"


_HEADER = "".join(
    f"{directive}\n"
    for directive in (
        ".global _start",
        ".section .bss",
        f"arr: .skip {_TAPE_SIZE}",
        ".section .text",
    )
) + _label("_start")


def _a64_cell_op(op: str) -> str:
    cell = "[x3, x4]"
    return _code(f"ldrb w1, {cell}", f"{op} w1, w1, {{n}}", f"strb w1, {cell}")


def _a64_syscall_io(fd: int, number: int) -> str:
    return _code(
        f"mov x0, {fd}",
        "add x1, x3, x4",
        "mov x2, 1",
        f"mov x8, {number}",
        "svc 0",
    )


def _x86_syscall_io(number: int, fd: int) -> str:
    return _code(
        "push %rcx",
        "push %r11",
        f"mov ${number}, %rax",
        f"mov ${fd}, %rdi",
        "lea arr(%rip), %rsi",
        "add %r11, %rsi",
        "mov $1, %rdx",
        "syscall",
        "pop %r11",
        "pop %rcx",
    )


_X86_CELL = "(%r10, %r11)"

_AARCH64 = _Templates(
    prologue=_HEADER + _code("adr x3, arr", "mov x4, 0"),
    epilogue=_code("mov x0, 0", "mov x8, 93", "svc 0"),
    val_inc=_a64_cell_op("add"),
    val_dec=_a64_cell_op("sub"),
    ptr_inc=_code("add x4, x4, {n}"),
    ptr_dec=_code("sub x4, x4, {n}"),
    loop_start=_label("loop{n}_start")
    + _code("ldrb w1, [x3, x4]", "cbz w1, loop{n}_end"),
    loop_end=_code("b loop{n}_start") + _label("loop{n}_end"),
    input=_a64_syscall_io(0, 63),
    output=_a64_syscall_io(1, 64),
)

_X86_64 = _Templates(
    prologue=_HEADER + _code("lea arr(%rip), %r10", "xor %r11, %r11"),
    epilogue=_code("mov $60, %rax", "mov $0, %rdi", "syscall"),
    val_inc=_code("addb ${n}, " + _X86_CELL),
    val_dec=_code("subb ${n}, " + _X86_CELL),
    ptr_inc=_code("add ${n}, %r11"),
    ptr_dec=_code("sub ${n}, %r11"),
    loop_start=_label("loop{n}_start")
    + _code(
        f"movzbl {_X86_CELL}, %r9d",
        "test %r9d, %r9d",
        "jz loop{n}_end",
    ),
    loop_end=_code("jmp loop{n}_start") + _label("loop{n}_end"),
    input=_x86_syscall_io(0, 0),
    output=_x86_syscall_io(1, 1),
)

_TEMPLATES = {Arch.AARCH64: _AARCH64, Arch.X86_64: _X86_64}


def _leaf_text(node: Node, t: _Templates) -> str:
    if node.type is NodeType.VAL_INC:
        return t.val_inc.format(n=node.count)
    if node.type is NodeType.VAL_DEC:
        return t.val_dec.format(n=node.count)
    if node.type is NodeType.PTR_INC:
        return t.ptr_inc.format(n=node.count)
    if node.type is NodeType.PTR_DEC:
        return t.ptr_dec.format(n=node.count)
    if node.type is NodeType.INPUT:
        return t.input
    if node.type is NodeType.OUTPUT:
        return t.output
    raise ValueError(f"unexpected node type {node.type!r}")


def generate_asm(ast: Node, arch: Arch | str) -> str:
    """Return assembler source for ``ast`` targeting ``arch``.

    Loops are labelled ``loopN`` with N counting from 1 in the order the
    loops open.
    """
    templates = _TEMPLATES[Arch(arch)]
    labels = itertools.count(1)
    parts: list[str] = []
    stack: list[Node | str] = [ast]
    while stack:
        item = stack.pop()
        if isinstance(item, str):
            parts.append(item)
            continue
        if item.type is NodeType.PROGRAM:
            parts.append(templates.prologue)
            stack.append(templates.epilogue)
        elif item.type is NodeType.LOOP:
            label = next(labels)
            parts.append(templates.loop_start.format(n=label))
            stack.append(templates.loop_end.format(n=label))
        else:
            parts.append(_leaf_text(item, templates))
            continue
        stack.extend(reversed(item.children))
    return "".join(parts)