import re

import pytest

from bfc.codegen import Arch, generate_asm
from bfc.lexer import tokenize
from bfc.parser import Node, NodeType, parse

X86_PROLOGUE = (
    ".global _start\n"
    ".section .bss\n"
    "arr: .skip 30000\n"
    ".section .text\n"
    "_start:\n"
    "  lea arr(%rip), %r10\n"
    "  xor %r11, %r11\n"
)
X86_EPILOGUE = "  mov $60, %rax\n  mov $0, %rdi\n  syscall\n"
ARM_PROLOGUE = (
    ".global _start\n"
    ".section .bss\n"
    "arr: .skip 30000\n"
    ".section .text\n"
    "_start:\n"
    "  adr x3, arr\n"
    "  mov x4, 0\n"
)
ARM_EPILOGUE = "  mov x0, 0\n  mov x8, 93\n  svc 0\n"


def _asm(source, arch):
    return generate_asm(parse(tokenize(source)), arch)


def test_empty_program_x86():
    assert generate_asm(Node(NodeType.PROGRAM), Arch.X86_64) == X86_PROLOGUE + X86_EPILOGUE


def test_empty_program_aarch64():
    assert generate_asm(Node(NodeType.PROGRAM), Arch.AARCH64) == ARM_PROLOGUE + ARM_EPILOGUE


def test_arch_accepts_string_value():
    assert _asm("+.", "x86_64") == _asm("+.", Arch.X86_64)


def test_x86_val_inc():
    body = _asm("+++", Arch.X86_64)[len(X86_PROLOGUE):-len(X86_EPILOGUE)]
    assert body == "  addb $3, (%r10, %r11)\n"


def test_aarch64_val_dec():
    body = _asm("--", Arch.AARCH64)[len(ARM_PROLOGUE):-len(ARM_EPILOGUE)]
    assert body == "  ldrb w1, [x3, x4]\n  sub w1, w1, 2\n  strb w1, [x3, x4]\n"


def test_aarch64_val_inc_uses_load_store():
    body = _asm("+", Arch.AARCH64)[len(ARM_PROLOGUE):-len(ARM_EPILOGUE)]
    assert body.startswith("  ldrb w1, [x3, x4]\n")
    assert body.endswith("  strb w1, [x3, x4]\n")


def test_pointer_moves_x86():
    body = _asm(">>><", Arch.X86_64)[len(X86_PROLOGUE):-len(X86_EPILOGUE)]
    assert body == "  add $2, %r11\n"
    body = _asm("<<", Arch.X86_64)[len(X86_PROLOGUE):-len(X86_EPILOGUE)]
    assert body == "  sub $2, %r11\n"


def test_pointer_moves_aarch64():
    body = _asm(">", Arch.AARCH64)[len(ARM_PROLOGUE):-len(ARM_EPILOGUE)]
    assert body == "  add x4, x4, 1\n"


@pytest.mark.parametrize("arch", list(Arch))
def test_io_syscall_numbers(arch):
    out = _asm(",.", arch)
    if arch is Arch.AARCH64:
        assert out.index("mov x8, 63") < out.index("mov x8, 64")
    else:
        assert out.count("syscall") == 3


@pytest.mark.parametrize("arch", list(Arch))
def test_loop_labels_balanced(arch):
    out = _asm("[[-]>[+]]", arch)
    starts = re.findall(r"^loop(\d+)_start:$", out, re.M)
    ends = re.findall(r"^loop(\d+)_end:$", out, re.M)
    assert starts == ["1", "2", "3"]
    assert sorted(ends) == ["1", "2", "3"]
    # inner loops close before the outer one
    assert ends[-1] == "1"


def test_sequential_loops_numbered_in_order():
    out = _asm("[-][-]", Arch.X86_64)
    assert out.index("loop1_start:") < out.index("loop1_end:") < out.index("loop2_start:")
    assert "jz loop2_end\n" in out
    assert "jmp loop2_start\n" in out


def test_labels_restart_for_each_call():
    first = _asm("[-]", Arch.X86_64)
    second = _asm("[-]", Arch.X86_64)
    assert first == second


def test_deep_nesting():
    out = _asm("[" * 3000 + "]" * 3000, Arch.AARCH64)
    assert out.count("cbz w1") == 3000
    assert "loop3000_start:" in out


def test_unknown_arch_rejected():
    with pytest.raises(ValueError):
        generate_asm(Node(NodeType.PROGRAM), "mips")