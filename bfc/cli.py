"""Command-line driver: compile a Brainfuck file to assembly or an executable."""

from __future__ import annotations

import getopt
import os
import platform
import subprocess
import sys
from pathlib import Path

from bfc.codegen import Arch, generate_asm
from bfc.lexer import tokenize
from bfc.parser import ParseError, parse

_HELP = (
    "ebfc [OPTIONS] [FILENAME]\n"
    "OPTIONS:\n"
    "  -o [FILENAME] : Set output files(Machine Code) into [FILENAME]\n"
    "  -S [FILENAME] : Set output files(Assembly) into [FILENAME]\n"
    "  -t [ARCH]     : Set target architecture into [ARCH]\n"
    "  -c [PROGRAM]  : Set Assembler and Linker into [PROGRAM]\n"
    "  -h            : Print this help\n"
)

_MACHINE_ARCH = {
    "aarch64": Arch.AARCH64,
    "arm64": Arch.AARCH64,
    "x86_64": Arch.X86_64,
    "amd64": Arch.X86_64,
}


def _host_arch() -> Arch | None:
    return _MACHINE_ARCH.get(platform.machine().lower())


def read_file(filename: str | os.PathLike[str]) -> str:
    """Return the contents of ``filename``; raises OSError if it cannot be read."""
    return Path(filename).read_bytes().decode("latin-1")


def compile_source(source: str, arch: Arch | str) -> str:
    """Compile Brainfuck ``source`` to assembler text for ``arch``."""
    return generate_asm(parse(tokenize(source)), arch)


def _error(message: str) -> int:
    print(message, file=sys.stderr)
    return 1


def main(argv: list[str] | None = None) -> int:
    """Run the compiler with command-line arguments; return the exit status."""
    args = sys.argv[1:] if argv is None else list(argv)
    output = "a.out"
    assembly_output = "progTEMP.s"
    cc = "gcc"
    target = _host_arch()
    output_assembly = False

    try:
        opts, operands = getopt.gnu_getopt(args, "ho:S:t:c:")
    except getopt.GetoptError as exc:
        print(f"ebfc: {exc.msg}", file=sys.stderr)
        return _error("Try ebfc -h for more information")

    for opt, value in opts:
        if opt == "-h":
            print(_HELP, end="")
            return 0
        if opt == "-o":
            output = value
        elif opt == "-S":
            assembly_output = value
            output_assembly = True
        elif opt == "-t":
            try:
                target = Arch(value)
            except ValueError:
                return _error("Unsupported Architecture")
        elif opt == "-c":
            cc = value

    if target is None:
        return _error("Unsupported Architecture")
    if not operands:
        return _error("ERROR: No input file")
    if len(operands) > 1:
        return _error("ERROR: Can only specify one input file")

    try:
        source = read_file(operands[0])
    except OSError:
        return _error("ERROR: Can't open file")

    try:
        assembly = compile_source(source, target)
    except ParseError as exc:
        return _error(f"ERROR: {exc}")

    try:
        with open(assembly_output, "w", encoding="ascii") as handle:
            handle.write(assembly)
    except OSError:
        return _error("ERROR: Can't open file")

    if output_assembly:
        return 0

    status = 0
    try:
        subprocess.run([cc, "-nostdlib", "-o", output, assembly_output], check=False)
    except OSError:
        print("ERROR: Can't run subprocess", file=sys.stderr)
        status = 1

    try:
        os.remove(assembly_output)
    except OSError:
        return _error("ERROR: Can't remove temporary assembly files")
    return status


if __name__ == "__main__":
    sys.exit(main())