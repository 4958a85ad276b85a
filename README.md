# bfc

A compiler for Brainfuck programs. It turns a `.bf` source file into GNU
assembly for **aarch64** or **x86_64** Linux. Unless you ask for assembly only,
it then runs a C toolchain driver such as `gcc` or `clang` with `-nostdlib`.
That driver assembles and links the code into an executable that uses no libc.

## Installation

```
pip install .
```

To link executables you need an assembler and linker driver on your `PATH`
that targets the chosen architecture. Writing assembly with `-S` needs nothing
beyond Python.

## Usage

```
bfc [OPTIONS] FILENAME
```

| Option         | Meaning                                                     |
|----------------|-------------------------------------------------------------|
| `-o FILENAME`  | Write the executable to `FILENAME` (default `a.out`)        |
| `-S FILENAME`  | Write only the assembly to `FILENAME`; do not link it       |
| `-t ARCH`      | Target `aarch64` or `x86_64` (default: the host machine)    |
| `-c PROGRAM`   | Assembler/linker driver to run (default `gcc`)              |
| `-h`           | Print help                                                  |

Examples:

```
bfc -o hello hello.bf
echo Hello | ./hello

bfc -t x86_64 -S hello.s hello.bf
bfc -t aarch64 -c aarch64-linux-gnu-gcc -o hello hello.bf
```

Exactly one input file must be given. When `-t` is not given and the host is
not an aarch64 or x86_64 machine, the command reports
`Unsupported Architecture` and exits with status 1.

When the program is linked, the assembly is first written to `progTEMP.s` in
the current directory. It is passed to the driver and then removed. The exit
status of the driver is not checked. The command fails only if the driver
cannot be started or the temporary file cannot be removed.

## How it compiles

* Runs of `+`/`-` and of `>`/`<` are folded into a single instruction that
  carries their net count. A run that cancels out emits nothing.
* Characters other than the eight commands are ignored. A NUL character ends
  the source.
* The tape is 30000 bytes in `.bss`. `,` and `.` read and write one byte
  with direct `read`/`write` system calls.
* Loops are labelled `loop1`, `loop2`, … in the order they open.
* An unmatched `[` or `]` is reported as an error (`ERROR: Unexpected ]` or
  `ERROR: Unclosed [`). No output is written in that case.

## Library use

```python
from bfc.lexer import tokenize
from bfc.parser import parse, ParseError
from bfc.codegen import Arch, generate_asm
from bfc.cli import compile_source

tokens = tokenize("++[>+<-].")
ast = parse(tokens)
print(generate_asm(ast, Arch.X86_64))

# or in one step; the architecture may also be given by name
print(compile_source(",.", "aarch64"))
```

* `bfc.lexer.tokenize(source)` returns a list of `Token(type, count)` values.
  The list always ends with a `TokenType.EOF` token.
* `bfc.parser.parse(tokens)` returns a `Node` tree rooted at a
  `NodeType.PROGRAM` node. It raises `ParseError` on unbalanced brackets.
* `bfc.codegen.generate_asm(ast, arch)` returns the assembler text.
* `bfc.cli.read_file(filename)` returns a file's contents and raises `OSError`
  if the file cannot be read.
* `bfc.cli.main(argv=None)` runs the command and returns its exit status.

## What it does not do

`bfc` does not interpret or run Brainfuck programs itself. It does not
assemble or link on its own either. Producing an executable always depends on
the external driver named by `-c`.