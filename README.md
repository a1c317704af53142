# splcodegen

The back end of a compiler for SPL, a small block-structured teaching
language. It takes the abstract syntax tree of an SPL program, whose names
have already been resolved, and turns it into a sequence of instructions for
the SSM stack machine, together with the literal data the program needs and
a BOF (binary object file) header describing both.

## Modules

| Module | Contents |
| --- | --- |
| `splcodegen.file_location` | `FileLocation`: file name and line of a construct |
| `splcodegen.id_attrs` | `IdKind`, `IdAttrs`, `proc_attrs`, `id_kind_string`: symbol-table attributes of names |
| `splcodegen.id_use` | `IdUse` and `LexicalAddress`: a resolved use of a name (levels outward, offset in the activation record) |
| `splcodegen.ast` | AST node classes (`Block`, `Stmts`, `AssignStmt`, `IfStmt`, `PrintStmt`, `BinaryOpExpr`, `Number`, ...) and `TokenKind` |
| `splcodegen.builders` | `make_*` functions that build AST nodes the way a parser would |
| `splcodegen.code` | SSM instruction formats as frozen dataclasses and one constructor per mnemonic (`add`, `lit`, `beq`, `jrel`, `pint`, `exit_`, ...) |
| `splcodegen.code_seq` | `CodeSeq`, an ordered sequence of instructions |
| `splcodegen.code_utils` | Ready-made sequences: stack allocation, saving and restoring activation records, program set-up and tear-down |
| `splcodegen.bof` | `BOFHeader`, `parse_header`, `read_header`, `write_header`, `read_word`, `write_word`, `file_bytes`, `BOFError` |
| `splcodegen.gen_code` | `CodeGenerator`, `GeneratedProgram`, `CodeGenError` |

## Installing

```
pip install .
```

To run the tests:

```
pip install ".[test]"
pytest
```

## Instruction sequences

A `CodeSeq` can be iterated, measured with `len` and joined with `+`;
`append` and `extend` add to its end.

```python
from splcodegen.code_utils import set_up_program, tear_down_program

frame = set_up_program() + tear_down_program()
print(len(frame))
for instr in frame:
    print(instr.mnemonic, instr)
```

## Generating code for a program

```python
from splcodegen.ast import Block, TokenKind
from splcodegen.builders import make_number, make_print_stmt, make_stmts, make_token
from splcodegen.file_location import FileLocation
from splcodegen.gen_code import CodeGenerator

loc = FileLocation("demo.spl", 1)
plus = make_token(loc, "+", TokenKind.PLUS)
block = Block(loc, stmts=make_stmts([make_print_stmt(make_number(plus, 3))]))

program = CodeGenerator().program(block)
print(program.header)     # BOFHeader with text and data section sizes
print(program.literals)   # [3]
for instr in program.code:
    print(instr)
```

`CodeGenerator.program` returns a `GeneratedProgram` with three fields:
`header`, `code` (the text section as a `CodeSeq`) and `literals` (the data
section, each distinct literal value once, in offset order). In the header,
the text section starts at address 0, the data section starts at the larger
of the text length and 1024, and the stack bottom lies 4096 words past the
end of the data section.

Assignments, reads and identifier loads need the `idu` field of the AST node
to hold an `IdUse`; without it, `CodeGenError` is raised. `CodeGenError` is
also raised for statements the generator does not handle (`WhileStmt`,
`CallStmt`), for arithmetic operators in binary expressions, and for an
assigned variable whose offset does not fit in 16 bits.

## BOF headers and words

```python
import io
from splcodegen.bof import read_header, write_header, write_word

buffer = io.BytesIO()
write_header(buffer, program.header)
for value in program.literals:
    write_word(buffer, value)

buffer.seek(0)
same = read_header(buffer, "demo.bof")
assert same.has_correct_magic()
```

Headers hold the four magic bytes `BO32` followed by five little-endian
32-bit words. A header with another magic number, or a stream too short to
hold a header or a word, raises `BOFError`.

## What this package does not do

- It does not read SPL source: there is no lexer, parser or scope checker.
  The AST, with its `IdUse` values, must be built by the caller.
- Instructions are kept as Python values; there is no binary encoding of
  instructions, so the text section of an object file cannot be written.
  Only the header and the literal words can be.
- There is no command-line compiler, assembler, disassembler or machine to
  run the generated code.