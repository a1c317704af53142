"""Code generation from SPL abstract syntax trees into machine instructions."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Dict, Iterable, List

from splcodegen import code
from splcodegen.ast import (
    AssignStmt,
    BinaryOpExpr,
    Block,
    BlockStmt,
    ConstDecl,
    ConstDef,
    DivisibleCondition,
    Ident,
    IfStmt,
    NegatedExpr,
    Number,
    PrintStmt,
    ReadStmt,
    RelOpCondition,
    Stmts,
    Token,
    TokenKind,
    VarDecl,
)
from splcodegen.bof import MAGIC, BOFHeader
from splcodegen.code_seq import CodeSeq
from splcodegen.code_utils import (
    FP,
    GP,
    SAVED_STATIC_LINK_OFFSET,
    SP,
    allocate_stack_space,
    compute_fp,
    copy_regs,
    deallocate_stack_space,
    restore_registers_from_ar,
    save_registers_for_ar,
    set_up_program,
    tear_down_program,
)
from splcodegen.id_use import IdUse, LexicalAddress

STACK_SPACE = 4096
MIN_DATA_START = 1024
MAX_OFFSET = 0xFFFF

# Register that holds a computed frame pointer or the static link.
_ADDR_REG = 3


class CodeGenError(Exception):
    """Raised when code cannot be generated for an AST."""


@dataclass
class GeneratedProgram:
    """The result of compiling a program: header, text section and literal data."""

    header: BOFHeader
    code: CodeSeq
    literals: List[int] = field(default_factory=list)


class CodeGenerator:
    """Generates instruction sequences for SPL ASTs, collecting literals."""

    def __init__(self) -> None:
        self._literal_offsets: Dict[int, int] = {}
        self._literal_values: List[int] = []

    # --- literal table ---

    def _find_or_add_literal(self, text: str, value: int) -> int:
        """Return the word offset of ``value`` in the data section, adding it if new."""
        offset = self._literal_offsets.get(value)
        if offset is None:
            offset = len(self._literal_values)
            self._literal_offsets[value] = offset
            self._literal_values.append(value)
        return offset

    def literals(self) -> List[int]:
        """Return the literal values in the order of their data-section offsets."""
        return list(self._literal_values)

    # --- whole programs ---

    def program(self, block: Block) -> GeneratedProgram:
        """Generate the code, header and literal data for a whole program."""
        program_cs = set_up_program()
        program_cs.extend(self.block(block))
        program_cs.extend(tear_down_program())
        return GeneratedProgram(self.header(program_cs), program_cs, self.literals())

    def header(self, code: CodeSeq) -> BOFHeader:
        """Return the object-file header for a program whose text is ``code``."""
        text_length = len(code)
        data_start = max(text_length, MIN_DATA_START)
        data_length = len(self._literal_values)
        return BOFHeader(
            text_start_address=0,
            text_length=text_length,
            data_start_address=data_start,
            data_length=data_length,
            stack_bottom_addr=data_start + data_length + STACK_SPACE,
            magic=MAGIC,
        )

    def block(self, block: Block) -> CodeSeq:
        """Generate code for a block."""
        if not block.var_decls and block.stmts.is_empty() and not block.const_decls:
            return CodeSeq([code.exit_(0)])

        ret = CodeSeq([code.swr(FP, SAVED_STATIC_LINK_OFFSET, FP)])
        ret.extend(copy_regs(_ADDR_REG, FP))
        ret.extend(save_registers_for_ar())
        if block.const_decls:
            ret.extend(self.const_decls(block.const_decls))
        ret.extend(self.var_decls(block.var_decls))
        ret.extend(self.stmts(block.stmts))
        ret.extend(restore_registers_from_ar())
        return ret

    # --- declarations ---

    def var_decls(self, var_decls: Iterable[VarDecl]) -> CodeSeq:
        """Generate code for a sequence of variable declarations."""
        ret = CodeSeq()
        for var_decl in var_decls:
            ret.extend(self.var_decl(var_decl))
        return ret

    def var_decl(self, var_decl: VarDecl) -> CodeSeq:
        """Generate code for one variable declaration."""
        return self.ident_list(var_decl.idents)

    def ident_list(self, idents: Iterable[Ident]) -> CodeSeq:
        """Allocate and zero one stack word per identifier, last one first."""
        ret = CodeSeq()
        for _ in idents:
            alloc = allocate_stack_space(1)
            alloc.append(code.lit(SP, 0, 0))
            ret = alloc + ret
        return ret

    def const_decls(self, const_decls: Iterable[ConstDecl]) -> CodeSeq:
        """Generate code for a sequence of constant declarations."""
        ret = CodeSeq()
        for const_decl in const_decls:
            ret.extend(self.const_decl(const_decl))
        return ret

    def const_decl(self, const_decl: ConstDecl) -> CodeSeq:
        """Generate code for one constant declaration."""
        return self.const_def_list(const_decl.const_defs)

    def const_def_list(self, const_defs: Iterable[ConstDef]) -> CodeSeq:
        """Generate code for the definitions of a constant declaration."""
        ret = CodeSeq()
        for const_def in const_defs:
            ret.extend(self.const_def(const_def))
        return ret

    def const_def(self, const_def: ConstDef) -> CodeSeq:
        """Record the constant's value as a literal and load it onto the stack top."""
        offset = self._find_or_add_literal(const_def.ident.name, const_def.number.value)
        return CodeSeq([code.cpw(SP, 0, GP, offset)])

    # --- statements ---

    def stmt(self, stmt) -> CodeSeq:
        """Generate code for one statement."""
        if isinstance(stmt, AssignStmt):
            return self.assign_stmt(stmt)
        if isinstance(stmt, BlockStmt):
            return self.begin_stmt(stmt)
        if isinstance(stmt, IfStmt):
            return self.if_stmt(stmt)
        if isinstance(stmt, ReadStmt):
            return self.read_stmt(stmt)
        if isinstance(stmt, PrintStmt):
            return self.print_stmt(stmt)
        raise CodeGenError("Unexpected statement kind in code generation!")

    def stmts(self, stmts: Stmts) -> CodeSeq:
        """Generate code for a statement sequence; an empty one becomes a nop."""
        if stmts.is_empty():
            return CodeSeq([code.nop()])
        ret = CodeSeq()
        for stmt in stmts:
            ret.extend(self.stmt(stmt))
        return ret

    def assign_stmt(self, stmt: AssignStmt) -> CodeSeq:
        """Evaluate the expression and store it into the assigned variable."""
        ret = self.expr(stmt.expr)
        addr = _lexical_address(stmt.idu, stmt.name)
        ret.extend(compute_fp(_ADDR_REG, addr.levels_outward))
        if addr.offset_in_ar > MAX_OFFSET:
            raise CodeGenError("Offset too large!")
        ret.append(code.cpw(_ADDR_REG, addr.offset_in_ar, SP, 0))
        ret.extend(deallocate_stack_space(1))
        return ret

    def begin_stmt(self, stmt: BlockStmt) -> CodeSeq:
        """Generate code for the statements of a nested block."""
        return self.stmts(stmt.block.stmts)

    def if_stmt(self, stmt: IfStmt) -> CodeSeq:
        """Generate code for an if statement, using relative offsets."""
        ret = self.condition(stmt.condition)
        has_else = stmt.else_stmts is not None
        skip_else_offset = 3
        end_offset = 6 if has_else else 3

        ret.append(code.bne(SP, 1, skip_else_offset))
        ret.extend(self.stmts(stmt.then_stmts))
        if has_else:
            ret.append(code.jrel(end_offset))
        ret.append(code.lit(SP, 1, 0))
        if has_else:
            ret.extend(self.stmts(stmt.else_stmts))
        ret.append(code.lit(SP, 1, 1))
        ret.extend(deallocate_stack_space(1))
        return ret

    def read_stmt(self, stmt: ReadStmt) -> CodeSeq:
        """Read a character and store it into the named variable."""
        ret = allocate_stack_space(1)
        ret.append(code.rch(SP, 0))
        addr = _lexical_address(stmt.idu, stmt.name)
        ret.extend(compute_fp(_ADDR_REG, addr.levels_outward))
        ret.append(code.cpw(_ADDR_REG, addr.offset_in_ar, SP, 0))
        ret.extend(deallocate_stack_space(1))
        return ret

    def print_stmt(self, stmt: PrintStmt) -> CodeSeq:
        """Evaluate the expression and print it as an integer."""
        ret = self.expr(stmt.expr)
        ret.append(code.pint(SP, 0))
        ret.extend(deallocate_stack_space(1))
        return ret

    # --- conditions ---

    def condition(self, cond) -> CodeSeq:
        """Generate code leaving the truth value of ``cond`` on the stack."""
        if isinstance(cond, RelOpCondition):
            left = self.expr(cond.expr1)
            right = self.expr(cond.expr2)
            rel = self.rel_op(cond.rel_op)
            return right + left + rel
        if isinstance(cond, DivisibleCondition):
            ret = self.expr(cond.divisor)
            ret.extend(self.expr(cond.dividend))
            ret.extend(
                [
                    code.div(SP, 1),
                    code.cfhi(SP, 1),
                    code.lit(SP, 0, 0),
                    code.beq(SP, 1, 2),
                    code.lit(SP, 1, 0),
                    code.jrel(2),
                    code.lit(SP, 1, 1),
                ]
            )
            ret.extend(deallocate_stack_space(1))
            return ret
        raise CodeGenError("Unexpected condition kind in code generation!")

    # --- expressions ---

    def expr(self, expr) -> CodeSeq:
        """Generate code leaving the value of ``expr`` on top of the stack."""
        if isinstance(expr, BinaryOpExpr):
            return self.binary_op_expr(expr)
        if isinstance(expr, Ident):
            return self.ident(expr)
        if isinstance(expr, Number):
            return self.number(expr)
        if isinstance(expr, NegatedExpr):
            ret = self.expr(expr.expr)
            ret.extend(allocate_stack_space(1))
            ret.append(code.lit(SP, 0, 0))
            ret.append(code.sub(SP, 1, SP, 1))
            ret.extend(deallocate_stack_space(1))
            return ret
        raise CodeGenError("Unexpected expression kind in code generation!")

    def binary_op_expr(self, expr: BinaryOpExpr) -> CodeSeq:
        """Evaluate both operands, then apply the operator."""
        left = self.expr(expr.expr1)
        right = self.expr(expr.expr2)
        op = self.op(expr.arith_op)
        return left + right + op

    def op(self, token: Token) -> CodeSeq:
        """Apply the operator ``token`` to the top two stack words."""
        if token.kind.is_rel:
            return self.rel_op(token)
        if token.kind.is_arith:
            return self.arith_op(token)
        raise CodeGenError(f"Unsupported operator in code generation: {token.text!r}")

    def arith_op(self, token: Token) -> CodeSeq:
        """Arithmetic operators have no code generation."""
        raise CodeGenError(
            f"Arithmetic operator {token.text!r} is not supported by the code generator"
        )

    def rel_op(self, token: Token) -> CodeSeq:
        """Compare the top two stack words, replacing them with a truth value."""
        kind = token.kind
        if kind is TokenKind.EQEQ:
            ret = CodeSeq([code.beq(SP, 1, 3)])
        elif kind is TokenKind.NEQ:
            ret = CodeSeq([code.bne(SP, 1, 3)])
        else:
            branches = {
                TokenKind.LT: code.bltz,
                TokenKind.LEQ: code.blez,
                TokenKind.GT: code.bgtz,
                TokenKind.GEQ: code.bgez,
            }
            branch = branches.get(kind)
            if branch is None:
                raise CodeGenError("Unexpected relational operator in code generation!")
            ret = CodeSeq([code.sub(SP, 0, SP, 1), branch(SP, 0, 3)])
        ret.append(code.lit(SP, 1, 0))
        ret.append(code.jrel(2))
        ret.append(code.lit(SP, 1, 1))
        ret.extend(deallocate_stack_space(1))
        return ret

    def ident(self, ident: Ident) -> CodeSeq:
        """Generate code that loads the identifier's value."""
        addr = _lexical_address(ident.idu, ident.name)
        return CodeSeq([code.lwr(addr.levels_outward, addr.offset_in_ar, 0)])

    def number(self, number: Number) -> CodeSeq:
        """Push a numeric literal from the data section onto the stack."""
        offset = self._find_or_add_literal(number.text, number.value)
        ret = allocate_stack_space(1)
        ret.append(code.cpw(SP, 0, GP, offset))
        return ret


def _lexical_address(idu: IdUse, name: str) -> LexicalAddress:
    if idu is None:
        raise CodeGenError(f"Invalid identifier {name!r}: no scope information")
    return idu.lexical_address()