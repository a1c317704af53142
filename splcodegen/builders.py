"""Constructors that assemble AST nodes the way the parser builds them.

Each builder takes its file location from the node the grammar rule starts
with, so error messages point at the right place in the source.
"""

from __future__ import annotations

from dataclasses import replace
from typing import Iterable, Optional

from splcodegen.ast import (
    AssignStmt,
    BinaryOpExpr,
    Block,
    BlockStmt,
    CallStmt,
    Condition,
    ConstDecl,
    ConstDef,
    DivisibleCondition,
    Expr,
    Ident,
    IfStmt,
    NegatedExpr,
    Number,
    PrintStmt,
    ProcDecl,
    ReadStmt,
    RelOpCondition,
    Stmt,
    Stmts,
    Token,
    TokenKind,
    VarDecl,
    WhileStmt,
)
from splcodegen.file_location import FileLocation


def make_token(file_loc: FileLocation, text: str, kind: TokenKind) -> Token:
    """Return a token AST found at ``file_loc``."""
    return Token(file_loc, text, kind)


def make_ident(file_loc: FileLocation, name: str) -> Ident:
    """Return an identifier AST found at ``file_loc``."""
    return Ident(file_loc, name)


def make_number(sign: Token, value: int, text: Optional[str] = None) -> Number:
    """Return a number AST located at its sign token.

    When ``text`` is not given, the decimal form of ``value`` is used.
    """
    if text is None:
        text = str(value)
    return Number(sign.file_loc.copy(), text, value)


def make_block(
    begin_tok: Token,
    const_decls: Iterable[ConstDecl],
    var_decls: Iterable[VarDecl],
    proc_decls: Iterable,
    stmts: Stmts,
) -> Block:
    """Return a block AST starting at the ``begin`` token."""
    return Block(
        begin_tok.file_loc.copy(),
        list(const_decls),
        list(var_decls),
        list(proc_decls),
        stmts,
    )


def make_const_decl(const_defs: Iterable[ConstDef]) -> ConstDecl:
    """Return a constant declaration holding one or more definitions."""
    defs = list(const_defs)
    if not defs:
        raise ValueError("a constant declaration needs at least one definition")
    return ConstDecl(defs[0].file_loc, defs)


def make_const_def(ident: Ident, number: Number) -> ConstDef:
    """Return a constant definition binding ``ident`` to ``number``."""
    return ConstDef(ident.file_loc.copy(), ident, number)


def make_var_decl(idents: Iterable[Ident]) -> VarDecl:
    """Return a variable declaration holding one or more identifiers."""
    names = list(idents)
    if not names:
        raise ValueError("a variable declaration needs at least one identifier")
    return VarDecl(names[0].file_loc, names)


def make_proc_decl(ident: Ident, block: Block) -> ProcDecl:
    """Return a procedure declaration named by ``ident``."""
    return ProcDecl(ident.file_loc.copy(), ident.name, block)


def make_stmts(
    stmt_list: Iterable[Stmt], file_loc: Optional[FileLocation] = None
) -> Stmts:
    """Return a statement sequence.

    A non-empty sequence is located at its first statement; an empty one
    needs ``file_loc``, the place where the empty sequence was found.
    """
    stmts = list(stmt_list)
    if stmts:
        return Stmts(stmts[0].file_loc, stmts)
    if file_loc is None:
        raise ValueError("an empty statement sequence needs a file location")
    return Stmts(file_loc.copy(), [])


def make_assign_stmt(ident: Ident, expr: Expr) -> AssignStmt:
    """Return an assignment of ``expr`` to ``ident``."""
    return AssignStmt(ident.file_loc.copy(), ident.name, expr)


def make_call_stmt(ident: Ident) -> CallStmt:
    """Return a call of the procedure named by ``ident``."""
    return CallStmt(ident.file_loc.copy(), ident.name)


def make_if_then_else_stmt(
    condition: Condition, then_stmts: Stmts, else_stmts: Stmts
) -> IfStmt:
    """Return an if statement with both branches."""
    return IfStmt(condition.file_loc, condition, then_stmts, else_stmts)


def make_if_then_stmt(condition: Condition, then_stmts: Stmts) -> IfStmt:
    """Return an if statement without an else branch."""
    return IfStmt(condition.file_loc, condition, then_stmts, None)


def make_while_stmt(condition: Condition, body: Stmts) -> WhileStmt:
    """Return a while loop."""
    return WhileStmt(condition.file_loc, condition, body)


def make_read_stmt(ident: Ident) -> ReadStmt:
    """Return a read into the variable named by ``ident``."""
    return ReadStmt(ident.file_loc.copy(), ident.name)


def make_print_stmt(expr: Expr) -> PrintStmt:
    """Return a print of ``expr``."""
    return PrintStmt(expr.file_loc, expr)


def make_block_stmt(block: Block) -> BlockStmt:
    """Return a statement wrapping a nested block."""
    return BlockStmt(block.file_loc, block)


def make_db_condition(dividend: Expr, divisor: Expr) -> DivisibleCondition:
    """Return a divisibility condition."""
    return DivisibleCondition(dividend.file_loc, dividend, divisor)


def make_rel_op_condition(expr1: Expr, rel_op: Token, expr2: Expr) -> RelOpCondition:
    """Return a relational condition comparing two expressions."""
    return RelOpCondition(expr1.file_loc, expr1, rel_op, expr2)


def make_binary_op_expr(expr1: Expr, arith_op: Token, expr2: Expr) -> BinaryOpExpr:
    """Return a binary arithmetic expression."""
    return BinaryOpExpr(expr1.file_loc, expr1, arith_op, expr2)


def make_signed_expr(sign: Token, expr: Expr) -> Expr:
    """Apply a sign to ``expr``: minus negates it, plus leaves it unchanged."""
    if sign.kind is TokenKind.MINUS:
        return NegatedExpr(sign.file_loc.copy(), expr)
    if sign.kind is TokenKind.PLUS:
        return expr
    raise ValueError(f"Unexpected sign token in signed expression: {sign.kind.name}")


def make_pos_number_expr(sign: Token, number: Number) -> Number:
    """Return ``number`` as an expression located at its sign token."""
    return replace(number, file_loc=sign.file_loc.copy())