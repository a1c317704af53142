import pytest

from splcodegen.ast import (
    AssignStmt,
    BinaryOpExpr,
    BlockStmt,
    CallStmt,
    DivisibleCondition,
    IfStmt,
    NegatedExpr,
    PrintStmt,
    ReadStmt,
    RelOpCondition,
    TokenKind,
    WhileStmt,
)
from splcodegen.builders import (
    make_assign_stmt,
    make_binary_op_expr,
    make_block,
    make_block_stmt,
    make_call_stmt,
    make_const_decl,
    make_const_def,
    make_db_condition,
    make_ident,
    make_if_then_else_stmt,
    make_if_then_stmt,
    make_number,
    make_pos_number_expr,
    make_print_stmt,
    make_proc_decl,
    make_read_stmt,
    make_rel_op_condition,
    make_signed_expr,
    make_stmts,
    make_token,
    make_var_decl,
    make_while_stmt,
)
from splcodegen.file_location import FileLocation


def loc(line):
    return FileLocation("prog.spl", line)


def plus(line=1):
    return make_token(loc(line), "+", TokenKind.PLUS)


def minus(line=1):
    return make_token(loc(line), "-", TokenKind.MINUS)


def num(value, line=1):
    return make_number(plus(line), value, str(value))


def empty_stmts(line=1):
    return make_stmts([], loc(line))


def test_make_token_keeps_fields():
    tok = make_token(loc(4), "<=", TokenKind.LEQ)
    assert tok.text == "<="
    assert tok.kind is TokenKind.LEQ
    assert tok.line == 4


def test_make_ident_has_no_use_yet():
    ident = make_ident(loc(2), "x")
    assert ident.name == "x"
    assert ident.idu is None
    assert ident.filename == "prog.spl"


def test_make_number_copies_sign_location():
    sign = plus(7)
    n = make_number(sign, 42, "42")
    assert n.value == 42
    assert n.text == "42"
    assert n.file_loc == sign.file_loc
    assert n.file_loc is not sign.file_loc


def test_make_number_default_text():
    assert make_number(plus(), 15).text == "15"


def test_make_const_def_and_decl():
    ident = make_ident(loc(3), "c")
    d = make_const_def(ident, num(5, 3))
    assert d.ident is ident
    assert d.number.value == 5
    decl = make_const_decl([d])
    assert decl.const_defs == [d]
    assert decl.file_loc == d.file_loc


def test_make_const_decl_empty_raises():
    with pytest.raises(ValueError):
        make_const_decl([])


def test_make_var_decl_keeps_order():
    a, b = make_ident(loc(2), "a"), make_ident(loc(2), "b")
    vd = make_var_decl([a, b])
    assert [i.name for i in vd.idents] == ["a", "b"]
    assert vd.line == 2


def test_make_var_decl_empty_raises():
    with pytest.raises(ValueError):
        make_var_decl([])


def test_make_stmts_empty_and_nonempty():
    empty = make_stmts([], loc(9))
    assert empty.is_empty()
    assert empty.line == 9
    s = make_print_stmt(num(1, 10))
    full = make_stmts([s])
    assert not full.is_empty()
    assert list(full) == [s]
    assert full.line == 10


def test_make_stmts_empty_without_location_raises():
    with pytest.raises(ValueError):
        make_stmts([])


def test_make_block_and_proc_decl():
    begin = make_token(loc(1), "begin", TokenKind.PLUS)
    vd = make_var_decl([make_ident(loc(1), "v")])
    body = empty_stmts(1)
    blk = make_block(begin, [], [vd], [], body)
    assert blk.var_decls == [vd]
    assert blk.const_decls == []
    assert blk.stmts is body
    proc = make_proc_decl(make_ident(loc(5), "p"), blk)
    assert proc.name == "p"
    assert proc.block is blk
    assert proc.line == 5


def test_statement_builders_take_ident_names():
    ident = make_ident(loc(6), "y")
    expr = num(3, 6)
    assign = make_assign_stmt(ident, expr)
    assert isinstance(assign, AssignStmt)
    assert (assign.name, assign.expr) == ("y", expr)
    call = make_call_stmt(ident)
    assert isinstance(call, CallStmt) and call.name == "y"
    read = make_read_stmt(ident)
    assert isinstance(read, ReadStmt) and read.name == "y"
    assert read.file_loc == ident.file_loc


def test_if_statements():
    cond = make_rel_op_condition(num(1), make_token(loc(1), "<", TokenKind.LT), num(2))
    assert isinstance(cond, RelOpCondition)
    then_s, else_s = empty_stmts(), empty_stmts()
    full = make_if_then_else_stmt(cond, then_s, else_s)
    assert isinstance(full, IfStmt)
    assert full.then_stmts is then_s and full.else_stmts is else_s
    short = make_if_then_stmt(cond, then_s)
    assert short.else_stmts is None
    assert short.condition is cond


def test_while_and_block_stmt():
    cond = make_db_condition(num(6), num(3))
    assert isinstance(cond, DivisibleCondition)
    assert cond.dividend.value == 6 and cond.divisor.value == 3
    body = empty_stmts()
    loop = make_while_stmt(cond, body)
    assert isinstance(loop, WhileStmt) and loop.body is body
    blk = make_block(plus(), [], [], [], body)
    bs = make_block_stmt(blk)
    assert isinstance(bs, BlockStmt) and bs.block is blk


def test_print_stmt_located_at_expr():
    e = num(8, 12)
    p = make_print_stmt(e)
    assert isinstance(p, PrintStmt)
    assert p.expr is e
    assert p.line == 12


def test_binary_op_expr():
    left, right = num(1, 2), num(2, 2)
    op = make_token(loc(2), "*", TokenKind.MULT)
    e = make_binary_op_expr(left, op, right)
    assert isinstance(e, BinaryOpExpr)
    assert (e.expr1, e.arith_op, e.expr2) == (left, op, right)
    assert e.file_loc == left.file_loc


def test_signed_expr_minus_negates():
    inner = make_ident(loc(3), "z")
    neg = make_signed_expr(minus(3), inner)
    assert isinstance(neg, NegatedExpr)
    assert neg.expr is inner


def test_signed_expr_plus_is_identity():
    inner = make_ident(loc(3), "z")
    assert make_signed_expr(plus(3), inner) is inner


def test_signed_expr_bad_sign_raises():
    with pytest.raises(ValueError):
        make_signed_expr(make_token(loc(1), "*", TokenKind.MULT), num(1))


def test_pos_number_expr_moves_location_to_sign():
    n = num(11, 1)
    out = make_pos_number_expr(plus(20), n)
    assert out.value == 11
    assert out.line == 20
    assert n.line == 1