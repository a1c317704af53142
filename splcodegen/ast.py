"""Abstract syntax trees for SPL programs."""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum, auto
from typing import List, Optional, Union

from splcodegen.file_location import FileLocation
from splcodegen.id_use import IdUse


class TokenKind(Enum):
    """Kinds of operator tokens that appear inside ASTs."""

    PLUS = auto()
    MINUS = auto()
    MULT = auto()
    DIV = auto()
    EQEQ = auto()
    NEQ = auto()
    LT = auto()
    LEQ = auto()
    GT = auto()
    GEQ = auto()

    @property
    def is_arith(self) -> bool:
        return self in _ARITH_KINDS

    @property
    def is_rel(self) -> bool:
        return self in _REL_KINDS


_ARITH_KINDS = frozenset({TokenKind.PLUS, TokenKind.MINUS, TokenKind.MULT, TokenKind.DIV})
_REL_KINDS = frozenset(
    {TokenKind.EQEQ, TokenKind.NEQ, TokenKind.LT, TokenKind.LEQ, TokenKind.GT, TokenKind.GEQ}
)


@dataclass
class _Node:
    file_loc: FileLocation

    @property
    def filename(self) -> str:
        return self.file_loc.filename

    @property
    def line(self) -> int:
        return self.file_loc.line


@dataclass
class Token(_Node):
    """A token kept in the tree, such as an operator."""

    text: str
    kind: TokenKind


@dataclass
class Ident(_Node):
    """An identifier; ``idu`` is filled in by scope checking."""

    name: str
    idu: Optional[IdUse] = None


@dataclass
class Number(_Node):
    """A (possibly signed) numeric literal."""

    text: str
    value: int


@dataclass
class BinaryOpExpr(_Node):
    """expr arithOp expr"""

    expr1: "Expr"
    arith_op: Token
    expr2: "Expr"


@dataclass
class NegatedExpr(_Node):
    """- expr"""

    expr: "Expr"


Expr = Union[BinaryOpExpr, NegatedExpr, Ident, Number]


@dataclass
class DivisibleCondition(_Node):
    """divisible dividend by divisor"""

    dividend: Expr
    divisor: Expr


@dataclass
class RelOpCondition(_Node):
    """expr relOp expr"""

    expr1: Expr
    rel_op: Token
    expr2: Expr


Condition = Union[DivisibleCondition, RelOpCondition]


@dataclass
class Stmts(_Node):
    """A possibly empty sequence of statements."""

    stmts: List["Stmt"] = field(default_factory=list)

    def is_empty(self) -> bool:
        return not self.stmts

    def __iter__(self):
        return iter(self.stmts)

    def __len__(self) -> int:
        return len(self.stmts)


@dataclass
class AssignStmt(_Node):
    """ident := expr"""

    name: str
    expr: Expr
    idu: Optional[IdUse] = None


@dataclass
class CallStmt(_Node):
    """call ident"""

    name: str
    idu: Optional[IdUse] = None


@dataclass
class IfStmt(_Node):
    """if condition then stmts [else stmts]; ``else_stmts`` is None when absent."""

    condition: Condition
    then_stmts: Stmts
    else_stmts: Optional[Stmts] = None


@dataclass
class WhileStmt(_Node):
    """while condition do stmts"""

    condition: Condition
    body: Stmts


@dataclass
class ReadStmt(_Node):
    """read ident"""

    name: str
    idu: Optional[IdUse] = None


@dataclass
class PrintStmt(_Node):
    """print expr"""

    expr: Expr


@dataclass
class BlockStmt(_Node):
    """A nested block used as a statement."""

    block: "Block"


Stmt = Union[AssignStmt, CallStmt, IfStmt, WhileStmt, ReadStmt, PrintStmt, BlockStmt]


@dataclass
class ConstDef(_Node):
    """ident = number"""

    ident: Ident
    number: Number


@dataclass
class ConstDecl(_Node):
    """const followed by one or more constant definitions."""

    const_defs: List[ConstDef] = field(default_factory=list)


@dataclass
class VarDecl(_Node):
    """var followed by one or more identifiers."""

    idents: List[Ident] = field(default_factory=list)


@dataclass
class ProcDecl(_Node):
    """proc ident block"""

    name: str
    block: "Block"


@dataclass
class Block(_Node):
    """begin const-decls var-decls proc-decls stmts; a program is a block."""

    const_decls: List[ConstDecl] = field(default_factory=list)
    var_decls: List[VarDecl] = field(default_factory=list)
    proc_decls: List[ProcDecl] = field(default_factory=list)
    stmts: Optional[Stmts] = None

    def __post_init__(self) -> None:
        if self.stmts is None:
            self.stmts = Stmts(self.file_loc.copy())