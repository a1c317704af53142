"""Instructions of the stack machine and functions that build them.

Every builder returns a fresh, immutable instruction value. Operands are
stored as given; sign extension of immediates is left to the machine.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum, auto
from typing import Union


class OpCode(Enum):
    """Operation codes that select an instruction's format."""

    COMP = auto()
    OTHC = auto()
    ADDI = auto()
    ANDI = auto()
    BORI = auto()
    NORI = auto()
    XORI = auto()
    BEQ = auto()
    BGEZ = auto()
    BGTZ = auto()
    BLEZ = auto()
    BLTZ = auto()
    BNE = auto()
    JMPA = auto()
    CALL = auto()
    RTN = auto()


class Func0(Enum):
    """Function codes of computational-format instructions."""

    NOP = auto()
    ADD = auto()
    SUB = auto()
    CPW = auto()
    CPR = auto()
    AND = auto()
    BOR = auto()
    NOR = auto()
    XOR = auto()
    LWR = auto()
    SWR = auto()
    SCA = auto()
    LWI = auto()
    NEG = auto()


class Func1(Enum):
    """Function codes of the other computational-format instructions."""

    LIT = auto()
    ARI = auto()
    SRI = auto()
    MUL = auto()
    DIV = auto()
    CFHI = auto()
    CFLO = auto()
    SLL = auto()
    SRL = auto()
    JMP = auto()
    CSI = auto()
    JREL = auto()
    SYS = auto()


class SyscallCode(Enum):
    """System call codes."""

    EXIT = auto()
    PRINT_STR = auto()
    PRINT_INT = auto()
    PRINT_CHAR = auto()
    READ_CHAR = auto()
    START_TRACING = auto()
    STOP_TRACING = auto()


@dataclass(frozen=True)
class CompInstr:
    """Computational format: registers and offsets for target and source."""

    rt: int
    ot: int
    rs: int
    os: int
    func: Func0
    op: OpCode = field(default=OpCode.COMP, init=False)

    @property
    def mnemonic(self) -> str:
        return self.func.name.lower()


@dataclass(frozen=True)
class OtherCompInstr:
    """Other computational format: one register, an offset and an argument."""

    reg: int
    offset: int
    arg: int
    func: Func1
    op: OpCode = field(default=OpCode.OTHC, init=False)

    @property
    def mnemonic(self) -> str:
        return self.func.name.lower()


@dataclass(frozen=True)
class ImmedInstr:
    """Immediate format with a signed immediate operand."""

    op: OpCode
    reg: int
    offset: int
    immed: int

    @property
    def mnemonic(self) -> str:
        return self.op.name.lower()


@dataclass(frozen=True)
class UImmedInstr:
    """Immediate format with an unsigned immediate operand."""

    op: OpCode
    reg: int
    offset: int
    uimmed: int

    @property
    def mnemonic(self) -> str:
        return self.op.name.lower()


@dataclass(frozen=True)
class JumpInstr:
    """Jump format: an opcode and an address."""

    op: OpCode
    addr: int

    @property
    def mnemonic(self) -> str:
        return self.op.name.lower()


@dataclass(frozen=True)
class SyscallInstr:
    """System call: a register, an offset and the call's code."""

    reg: int
    offset: int
    code: SyscallCode
    op: OpCode = field(default=OpCode.OTHC, init=False)
    func: Func1 = field(default=Func1.SYS, init=False)

    @property
    def mnemonic(self) -> str:
        return self.code.name.lower()


Instr = Union[CompInstr, OtherCompInstr, ImmedInstr, UImmedInstr, JumpInstr, SyscallInstr]


# --- computational format ---


def nop() -> CompInstr:
    return CompInstr(0, 0, 0, 0, Func0.NOP)


def add(t: int, ot: int, s: int, os: int) -> CompInstr:
    return CompInstr(t, ot, s, os, Func0.ADD)


def sub(t: int, ot: int, s: int, os: int) -> CompInstr:
    return CompInstr(t, ot, s, os, Func0.SUB)


def cpw(t: int, ot: int, s: int, os: int) -> CompInstr:
    return CompInstr(t, ot, s, os, Func0.CPW)


def cpr(t: int, s: int) -> CompInstr:
    return CompInstr(t, 0, s, 0, Func0.CPR)


def and_(t: int, ot: int, s: int, os: int) -> CompInstr:
    return CompInstr(t, ot, s, os, Func0.AND)


def bor(t: int, ot: int, s: int, os: int) -> CompInstr:
    return CompInstr(t, ot, s, os, Func0.BOR)


def nor(t: int, ot: int, s: int, os: int) -> CompInstr:
    return CompInstr(t, ot, s, os, Func0.NOR)


def xor(t: int, ot: int, s: int, os: int) -> CompInstr:
    return CompInstr(t, ot, s, os, Func0.XOR)


def lwr(t: int, s: int, os: int) -> CompInstr:
    return CompInstr(t, 0, s, os, Func0.LWR)


def swr(t: int, ot: int, s: int) -> CompInstr:
    return CompInstr(t, ot, s, 0, Func0.SWR)


def sca(t: int, ot: int, s: int, os: int) -> CompInstr:
    return CompInstr(t, ot, s, os, Func0.SCA)


def lwi(t: int, ot: int, s: int, os: int) -> CompInstr:
    return CompInstr(t, ot, s, os, Func0.LWI)


def neg(t: int, ot: int, s: int, os: int) -> CompInstr:
    return CompInstr(t, ot, s, os, Func0.NEG)


# --- other computational format ---


def lit(t: int, ot: int, i: int) -> OtherCompInstr:
    return OtherCompInstr(t, ot, i, Func1.LIT)


def ari(r: int, i: int) -> OtherCompInstr:
    return OtherCompInstr(r, 0, i, Func1.ARI)


def sri(r: int, i: int) -> OtherCompInstr:
    return OtherCompInstr(r, 0, i, Func1.SRI)


def mul(s: int, o: int) -> OtherCompInstr:
    return OtherCompInstr(s, o, 0, Func1.MUL)


def div(s: int, o: int) -> OtherCompInstr:
    return OtherCompInstr(s, o, 0, Func1.DIV)


def cfhi(t: int, o: int) -> OtherCompInstr:
    return OtherCompInstr(t, o, 0, Func1.CFHI)


def cflo(t: int, o: int) -> OtherCompInstr:
    return OtherCompInstr(t, o, 0, Func1.CFLO)


def sll(t: int, o: int, h: int) -> OtherCompInstr:
    return OtherCompInstr(t, o, h, Func1.SLL)


def srl(t: int, o: int, h: int) -> OtherCompInstr:
    # Encoded with the SLL function code, as the code generator expects.
    return OtherCompInstr(t, o, h, Func1.SLL)


def jmp(s: int, o: int) -> OtherCompInstr:
    return OtherCompInstr(s, o, 0, Func1.JMP)


def csi(s: int, o: int) -> OtherCompInstr:
    return OtherCompInstr(s, o, 0, Func1.CSI)


def jrel(o: int) -> OtherCompInstr:
    return OtherCompInstr(0, 0, o, Func1.JREL)


# --- immediate format ---


def addi(r: int, o: int, i: int) -> ImmedInstr:
    return ImmedInstr(OpCode.ADDI, r, o, i)


def andi(r: int, o: int, u: int) -> UImmedInstr:
    return UImmedInstr(OpCode.ANDI, r, o, u)


def bori(r: int, o: int, u: int) -> UImmedInstr:
    return UImmedInstr(OpCode.BORI, r, o, u)


def nori(r: int, o: int, u: int) -> UImmedInstr:
    return UImmedInstr(OpCode.NORI, r, o, u)


def xori(r: int, o: int, u: int) -> UImmedInstr:
    return UImmedInstr(OpCode.XORI, r, o, u)


def beq(r: int, o: int, i: int) -> ImmedInstr:
    return ImmedInstr(OpCode.BEQ, r, o, i)


def bgez(r: int, o: int, i: int) -> ImmedInstr:
    return ImmedInstr(OpCode.BGEZ, r, o, i)


def bgtz(r: int, o: int, i: int) -> ImmedInstr:
    return ImmedInstr(OpCode.BGTZ, r, o, i)


def blez(r: int, o: int, i: int) -> ImmedInstr:
    return ImmedInstr(OpCode.BLEZ, r, o, i)


def bltz(r: int, o: int, i: int) -> ImmedInstr:
    return ImmedInstr(OpCode.BLTZ, r, o, i)


def bne(r: int, o: int, i: int) -> ImmedInstr:
    return ImmedInstr(OpCode.BNE, r, o, i)


# --- jump format ---


def jmpa(a: int) -> JumpInstr:
    return JumpInstr(OpCode.JMPA, a)


def call(a: int) -> JumpInstr:
    return JumpInstr(OpCode.CALL, a)


def rtn() -> JumpInstr:
    return JumpInstr(OpCode.RTN, 0)


# --- system calls ---


def exit_(o: int) -> SyscallInstr:
    return SyscallInstr(0, o, SyscallCode.EXIT)


def pstr(s: int, o: int) -> SyscallInstr:
    return SyscallInstr(s, o, SyscallCode.PRINT_STR)


def pint(s: int, o: int) -> SyscallInstr:
    return SyscallInstr(s, o, SyscallCode.PRINT_INT)


def pch(s: int, o: int) -> SyscallInstr:
    return SyscallInstr(s, o, SyscallCode.PRINT_CHAR)


def rch(t: int, o: int) -> SyscallInstr:
    return SyscallInstr(t, o, SyscallCode.READ_CHAR)


def stra() -> SyscallInstr:
    return SyscallInstr(0, 0, SyscallCode.START_TRACING)


def notr() -> SyscallInstr:
    return SyscallInstr(0, 0, SyscallCode.STOP_TRACING)