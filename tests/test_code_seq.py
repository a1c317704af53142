import pytest

from splcodegen import code
from splcodegen.code_seq import CodeSeq


def test_empty_sequence():
    seq = CodeSeq()
    assert seq.is_empty() is True
    assert len(seq) == 0
    assert list(seq) == []


def test_singleton_first_and_last_are_same():
    instr = code.nop()
    seq = CodeSeq([instr])
    assert seq.first() == instr
    assert seq.last() == instr
    assert not seq.is_empty()


def test_append_preserves_order():
    seq = CodeSeq()
    items = [code.nop(), code.exit_(0), code.jrel(2)]
    for item in items:
        seq.append(item)
    assert list(seq) == items
    assert seq.first() == items[0]
    assert seq.last() == items[-1]


def test_append_none_rejected():
    with pytest.raises(ValueError):
        CodeSeq().append(None)


def test_rest_does_not_modify_original():
    items = [code.nop(), code.exit_(0)]
    seq = CodeSeq(items)
    rest = seq.rest()
    assert list(rest) == items[1:]
    assert list(seq) == items


def test_rest_of_singleton_is_empty():
    assert CodeSeq([code.nop()]).rest().is_empty()


@pytest.mark.parametrize("method", ["first", "rest", "last"])
def test_empty_accessors_raise(method):
    with pytest.raises(IndexError):
        getattr(CodeSeq(), method)()


def test_extend_concatenates_in_place():
    a = CodeSeq([code.nop()])
    b = CodeSeq([code.exit_(0), code.rtn()])
    a.extend(b)
    assert list(a) == [code.nop(), code.exit_(0), code.rtn()]
    assert len(b) == 2


def test_extend_empty_into_empty_and_nonempty():
    a = CodeSeq()
    a.extend(CodeSeq([code.nop()]))
    assert list(a) == [code.nop()]
    a.extend(CodeSeq())
    assert list(a) == [code.nop()]


def test_add_returns_new_sequence():
    a = CodeSeq([code.nop()])
    b = CodeSeq([code.rtn()])
    c = a + b
    assert list(c) == [code.nop(), code.rtn()]
    assert list(a) == [code.nop()]
    assert len(c) == len(a) + len(b)


def test_equality():
    assert CodeSeq([code.nop()]) == CodeSeq([code.nop()])
    assert not (CodeSeq([code.nop()]) == CodeSeq())