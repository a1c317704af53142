import pytest

from splcodegen.file_location import FileLocation
from splcodegen.id_attrs import IdAttrs, IdKind
from splcodegen.id_use import IdUse, LexicalAddress


def _attrs(offset):
    return IdAttrs(FileLocation("p.spl", 1), IdKind.VARIABLE, offset)


def test_lexical_address_combines_levels_and_offset():
    use = IdUse(_attrs(5), 2)
    assert use.lexical_address() == LexicalAddress(2, 5)


def test_lexical_address_local_scope():
    addr = IdUse(_attrs(0), 0).lexical_address()
    assert addr.levels_outward == 0
    assert addr.offset_in_ar == 0


def test_attrs_are_shared_not_copied():
    attrs = _attrs(1)
    use = IdUse(attrs, 0)
    assert use.attrs is attrs


def test_missing_attrs_rejected():
    with pytest.raises(ValueError):
        IdUse(None, 0)