import io

import pytest

from splcodegen.bof import (
    BOFError,
    BOFHeader,
    file_bytes,
    parse_header,
    read_header,
    read_word,
    write_header,
    write_word,
)


def _header():
    return BOFHeader(
        text_start_address=0,
        text_length=17,
        data_start_address=1024,
        data_length=3,
        stack_bottom_addr=5123,
    )


def test_header_bytes_start_with_magic():
    assert _header().to_bytes()[:4] == b"BO32"


def test_default_header_has_correct_magic():
    assert BOFHeader().has_correct_magic() is True


def test_wrong_magic_detected():
    assert BOFHeader(magic=b"XXXX").has_correct_magic() is False


def test_header_round_trip_through_stream():
    buf = io.BytesIO()
    write_header(buf, _header())
    buf.seek(0)
    assert read_header(buf) == _header()


def test_parse_header_round_trip():
    hdr = _header()
    assert parse_header(hdr.to_bytes()) == hdr


def test_parse_header_rejects_short_data():
    with pytest.raises(BOFError):
        parse_header(_header().to_bytes()[:-1])


def test_parse_header_rejects_bad_magic():
    data = BOFHeader(magic=b"ABCD").to_bytes()
    with pytest.raises(BOFError, match="magic"):
        parse_header(data, "x.bof")


def test_to_bytes_rejects_bad_magic_length():
    with pytest.raises(BOFError):
        BOFHeader(magic=b"BO3").to_bytes()


def test_word_written_little_endian():
    buf = io.BytesIO()
    write_word(buf, 1)
    assert buf.getvalue() == b"\x01\x00\x00\x00"


@pytest.mark.parametrize("word", [0, 5, -1, -2147483648, 2147483647])
def test_word_round_trip(word):
    buf = io.BytesIO()
    write_word(buf, word)
    buf.seek(0)
    assert read_word(buf) == word


def test_words_follow_header():
    buf = io.BytesIO()
    write_header(buf, _header())
    for w in (7, -3):
        write_word(buf, w)
    buf.seek(0)
    assert read_header(buf) == _header()
    assert [read_word(buf), read_word(buf)] == [7, -3]


def test_read_word_at_eof_raises():
    with pytest.raises(BOFError):
        read_word(io.BytesIO(b"\x01\x02"))


def test_file_bytes_matches_written_size(tmp_path):
    path = tmp_path / "prog.bof"
    with path.open("wb") as f:
        write_header(f, _header())
        write_word(f, 42)
    assert file_bytes(path) == len(_header().to_bytes()) + len(
        (42).to_bytes(4, "little")
    )


def test_file_bytes_missing_file_raises(tmp_path):
    with pytest.raises(BOFError):
        file_bytes(tmp_path / "missing.bof")