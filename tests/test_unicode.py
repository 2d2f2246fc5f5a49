from dgengine.unicode import INVALID_CHAR, UTF8Parser, decode_utf8


def test_ascii_round_trip():
    text = "hello"
    assert decode_utf8(text) == [ord(c) for c in text]


def test_multibyte_round_trip():
    text = "héllo €𝄞"
    assert decode_utf8(text.encode("utf-8")) == [ord(c) for c in text]


def test_parser_done_after_last_code_point():
    parser = UTF8Parser("ab")
    assert parser.done() is False
    assert parser.next_code_point() == ord("a")
    assert parser.done() is False
    assert parser.next_code_point() == ord("b")
    assert parser.done() is True
    assert parser.next_code_point() == INVALID_CHAR


def test_empty_text_is_done():
    parser = UTF8Parser("")
    assert parser.done() is True
    assert list(parser) == []


def test_invalid_byte_yields_invalid_char_and_stops():
    parser = UTF8Parser(b"\xffabc")
    assert parser.next_code_point() == INVALID_CHAR
    assert parser.done() is True


def test_truncated_sequence_ends_with_invalid_char():
    result = decode_utf8(b"a\xe2\x82")
    assert result[0] == ord("a")
    assert result[-1] == INVALID_CHAR


def test_text_stops_at_null_byte():
    assert decode_utf8(b"ab\x00cd") == [ord("a"), ord("b")]


def test_reset_restarts_parsing():
    parser = UTF8Parser("x")
    assert list(parser) == [ord("x")]
    parser.reset("yz")
    assert list(parser) == [ord("y"), ord("z")]


def test_invalid_char_value():
    assert decode_utf8(b"\xff") == [0xFFFFFFFF]