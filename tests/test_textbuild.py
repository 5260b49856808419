import pytest

from libft.textbuild import split, strjoin, striteri, strmapi, strtrim, substr


@pytest.mark.parametrize(
    "s,start,length",
    [("hola", 2, 2), ("hola", 2, 10), ("hola", 0, 0), ("hola", 4, 3), ("abcdef", 1, 3)],
)
def test_substr_is_bounded_piece_of_source(s, start, length):
    result = substr(s, start, length)
    assert len(result) == min(length, max(0, len(s) - start))
    assert s.find(result, start) == start


def test_substr_start_past_end_is_empty():
    assert substr("hola", 5, 2) == ""


def test_substr_stops_at_terminator():
    assert substr("ab\0cd", 1, 10) == "b"


@pytest.mark.parametrize("start,length", [(-1, 2), (0, -3)])
def test_substr_rejects_negative(start, length):
    with pytest.raises(ValueError):
        substr("hola", start, length)


@pytest.mark.parametrize("s1,s2", [("foo", "bar"), ("", "bar"), ("foo", ""), ("", "")])
def test_strjoin_concatenates(s1, s2):
    result = strjoin(s1, s2)
    assert len(result) == len(s1) + len(s2)
    assert result.startswith(s1)
    assert result.endswith(s2)


def test_strjoin_cuts_at_terminator():
    assert strjoin("ab\0x", "cd\0y") == strjoin("ab", "cd")


def test_strtrim_removes_both_ends():
    assert strtrim("  xx  ", " ") == "xx"


def test_strtrim_keeps_inner_characters():
    result = strtrim("-+a-b+-", "-+")
    assert result == "a-b+"[:3]
    assert result[0] not in "-+" and result[-1] not in "-+"


def test_strtrim_everything_in_set():
    assert strtrim("aaaa", "a") == ""


def test_strtrim_empty_input_and_empty_set():
    assert strtrim("", "ab") == ""
    assert strtrim(" keep ", "") == " keep "


@pytest.mark.parametrize(
    "s,sep",
    [("  hello  world ", " "), ("a,b,,c", ","), (",,,", ","), ("solo", "x")],
)
def test_split_invariants(s, sep):
    words = split(s, sep)
    assert all(words)
    assert all(sep not in word for word in words)
    assert "".join(words) == s.replace(sep, "")


def test_split_worked_example():
    assert split("  hello  world ", " ") == ["hello", "world"]


def test_split_empty_text():
    assert split("", " ") == []


def test_split_with_nul_separator_keeps_whole_text():
    assert split("a b c", "\0") == ["a b c"]


def test_split_accepts_integer_code():
    assert split("a,b", ord(",")) == split("a,b", ",")


def test_split_rejects_long_separator():
    with pytest.raises(ValueError):
        split("abc", "ab")


def test_strmapi_passes_indices():
    assert strmapi("aaa", lambda i, c: str(i)) == "012"


def test_strmapi_preserves_length_and_characters():
    source = "mixed Case"
    result = strmapi(source, lambda i, c: c.upper())
    assert len(result) == len(source)
    assert result.lower() == source.lower()


def test_strmapi_rejects_multiple_characters():
    with pytest.raises(ValueError):
        strmapi("ab", lambda i, c: c * 2)


def test_strmapi_rejects_non_text():
    with pytest.raises(TypeError):
        strmapi("ab", lambda i, c: 1)


def test_striteri_replaces_in_place_and_stops_at_terminator():
    chars = list("ab\0cd")
    seen = []

    def visit(i, c):
        seen.append(i)
        return c.upper()

    assert striteri(chars, visit) is None
    assert chars == ["A", "B", "\0", "c", "d"]
    assert seen == [0, 1]


def test_striteri_none_leaves_items():
    data = bytearray(b"xyz")
    striteri(data, lambda i, c: None)
    assert data == bytearray(b"xyz")


def test_striteri_on_bytes_buffer():
    data = bytearray(b"ab")
    striteri(data, lambda i, c: c - 32)
    assert data == bytearray(b"AB")