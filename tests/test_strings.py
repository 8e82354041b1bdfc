import pytest

from ftkit.strings import (
    atoi,
    itoa,
    split,
    strchr,
    strdup,
    striteri,
    strjoin,
    strlcat,
    strlcpy,
    strlen,
    strmapi,
    strncmp,
    strnstr,
    strrchr,
    strtrim,
    substr,
)


def test_strlen():
    assert strlen("") == 0
    assert strlen("hello") == 5


def test_strlcpy_fits():
    dst = bytearray(10)
    assert strlcpy(dst, b"hello", len(dst)) == 5
    assert bytes(dst[:6]) == b"hello\0"


def test_strlcpy_truncates():
    dst = bytearray(b"xxxxxxxx")
    result = strlcpy(dst, b"hello world", 4)
    assert result == len(b"hello world")
    assert bytes(dst[:4]) == b"hel\0"
    assert bytes(dst[4:]) == b"xxxx"


def test_strlcpy_zero_size_leaves_buffer():
    dst = bytearray(b"abc")
    assert strlcpy(dst, b"hello", 0) == 5
    assert dst == bytearray(b"abc")


def test_strlcpy_size_too_big():
    with pytest.raises(IndexError):
        strlcpy(bytearray(2), b"hello", 5)


def test_strlcat_appends():
    dst = bytearray(b"foo\0" + b"\0" * 6)
    assert strlcat(dst, b"bar", len(dst)) == 6
    assert bytes(dst[:7]) == b"foobar\0"


def test_strlcat_truncates():
    dst = bytearray(b"foo\0\0\0")
    result = strlcat(dst, b"barbaz", len(dst))
    assert result == len(b"foo") + len(b"barbaz")
    assert bytes(dst) == b"fooba\0"


def test_strlcat_no_nul_within_size():
    dst = bytearray(b"abcdef\0")
    assert strlcat(dst, b"xyz", 3) == 3 + 3
    assert dst == bytearray(b"abcdef\0")


def test_strlcat_negative_size():
    with pytest.raises(ValueError):
        strlcat(bytearray(4), b"a", -1)


def test_strncmp():
    assert strncmp("abc", "abc", 3) == 0
    assert strncmp("abc", "abd", 2) == 0
    assert strncmp("abc", "abd", 3) < 0
    assert strncmp("abd", "abc", 3) > 0
    assert strncmp("ab", "abc", 3) < 0
    assert strncmp("anything", "else", 0) == 0


def test_strncmp_is_antisymmetric():
    pairs = [("hello", "help"), ("a", ""), ("xyz", "xy")]
    for a, b in pairs:
        assert strncmp(a, b, 5) == -strncmp(b, a, 5)


def test_strchr():
    assert strchr("hello", "l") == 2
    assert strchr("hello", ord("o")) == 4
    assert strchr("hello", "z") is None
    assert strchr("hello", "\0") == len("hello")
    assert strchr("hello", 256 + ord("h")) == 0


def test_strrchr():
    assert strrchr("hello", "l") == 3
    assert strrchr("hello", "h") == 0
    assert strrchr("hello", "z") is None
    assert strrchr("hello", 0) == len("hello")


def test_strchr_rejects_long_string():
    with pytest.raises(ValueError):
        strchr("hello", "ll")


def test_strnstr():
    assert strnstr("hello world", "", 0) == 0
    assert strnstr("hello world", "world", 11) == 6
    assert strnstr("hello world", "world", 10) is None
    assert strnstr("hello world", "lo", 5) == 3
    assert strnstr("hello", "xyz", 5) is None


def test_strdup():
    original = "copy me"
    assert strdup(original) == original
    assert strdup("") == ""


def test_substr():
    assert substr("hello world", 6, 5) == "world"
    assert substr("hello", 1, 100) == "ello"
    assert substr("hello", 10, 3) == ""
    assert substr("hello", 5, 3) == ""


def test_substr_negative():
    with pytest.raises(ValueError):
        substr("hello", -1, 2)


def test_strjoin():
    assert strjoin("foo", "bar") == "foobar"
    assert strjoin("", "") == ""
    with pytest.raises(TypeError):
        strjoin(None, "bar")


def test_strtrim():
    assert strtrim("xxhelloxx", "x") == "hello"
    assert strtrim("  a b  ", " ") == "a b"
    assert strtrim("abcabc", "abc") == ""
    assert strtrim("  keep  ", "") == "  keep  "
    with pytest.raises(TypeError):
        strtrim("abc", None)


def test_split():
    assert split("  hello  world ", " ") == ["hello", "world"]
    assert split("", ",") == []
    assert split(",,,", ",") == []
    assert split("a,b,,c", ",") == ["a", "b", "c"]
    assert split("no separators", "\0") == ["no separators"]


def test_split_rejoin_invariant():
    text = "one two three"
    assert " ".join(split(text, " ")) == text


def test_strmapi():
    assert strmapi("abc", lambda i, c: c.upper()) == "ABC"
    assert strmapi("aaa", lambda i, c: chr(ord(c) + i)) == "abc"
    assert strmapi("", lambda i, c: c) == ""


def test_striteri_replaces_in_place():
    chars = list("abc")
    striteri(chars, lambda i, c: c.upper() if i % 2 == 0 else None)
    assert chars == ["A", "b", "C"]


def test_striteri_on_bytearray():
    buf = bytearray(b"abc")
    seen = []
    striteri(buf, lambda i, c: seen.append(i))
    assert seen == [0, 1, 2]
    assert buf == bytearray(b"abc")


def test_itoa():
    assert itoa(0) == "0"
    assert itoa(-2147483648) == "-2147483648"
    assert itoa(2147483647) == "2147483647"
    assert itoa(-42) == "-42"


def test_atoi():
    assert atoi("42") == 42
    assert atoi("   -42abc") == -42
    assert atoi("\t\n+17") == 17
    assert atoi("abc") == 0
    assert atoi("--5") == 0
    assert atoi("-2147483648") == -2147483648


def test_atoi_wraps_to_int32():
    assert atoi("2147483648") == -2147483648
    assert atoi("4294967296") == 0


@pytest.mark.parametrize("n", [0, 1, -1, 12345, -2147483648, 2147483647])
def test_itoa_atoi_round_trip(n):
    assert atoi(itoa(n)) == n