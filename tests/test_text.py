import pytest

from solong.text import (
    split,
    strchr,
    striteri,
    strjoin,
    strlcat,
    strlcpy,
    strmapi,
    strncmp,
    strnstr,
    strrchr,
    strtrim,
    substr,
)


def test_strchr_finds_first():
    s = "banana"
    assert strchr(s, "a") == s.index("a")


def test_strchr_accepts_code():
    s = "banana"
    assert strchr(s, ord("n")) == s.index("n")


def test_strchr_missing_is_none():
    assert strchr("banana", "z") is None


def test_strchr_nul_is_end():
    assert strchr("banana", 0) == len("banana")


def test_strrchr_finds_last():
    s = "banana"
    assert strrchr(s, "a") == s.rindex("a")


def test_strrchr_missing_and_nul():
    assert strrchr("banana", "q") is None
    assert strrchr("banana", "\0") == len("banana")


def test_char_argument_must_be_single():
    with pytest.raises(ValueError):
        strchr("abc", "ab")


def test_strnstr_found_within_length():
    big = "Foo Bar Baz"
    assert strnstr(big, "Bar", len(big)) == big.index("Bar")


def test_strnstr_not_fully_within_length():
    big = "Foo Bar Baz"
    assert strnstr(big, "Bar", big.index("Bar") + 2) is None


def test_strnstr_empty_needle():
    assert strnstr("anything", "", 0) == 0


def test_strnstr_rejects_negative_length():
    with pytest.raises(ValueError):
        strnstr("abc", "a", -1)


def test_strncmp_equal():
    assert strncmp("hello", "hello", 10) == 0


def test_strncmp_sign_of_difference():
    assert strncmp("abc", "abd", 3) < 0
    assert strncmp("abd", "abc", 3) > 0


def test_strncmp_difference_is_code_gap():
    assert strncmp("abc", "abd", 3) == ord("c") - ord("d")


def test_strncmp_stops_at_n():
    assert strncmp("abcX", "abcY", 3) == 0


def test_strncmp_zero_n():
    assert strncmp("a", "b", 0) == 0


def test_strncmp_shorter_string():
    assert strncmp("ab", "abc", 5) == -ord("c")


def test_strlcpy_fits():
    assert strlcpy("hello", 10) == ("hello", len("hello"))


def test_strlcpy_truncates():
    text, length = strlcpy("hello", 3)
    assert text == "he"
    assert length == len("hello")


def test_strlcpy_zero_size():
    assert strlcpy("hello", 0) == ("", len("hello"))


def test_strlcat_fits():
    text, length = strlcat("foo", "bar", 20)
    assert text == "foobar"
    assert length == len("foobar")


def test_strlcat_truncates():
    text, length = strlcat("foo", "bar", 5)
    assert text == "foob"
    assert length == len("foo") + len("bar")


def test_strlcat_full_buffer():
    text, length = strlcat("foobar", "baz", 4)
    assert text == "foobar"
    assert length == 4 + len("baz")


def test_strlcat_zero_size():
    assert strlcat("foo", "bar", 0) == ("foo", len("bar"))


def test_strjoin():
    assert strjoin("so", "_long") == "so_long"


def test_strjoin_rejects_none():
    with pytest.raises(TypeError):
        strjoin(None, "x")


def test_substr_middle():
    s = "hello world"
    assert substr(s, 6, 5) == "world"


def test_substr_clamps_length():
    s = "hello"
    assert substr(s, 2, 100) == s[2:]


def test_substr_past_end_is_empty():
    assert substr("hello", 5, 3) == ""
    assert substr("hello", 50, 3) == ""


def test_substr_rejects_negative_start():
    with pytest.raises(ValueError):
        substr("hello", -1, 2)


def test_strtrim_both_ends():
    assert strtrim("xxhixyx", "xy") == "hi"


def test_strtrim_keeps_inner():
    assert strtrim("  a b  ", " ") == "a b"


def test_strtrim_everything_trimmed():
    assert strtrim("aaaa", "a") == ""


def test_strtrim_empty_set():
    assert strtrim("  hi  ", "") == "  hi  "


def test_split_skips_empty():
    assert split("  hello  world ", " ") == ["hello", "world"]


def test_split_no_separator():
    assert split("hello", ",") == ["hello"]


def test_split_only_separators():
    assert split(",,,", ",") == []


def test_split_empty():
    assert split("", " ") == []


def test_split_rejoin_round_trip():
    words = ["11111", "1P0C1", "1E001", "11111"]
    assert split("\n".join(words) + "\n", "\n") == words


def test_strmapi_uses_index():
    assert strmapi("abcd", lambda i, c: c.upper() if i % 2 == 0 else c) == "AbCd"


def test_strmapi_empty():
    assert strmapi("", lambda i, c: "x") == ""


def test_striteri_replaces_in_place():
    chars = list("abc")
    seen = []

    def f(i, c):
        seen.append(i)
        return c.upper() if i == 1 else None

    assert striteri(chars, f) is None
    assert chars == ["a", "B", "c"]
    assert seen == [0, 1, 2]