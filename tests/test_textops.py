import pytest

from sigtalk.textops import (
    memchr,
    memcmp,
    split,
    strchr,
    strlcat,
    strlcpy,
    strmapi,
    strncmp,
    strnstr,
    strrchr,
    strtrim,
    substr,
)


# split

def test_split_drops_empty_pieces():
    assert split("  hello   world ", " ") == ["hello", "world"]


def test_split_no_separator_present():
    assert split("hello", ",") == ["hello"]


def test_split_only_separators():
    assert split(",,,,", ",") == []


def test_split_empty_text():
    assert split("", " ") == []


def test_split_accepts_integer_code():
    assert split("a,b", ord(",")) == ["a", "b"]


def test_split_pieces_rejoin_to_text_without_separators():
    text = "::one::two:three:"
    pieces = split(text, ":")
    assert "".join(pieces) == text.replace(":", "")
    assert all(piece and ":" not in piece for piece in pieces)


def test_split_rejects_long_separator():
    with pytest.raises(ValueError):
        split("a b", "ab")


# strtrim

def test_strtrim_removes_both_ends():
    assert strtrim("xxyhelloyx", "xy") == "hello"


def test_strtrim_keeps_inner_characters():
    assert strtrim("--a-b--", "-") == "a-b"


def test_strtrim_everything_trimmed():
    assert strtrim("aaaa", "a") == ""


def test_strtrim_empty_set_leaves_text():
    assert strtrim("  spaced  ", "") == "  spaced  "


# substr

def test_substr_middle():
    assert substr("hello world", 6, 5) == "world"


def test_substr_length_clamped_to_end():
    assert substr("hello", 2, 100) == "llo"


def test_substr_start_past_end():
    assert substr("hello", 5, 3) == ""
    assert substr("hello", 42, 3) == ""


def test_substr_length_is_bounded():
    text = "abcdefgh"
    for start in range(len(text) + 2):
        for length in range(len(text) + 2):
            result = substr(text, start, length)
            assert len(result) <= length
            assert text[start:].startswith(result)


def test_substr_negative_start_rejected():
    with pytest.raises(ValueError):
        substr("abc", -1, 2)


# strnstr

def test_strnstr_found_within_limit():
    haystack = "lorem ipsum dolor"
    assert strnstr(haystack, "ipsum", len(haystack)) == haystack.index("ipsum")


def test_strnstr_match_must_fit_in_limit():
    haystack = "lorem ipsum"
    start = haystack.index("ipsum")
    assert strnstr(haystack, "ipsum", start + len("ipsum") - 1) is None
    assert strnstr(haystack, "ipsum", start + len("ipsum")) == start


def test_strnstr_empty_needle():
    assert strnstr("abc", "", 0) == 0


def test_strnstr_zero_limit():
    assert strnstr("abc", "a", 0) is None


def test_strnstr_absent():
    assert strnstr("abc", "zz", 3) is None


# strncmp

def test_strncmp_equal():
    assert strncmp("abc", "abc", 3) == 0


def test_strncmp_difference_of_codes():
    assert strncmp("abc", "abd", 3) == ord("c") - ord("d")


def test_strncmp_limited_prefix():
    assert strncmp("abcX", "abcY", 3) == 0


def test_strncmp_shorter_string_counts_as_nul():
    assert strncmp("ab", "abc", 5) == -ord("c")
    assert strncmp("abc", "ab", 5) == ord("c")


def test_strncmp_zero_count():
    assert strncmp("a", "b", 0) == 0


def test_strncmp_antisymmetric():
    pairs = [("apple", "apricot"), ("", "x"), ("same", "same"), ("zeta", "alpha")]
    for a, b in pairs:
        assert strncmp(a, b, 10) == -strncmp(b, a, 10)


def test_strncmp_stops_at_embedded_nul():
    assert strncmp("ab\0x", "ab\0y", 4) == 0


def test_strncmp_bytes_high_values_unsigned():
    assert strncmp(b"\xff", b"\x01", 1) > 0


# memcmp

def test_memcmp_equal_prefix():
    assert memcmp(b"abcx", b"abcy", 3) == 0


def test_memcmp_difference():
    assert memcmp(b"\x00\x10", b"\x00\x20", 2) == 0x10 - 0x20


def test_memcmp_does_not_stop_at_nul():
    assert memcmp(b"\x00a", b"\x00b", 2) == ord("a") - ord("b")


def test_memcmp_too_short():
    with pytest.raises(ValueError):
        memcmp(b"ab", b"abc", 3)


# memchr

def test_memchr_found():
    data = b"hello"
    assert memchr(data, ord("l"), len(data)) == data.index(b"l")


def test_memchr_outside_count():
    assert memchr(b"hello", ord("o"), 4) is None


def test_memchr_value_reduced_to_byte():
    data = b"\x00\x01\x02"
    assert memchr(data, 0x101, len(data)) == 1


def test_memchr_count_too_large():
    with pytest.raises(ValueError):
        memchr(b"ab", 0, 3)


# strchr / strrchr

def test_strchr_first_occurrence():
    text = "bonjour"
    assert strchr(text, "o") == text.find("o")


def test_strrchr_last_occurrence():
    text = "bonjour"
    assert strrchr(text, "o") == text.rfind("o")


def test_strchr_missing():
    assert strchr("abc", "z") is None
    assert strrchr("abc", "z") is None


def test_nul_search_gives_terminator_position():
    text = "abc"
    assert strchr(text, "\0") == len(text)
    assert strrchr(text, 0) == len(text)


def test_strchr_integer_code_wraps_to_byte():
    assert strchr("teste", ord("e") + 256) == 1


def test_strchr_before_or_equal_strrchr():
    text = "mississippi"
    for ch in set(text):
        assert strchr(text, ch) <= strrchr(text, ch)
        assert text[strchr(text, ch)] == ch == text[strrchr(text, ch)]


# strlcpy

def test_strlcpy_fits():
    assert strlcpy("hello", 10) == ("hello", len("hello"))


def test_strlcpy_truncates():
    copied, length = strlcpy("hello", 3)
    assert copied == "he"
    assert length == len("hello")


def test_strlcpy_zero_size():
    assert strlcpy("hello", 0) == ("", len("hello"))


def test_strlcpy_result_bound():
    src = "abcdef"
    for size in range(1, len(src) + 3):
        copied, length = strlcpy(src, size)
        assert len(copied) <= size - 1
        assert src.startswith(copied)
        assert length == len(src)


# strlcat

def test_strlcat_fits():
    assert strlcat("foo", "bar", 10) == ("foobar", len("foo") + len("bar"))


def test_strlcat_truncates():
    result, total = strlcat("foo", "bar", 5)
    assert result == "foob"
    assert total == len("foo") + len("bar")


def test_strlcat_dst_fills_buffer():
    assert strlcat("foobar", "baz", 4) == ("foobar", 4 + len("baz"))


def test_strlcat_zero_size():
    assert strlcat("foo", "bar", 0) == ("foo", len("bar"))


# strmapi

def test_strmapi_uses_index_and_char():
    assert strmapi("abc", lambda i, c: c.upper() if i % 2 == 0 else c) == "AbC"


def test_strmapi_identity():
    assert strmapi("unchanged", lambda i, c: c) == "unchanged"


def test_strmapi_empty():
    assert strmapi("", lambda i, c: "x") == ""


def test_strmapi_requires_function():
    with pytest.raises(TypeError):
        strmapi("abc", None)