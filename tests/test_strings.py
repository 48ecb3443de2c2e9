import pytest

from minitalk.chars import to_upper
from minitalk.strings import (
    split,
    strchr,
    strjoin,
    striteri,
    strlcat,
    strlcpy,
    strmapi,
    strncmp,
    strnstr,
    strrchr,
    strtrim,
    substr,
)

HEX_DIGITS = "0123456789abcdef"


@pytest.mark.parametrize(
    "text, sep",
    [
        ("  hello   world  ", " "),
        ("a,b,,c,", ","),
        ("no-separator", "|"),
        (",,,", ","),
    ],
)
def test_split_invariants(text, sep):
    words = split(text, sep)
    assert all(words)
    assert all(sep not in word for word in words)
    assert "".join(words) == text.replace(sep, "")


def test_split_collapses_runs():
    assert split("  hello   world  ", " ") == ["hello", "world"]


def test_split_empty_and_all_separators():
    assert split("", " ") == []
    assert split(",,,", ",") == []


def test_split_nul_separator_keeps_whole_text():
    assert split(HEX_DIGITS, "\0") == [HEX_DIGITS]


def test_split_accepts_int_separator():
    assert split("a b", ord(" ")) == split("a b", " ")


def test_split_rejects_long_separator():
    with pytest.raises(ValueError):
        split("a b", "ab")


def test_strchr_finds_first():
    text = "abcabc"
    index = strchr(text, "b")
    assert text[index] == "b"
    assert "b" not in text[:index]


def test_strchr_missing_and_nul():
    assert strchr(HEX_DIGITS, "z") is None
    assert strchr(HEX_DIGITS, "\0") == len(HEX_DIGITS)
    assert strchr(HEX_DIGITS, 0) == len(HEX_DIGITS)


def test_strrchr_finds_last():
    text = "abcabc"
    index = strrchr(text, "b")
    assert text[index] == "b"
    assert "b" not in text[index + 1:]
    assert index > strchr(text, "b")


def test_strrchr_missing_and_nul():
    assert strrchr(HEX_DIGITS, "z") is None
    assert strrchr(HEX_DIGITS, "\0") == len(HEX_DIGITS)


def test_strnstr_empty_needle_and_zero_length():
    assert strnstr(HEX_DIGITS, "", 0) == 0
    assert strnstr(HEX_DIGITS, "0", 0) is None


def test_strnstr_respects_limit():
    big = "hello world"
    little = "world"
    index = strnstr(big, little, len(big))
    assert big[index:index + len(little)] == little
    assert strnstr(big, little, len(big) - 1) is None
    assert strnstr(big, "xyz", len(big)) is None


def test_strnstr_rejects_negative():
    with pytest.raises(ValueError):
        strnstr("abc", "a", -1)


def test_strncmp_equal_and_zero():
    assert strncmp("abc", "abc", 10) == 0
    assert strncmp("abc", "xyz", 0) == 0
    assert strncmp("abc", "abd", 2) == 0


def test_strncmp_sign():
    assert strncmp("abc", "abd", 3) < 0
    assert strncmp("abd", "abc", 3) > 0
    assert strncmp("abc", "abd", 3) == -strncmp("abd", "abc", 3)


def test_strncmp_shorter_text_ends_with_zero():
    assert strncmp("ab", "abc", 5) == -ord("c")


def test_strlcpy_truncates():
    src = HEX_DIGITS
    copied, length = strlcpy(src, 5)
    assert copied == src[:4]
    assert length == len(src)


def test_strlcpy_fits_and_zero_size():
    assert strlcpy("abc", 100) == ("abc", 3)
    assert strlcpy("abc", 0) == ("", 3)


def test_strlcat_appends_within_size():
    dst, src, size = "abc", "defgh", 6
    result, total = strlcat(dst, src, size)
    assert result.startswith(dst)
    assert len(result) == size - 1
    assert src.startswith(result[len(dst):])
    assert total == len(dst) + len(src)


def test_strlcat_full_buffer_unchanged():
    assert strlcat("abcdef", "xyz", 4) == ("abcdef", 4 + len("xyz"))
    assert strlcat("abc", "xyz", 0) == ("abc", len("xyz"))


def test_strlcat_roomy_buffer():
    result, total = strlcat("abc", "def", 100)
    assert result == "abc" + "def"
    assert total == len(result)


def test_substr_ranges():
    text = HEX_DIGITS
    assert substr(text, 2, 3) == text[2:5]
    assert substr(text, 10, 1000) == text[10:]
    assert substr(text, len(text) + 1, 3) == ""
    assert substr(text, len(text), 3) == ""


def test_substr_rejects_negative():
    with pytest.raises(ValueError):
        substr("abc", -1, 2)
    with pytest.raises(ValueError):
        substr("abc", 0, -2)


def test_strjoin():
    assert strjoin("ab", "cd") == "ab" + "cd"
    assert strjoin(None, "cd") == "cd"
    assert strjoin("ab", None) == "ab"
    assert strjoin(None, None) is None


def test_strtrim_both_ends():
    assert strtrim("xxhixx", "x") == "hi"
    result = strtrim("-+-middle+-", "-+")
    assert result[0] not in "-+" and result[-1] not in "-+"
    assert "-+-" + result + "+-" == "-+-middle+-"


def test_strtrim_edge_cases():
    assert strtrim("xxxx", "x") == ""
    assert strtrim("  keep  ", None) == "  keep  "
    assert strtrim("  keep  ", "") == "  keep  "
    assert strtrim(None, "x") is None


def test_strmapi():
    text = "abc"
    assert strmapi(text, lambda i, c: to_upper(c)) == text.upper()
    assert strmapi(text, lambda i, c: text[len(text) - 1 - i]) == text[::-1]
    assert strmapi(None, lambda i, c: c) is None


def test_striteri_in_place():
    chars = list("abcd")
    striteri(chars, lambda i, c: to_upper(c) if i % 2 == 0 else None)
    assert "".join(chars) == "AbCd"


def test_striteri_visits_every_index():
    seen = []
    chars = list(HEX_DIGITS)
    striteri(chars, lambda i, c: seen.append((i, c)))
    assert seen == list(enumerate(HEX_DIGITS))
    assert chars == list(HEX_DIGITS)


def test_striteri_ignores_missing_arguments():
    chars = list("ab")
    striteri(chars, None)
    striteri(None, lambda i, c: c)
    assert chars == ["a", "b"]