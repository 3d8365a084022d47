import pytest

from minikit.strings import (
    split,
    strchr,
    strcmp,
    strjoin,
    strmapi,
    striteri,
    strncmp,
    strnstr,
    strrchr,
    strtrim,
    substr,
)


def test_split_drops_empty_pieces():
    assert split("  hello  world ", " ") == ["hello", "world"]


def test_split_only_separators_gives_nothing():
    assert split(",,,", ",") == []
    assert split("", ",") == []


def test_split_without_separator_keeps_whole_text():
    assert split("abc", ";") == ["abc"]


def test_split_accepts_integer_code():
    assert split("a:b", ord(":")) == ["a", "b"]


def test_split_pieces_contain_no_separator():
    pieces = split("x--y-z---w", "-")
    assert all(piece and "-" not in piece for piece in pieces)
    assert "".join(pieces) == "x--y-z---w".replace("-", "")


def test_split_rejects_long_separator():
    with pytest.raises(ValueError):
        split("a,b", ",,")


def test_strchr_finds_first_occurrence():
    text = "hello"
    index = strchr(text, "l")
    assert text[index] == "l"
    assert "l" not in text[:index]


def test_strchr_missing_is_none():
    assert strchr("hello", "z") is None


def test_strchr_nul_finds_end():
    assert strchr("hello", "\0") == len("hello")


def test_strchr_integer_code_cut_to_byte():
    assert strchr("hello", ord("e")) == strchr("hello", "e")
    assert strchr("hello", 256 + ord("e")) == strchr("hello", "e")


def test_strchr_rejects_bad_type():
    with pytest.raises(TypeError):
        strchr("hello", 1.5)


def test_strrchr_finds_last_occurrence():
    text = "hello"
    index = strrchr(text, "l")
    assert text[index] == "l"
    assert "l" not in text[index + 1:]


def test_strrchr_missing_and_nul():
    assert strrchr("abc", "q") is None
    assert strrchr("abc", "\0") == len("abc")


def test_strnstr_empty_needle_found_at_start():
    assert strnstr("anything", "", 0) == 0


def test_strnstr_finds_needle_within_limit():
    haystack = "foo bar baz"
    index = strnstr(haystack, "bar", len(haystack))
    assert haystack[index:index + len("bar")] == "bar"


def test_strnstr_needle_must_fit_in_limit():
    haystack = "foo bar"
    assert strnstr(haystack, "bar", len(haystack) - 1) is None
    assert strnstr(haystack, "bar", len(haystack)) == haystack.index("bar")


def test_strnstr_missing_is_none():
    assert strnstr("foo", "zzz", 100) is None


def test_strnstr_rejects_negative_limit():
    with pytest.raises(ValueError):
        strnstr("foo", "o", -1)


def test_substr_basic():
    assert substr("hello", 1, 3) == "ell"


def test_substr_start_past_end_is_empty():
    assert substr("hello", 10, 2) == ""
    assert substr("hello", len("hello"), 2) == ""


def test_substr_length_is_bounded():
    text = "hello"
    part = substr(text, 2, 100)
    assert text.endswith(part)
    assert len(part) == len(text) - 2


def test_substr_rejects_negative_values():
    with pytest.raises(ValueError):
        substr("hello", -1, 2)
    with pytest.raises(ValueError):
        substr("hello", 0, -2)


def test_strtrim_both_ends():
    assert strtrim("  ab  ", " ") == "ab"


def test_strtrim_everything_trimmed():
    assert strtrim("xxyxx", "xy") == ""


def test_strtrim_empty_set_keeps_text():
    assert strtrim(" abc ", "") == " abc "


def test_strtrim_keeps_inner_characters():
    assert strtrim("--a-b--", "-") == "a-b"


def test_strjoin_concatenates():
    joined = strjoin("ab", "cd")
    assert joined.startswith("ab")
    assert joined.endswith("cd")
    assert len(joined) == len("ab") + len("cd")


def test_strjoin_with_empty():
    assert strjoin("", "xyz") == "xyz"
    assert strjoin("xyz", "") == "xyz"


def test_strmapi_applies_function():
    assert strmapi("abc", lambda i, ch: ch.upper()) == "ABC"


def test_strmapi_passes_indices_in_order():
    seen = []
    strmapi("abcd", lambda i, ch: seen.append(i) or ch)
    assert seen == list(range(len("abcd")))


def test_striteri_replaces_and_keeps():
    result = striteri("abcd", lambda i, ch: ch.upper() if i % 2 == 0 else None)
    assert result == "AbCd"


def test_striteri_visits_every_character():
    visited = []
    result = striteri("xyz", lambda i, ch: visited.append((i, ch)))
    assert visited == list(enumerate("xyz"))
    assert result == "xyz"


def test_strncmp_equal_strings():
    assert strncmp("abc", "abc", 3) == 0


def test_strncmp_limits_comparison():
    assert strncmp("abc", "abd", 2) == 0
    assert strncmp("abc", "abd", 0) == 0


def test_strncmp_difference_of_codes():
    assert strncmp("abc", "abd", 3) == ord("c") - ord("d")
    assert strncmp("abd", "abc", 3) > 0


def test_strncmp_shorter_first_string():
    assert strncmp("ab", "abc", 5) == -ord("c")


def test_strncmp_shorter_second_string():
    assert strncmp("abc", "ab", 5) == ord("c")


def test_strncmp_rejects_negative_limit():
    with pytest.raises(ValueError):
        strncmp("a", "a", -1)


def test_strcmp_equal():
    assert strcmp("hello", "hello") == 0
    assert strcmp("", "") == 0


def test_strcmp_difference_of_codes():
    assert strcmp("a", "b") == ord("a") - ord("b")


@pytest.mark.parametrize(
    "first, second",
    [("apple", "apricot"), ("abc", "ab"), ("", "x"), ("zeta", "alpha")],
)
def test_strcmp_is_antisymmetric(first, second):
    assert strcmp(first, second) == -strcmp(second, first)
    assert strcmp(first, second) != 0


def test_strcmp_agrees_with_unbounded_strncmp():
    for first, second in [("abc", "abd"), ("ab", "abc"), ("same", "same")]:
        assert strcmp(first, second) == strncmp(first, second, 1000)