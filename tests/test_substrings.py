import pytest

from pushswap.substrings import (
    strjoin,
    strlcat,
    strlcpy,
    strmapi,
    striteri,
    strtrim,
    substr,
)


@pytest.mark.parametrize("cut", range(0, 8))
def test_substr_pieces_join_back(cut):
    text = "abcdefg"
    assert strjoin(substr(text, 0, cut), substr(text, cut, len(text))) == text


def test_substr_start_past_end_is_empty():
    assert substr("abc", 3, 5) == ""
    assert substr("abc", 10, 1) == ""


def test_substr_length_is_bounded():
    result = substr("abcdef", 2, 100)
    assert len(result) == 4
    assert "abcdef".endswith(result)


def test_substr_negative_start_raises():
    with pytest.raises(ValueError):
        substr("abc", -1, 2)


def test_strjoin_length_and_order():
    result = strjoin("push", "swap")
    assert len(result) == len("push") + len("swap")
    assert result.startswith("push")
    assert result.endswith("swap")


def test_strjoin_with_empty():
    assert strjoin("", "abc") == "abc"
    assert strjoin("abc", "") == "abc"


def test_strtrim_example():
    assert strtrim("xxabcxx", "x") == "abc"


def test_strtrim_invariants():
    text = " -- hello world --  "
    charset = " -"
    result = strtrim(text, charset)
    assert result in text
    assert result[0] not in charset
    assert result[-1] not in charset


def test_strtrim_everything_removed():
    assert strtrim("aaaa", "a") == ""


def test_strtrim_empty_charset_keeps_text():
    assert strtrim("  a  ", "") == "  a  "


def test_strlcpy_truncates_and_reports_source_length():
    source = "abcdefgh"
    copied, length = strlcpy(source, 4)
    assert length == len(source)
    assert len(copied) == 4 - 1
    assert source.startswith(copied)


def test_strlcpy_fits_whole():
    source = "abc"
    copied, length = strlcpy(source, 10)
    assert copied == source
    assert length == len(source)


def test_strlcpy_size_zero_copies_nothing():
    copied, length = strlcpy("abc", 0)
    assert copied == ""
    assert length == len("abc")


def test_strlcat_appends_within_room():
    destination, source = "ab", "cdef"
    result, length = strlcat(destination, source, 5)
    assert length == len(destination) + len(source)
    assert len(result) == 5 - 1
    assert result.startswith(destination)
    assert strjoin(destination, source).startswith(result)


def test_strlcat_size_not_above_destination():
    destination, source = "abcd", "xyz"
    result, length = strlcat(destination, source, 3)
    assert result == destination
    assert length == len(source) + 3


def test_strlcat_enough_room():
    result, length = strlcat("ab", "cd", 100)
    assert result == strjoin("ab", "cd")
    assert length == len(result)


def test_strmapi_passes_indices():
    seen = []

    def record(index, char):
        seen.append(index)
        return char.upper()

    result = strmapi("abc", record)
    assert result == "ABC"
    assert seen == [0, 1, 2]


def test_striteri_modifies_in_place():
    chars = list("abcd")
    striteri(chars, lambda index, char: char.upper() if index % 2 == 0 else None)
    assert chars == ["A", "b", "C", "d"]