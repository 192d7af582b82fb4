import pytest

from eulerkit.text import atoi, itoa, pow10, split, strncmp, strnstr, strtrim, substr


@pytest.mark.parametrize("n", [0, 1, -1, 7, 42, -42, 123456, 2147483647])
def test_atoi_itoa_round_trip(n):
    assert atoi(itoa(n)) == n


def test_atoi_skips_control_whitespace_and_sign():
    assert atoi("\t\n\v\f\r+17") == 17
    assert atoi("\t-17") == -17


def test_atoi_does_not_skip_blank():
    assert atoi(" 17") == 0


def test_atoi_stops_at_non_digit():
    assert atoi("12abc34") == 12
    assert atoi("--5") == 0
    assert atoi("") == 0


def test_atoi_wraps_like_int():
    assert atoi("2147483648") == atoi("-2147483648")
    assert atoi("-2147483648") == -(2**31)


def test_itoa_int_min():
    assert itoa(-(2**31)) == "-2147483648"


def test_itoa_rejects_non_int():
    with pytest.raises(TypeError):
        itoa("5")


def test_split_drops_empty_fields():
    assert split(",,a,,bc,", ",") == ["a", "bc"]
    assert split("", ",") == []
    assert split(",,,", ",") == []


def test_split_join_round_trip():
    words = ["alpha", "beta", "gamma"]
    assert split(" ".join(words), " ") == words


def test_split_rejects_multi_char_separator():
    with pytest.raises(ValueError):
        split("a,b", ",,")


def test_strtrim_both_ends():
    assert strtrim("xxhixyx", "xy") == "hi"
    assert strtrim("xyxy", "xy") == ""
    assert strtrim("  keep  ", "") == "  keep  "


def test_substr_basic_and_bounds():
    assert substr("abcdef", 2, 3) == "cde"
    assert substr("abcdef", 4, 10) == "ef"
    assert substr("abcdef", 6, 2) == ""
    assert substr("abcdef", 100, 2) == ""


def test_substr_length_invariant():
    text = "hello world"
    for start in range(len(text) + 2):
        for length in range(len(text) + 2):
            part = substr(text, start, length)
            assert len(part) <= length
            assert part in text


def test_substr_negative_raises():
    with pytest.raises(ValueError):
        substr("abc", -1, 2)


def test_strnstr_finds_within_length():
    assert strnstr("lorem ipsum", "ipsum", 11) == 6
    assert strnstr("lorem ipsum", "ipsum", 10) is None
    assert strnstr("lorem", "", 0) == 0
    assert strnstr("lorem", "x", 5) is None


def test_strncmp_equal_and_prefix():
    assert strncmp("abc", "abc", 3) == 0
    assert strncmp("abcx", "abcy", 3) == 0
    assert strncmp("abc", "abd", 0) == 0


def test_strncmp_sign_and_difference():
    assert strncmp("abc", "abd", 3) == ord("c") - ord("d")
    assert strncmp("ab", "abc", 5) == -ord("c")
    assert strncmp(b"\xff", b"\x01", 1) == 0xFF - 0x01


def test_strncmp_antisymmetric():
    pairs = [("apple", "apply"), ("a", ""), ("zeta", "alpha")]
    for a, b in pairs:
        assert strncmp(a, b, 10) == -strncmp(b, a, 10)


@pytest.mark.parametrize("exponent", range(0, 10))
def test_pow10_digits(exponent):
    assert itoa(pow10(exponent)) == "1" + "0" * exponent


def test_pow10_wraps_like_int():
    assert pow10(10) == 1410065408


def test_pow10_negative_raises():
    with pytest.raises(ValueError):
        pow10(-1)