import pytest

from ftkit.strutil import (
    array_len,
    count_words,
    strcat,
    strchr,
    strcmp,
    strequ,
    striter,
    striteri,
    strjoin,
    strlcat,
    strlen,
    strmap,
    strmapi,
    strncat,
)


@pytest.mark.parametrize(
    "text", ["", "   ", "hello", "  hello  world ", "a b c", "one  two   three"]
)
def test_count_words_matches_split(text):
    assert count_words(text, " ") == len(text.split())


def test_count_words_other_separator():
    assert count_words("a,,b,c,", ",") == len([w for w in "a,,b,c,".split(",") if w])


def test_count_words_rejects_long_separator():
    with pytest.raises(ValueError):
        count_words("abc", "ab")


def test_strlen():
    assert strlen("hello") == len("hello")
    assert strlen(None) == 0
    assert strlen("") == 0


def test_strcat_and_strjoin():
    assert strcat("foo", "bar") == "foobar"
    assert strjoin("foo", "bar") == strcat("foo", "bar")
    assert strjoin(None, "bar") is None
    assert strjoin("foo", None) is None


@pytest.mark.parametrize("n", [0, 1, 3, 10])
def test_strncat_prefix(n):
    result = strncat("ab", "cdef", n)
    assert result.startswith("ab")
    assert result[2:] == "cdef"[:n]


def test_strncat_negative():
    with pytest.raises(ValueError):
        strncat("a", "b", -1)


def test_strchr():
    assert strchr("hello", "l") == "hello".index("l")
    assert strchr("hello", "z") is None
    assert strchr("hello", "\0") == len("hello")


def test_strchr_rejects_long_needle():
    with pytest.raises(ValueError):
        strchr("hello", "he")


@pytest.mark.parametrize(
    "a, b", [("abc", "abd"), ("abc", "ab"), ("", "x"), ("same", "same"), ("Z", "a")]
)
def test_strcmp_antisymmetric_and_sign(a, b):
    assert strcmp(a, b) == -strcmp(b, a)
    expected_sign = (a > b) - (a < b)
    result = strcmp(a, b)
    assert (result > 0) - (result < 0) == expected_sign


def test_strcmp_prefix_gives_char_code():
    assert strcmp("abc", "ab") == ord("c")


def test_strequ():
    assert strequ("abc", "abc") is True
    assert strequ("abc", "abd") is False
    assert strequ(None, "abc") is False


def test_striter_visits_in_order():
    seen = []
    striter("xyz", seen.append)
    assert "".join(seen) == "xyz"


def test_striteri_passes_indices():
    seen = []
    striteri("xyz", lambda i, ch: seen.append((i, ch)))
    assert seen == list(enumerate("xyz"))


def test_striter_without_function_does_nothing():
    seen = []
    striter(None, seen.append)
    assert seen == []


def test_strmap_and_strmapi():
    assert strmap("abc", str.upper) == "ABC"
    assert strmapi("abc", lambda i, ch: ch if i % 2 else ch.upper()) == "AbC"
    assert strmap(None, str.upper) is None
    assert strmapi("abc", None) is None


def test_strlcat_enough_room():
    text, total = strlcat("foo", "bar", 100)
    assert text == "foo" + "bar"
    assert total == len("foo") + len("bar")


def test_strlcat_truncates():
    text, total = strlcat("foo", "barbaz", 6)
    assert text == "foo" + "ba"
    assert len(text) == 6 - 1
    assert total == len("foo") + len("barbaz")


def test_strlcat_size_below_dst():
    text, total = strlcat("foobar", "xy", 2)
    assert text == "foobar"
    assert total == len("xy") + 2


def test_strlcat_zero_size():
    text, total = strlcat("", "abc", 0)
    assert text == ""
    assert total == len("abc")


def test_array_len():
    assert array_len(["a", "b", "c"]) == 3
    assert array_len(["a", None, "c"]) == 1
    assert array_len([]) == 0