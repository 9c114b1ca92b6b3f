from lcsubstring.utils import elapsed_ms, truncate


def test_truncate():
    assert truncate("abcdef", 3) == "abc..."
    assert truncate("abc", 3) == "abc"
    assert truncate("abcdef", 0) == "abcdef"
    assert truncate("abcdef", None) == "abcdef"


def test_elapsed_ms():
    assert elapsed_ms(1.0, 1.25) == 250
    assert elapsed_ms(2.0, 2.0) == 0
