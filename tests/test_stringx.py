import pytest

from bytekit import stringx
from bytekit.stringx import DecodeRuneError

PAD_CASES = [
    ("", "-", 4, "----", "    ", "----", "    ", "----", "    "),
    ("abc", "-", 0, "abc", "abc", "abc", "abc", "abc", "abc"),
    ("abc", "-", 2, "abc", "abc", "abc", "abc", "abc", "abc"),
    ("abc", "-", 4, "-abc", " abc", "abc-", "abc ", "abc-", "abc "),
    ("abc", "-", 5, "--abc", "  abc", "abc--", "abc  ", "-abc-", " abc "),
    ("abc", "-", 6, "---abc", "   abc", "abc---", "abc   ", "-abc--", " abc  "),
    ("abc", "-", 7, "----abc", "    abc", "abc----", "abc    ", "--abc--", "  abc  "),
    ("abcd", "-", 7, "---abcd", "   abcd", "abcd---", "abcd   ", "-abcd--", " abcd  "),
]


@pytest.mark.parametrize(
    "text,ch,size,left,left_sp,right,right_sp,center,center_sp", PAD_CASES
)
def test_pad(text, ch, size, left, left_sp, right, right_sp, center, center_sp):
    assert stringx.pad_left_char(text, size, ch) == left
    assert stringx.pad_left_space(text, size) == left_sp
    assert stringx.pad_right_char(text, size, ch) == right
    assert stringx.pad_right_space(text, size) == right_sp
    assert stringx.pad_center_char(text, size, ch) == center
    assert stringx.pad_center_space(text, size) == center_sp


def test_pad_counts_code_points():
    assert stringx.pad_left_char("英文", 4, "*") == "**英文"


def test_remove():
    assert stringx.remove_char("", "h") == ""
    assert stringx.remove_char("zh英文hunh排", "h") == "z英文un排"
    assert stringx.remove_char("zh英文hun文排", "文") == "zh英hun排"

    assert stringx.remove_string("", "文hun") == ""
    assert stringx.remove_string("zh英文hun排", "") == "zh英文hun排"
    assert stringx.remove_string("zh英文hun排", "文hun") == "zh英排"


def test_repeat():
    assert stringx.repeat_char("-", 0) == ""
    assert stringx.repeat_char("-", 4) == "----"
    assert stringx.repeat_char(" ", 3) == "   "


def test_repeat_rejects_multi_char():
    with pytest.raises(ValueError):
        stringx.repeat_char("ab", 2)


def test_rotate():
    assert stringx.rotate("", 2) == ""
    assert stringx.rotate("abc", 0) == "abc"
    assert stringx.rotate("abc", 3) == "abc"
    assert stringx.rotate("abc", 6) == "abc"
    assert stringx.rotate("abc", 1) == "cab"
    assert stringx.rotate("abc", -1) == "bca"


@pytest.mark.parametrize(
    "text,expected",
    [
        ("", ""),
        ("abc", "cba"),
        ("a", "a"),
        ("çınar", "ranıç"),
        ("    yağmur", "rumğay    "),
        ("επαγγελματίες", "ςείταμλεγγαπε"),
        ("X", "X"),
        ("\u0301b", "b\u0301"),
        ("😎⚽", "⚽😎"),
        ("Les Mise\u0301rables", "selbar\u0301esiM seL"),
        ("ab\u0301cde", "edc\u0301ba"),
        (
            "The quick bròwn 狐 jumped over the lazy 犬",
            "犬 yzal eht revo depmuj 狐 nwòrb kciuq ehT",
        ),
    ],
)
def test_reverse(text, expected):
    assert stringx.must_reverse(text) == expected
    assert stringx.reverse(text) == expected


def test_reverse_invalid_bytes():
    with pytest.raises(DecodeRuneError):
        stringx.reverse(bytes([128, 128, 128, 128, 0]))


def test_must_reverse_invalid_raises():
    with pytest.raises(DecodeRuneError):
        stringx.must_reverse(bytes([128, 128, 128, 128, 0]))


def test_reverse_valid_bytes():
    assert stringx.reverse("排文".encode("utf-8")) == "文排"


@pytest.mark.parametrize(
    "text,start,end,expected",
    [
        ("", 0, 100, ""),
        ("facgbheidjk", 3, 9, "gbheid"),
        ("facgbheidjk", -50, 100, "facgbheidjk"),
        ("facgbheidjk", -3, len("facgbheidjk"), "djk"),
        ("facgbheidjk", -3, -1, "dj"),
        ("zh英文hun排", 2, 5, "英文h"),
        ("zh英文hun排", 2, -1, "英文hun"),
        ("zh英文hun排", -100, -1, "zh英文hun"),
        ("zh英文hun排", -100, -90, ""),
        ("zh英文hun排", -10, -90, ""),
    ],
)
def test_sub(text, start, end, expected):
    assert stringx.sub(text, start, end) == expected


@pytest.mark.parametrize(
    "text,start,expected",
    [
        ("", 0, ""),
        ("", 2, ""),
        ("facgbheidjk", 3, "gbheidjk"),
        ("facgbheidjk", -50, "facgbheidjk"),
        ("facgbheidjk", -3, "djk"),
        ("zh英文hun排", 3, "文hun排"),
    ],
)
def test_sub_start(text, start, expected):
    assert stringx.sub_start(text, start) == expected


def test_contains_any_substrings():
    assert stringx.contains_any_substrings("abcdefg", ["a", "b"]) is True
    assert stringx.contains_any_substrings("abcdefg", ["a", "z"]) is True
    assert stringx.contains_any_substrings("abcdefg", ["ac", "z"]) is False
    assert stringx.contains_any_substrings("abcdefg", ["x", "z"]) is False


@pytest.mark.parametrize(
    "text,expected",
    [
        ("", ""),
        ("facgbheidjk", "abcdefghijk"),
        ("尝试中文", "中尝文试"),
        ("zh英文hun排", "hhnuz排文英"),
    ],
)
def test_shuffle(text, expected):
    assert "".join(sorted(stringx.shuffle(text))) == expected


def test_is():
    assert stringx.is_numeric(" bob ") is False
    assert stringx.is_numeric("123") is True

    assert stringx.is_alpha("123") is False
    assert stringx.is_alpha("Voa") is True
    assert stringx.is_alpha("bròwn") is True

    assert stringx.is_alphanumeric("Voa") is True
    assert stringx.is_alphanumeric("123") is True
    assert stringx.is_alphanumeric("v123oa") is True
    assert stringx.is_alphanumeric("v123oa,") is False


def test_is_numeric_rejects_decimal_point():
    assert stringx.is_numeric("1.5") is False