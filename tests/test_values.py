import pytest

from drtscen.model.values import (
    JSONBytesFromString,
    JSONBytesFromTree,
    JSONCheckBigInt,
    JSONCheckBytes,
    JSONCheckUint64,
    JSONCheckValueList,
    JSONUint64,
    JSONValueList,
    json_big_int_zero,
    json_bytes_empty,
    json_bytes_from_tree_values,
    json_check_big_int_unspecified,
    json_check_bytes_reconstructed,
    json_check_bytes_star,
    json_check_bytes_unspecified,
    json_check_uint64_unspecified,
    json_check_value_list_star,
    json_check_value_list_unspecified,
    json_uint64_zero,
)


def test_bytes_empty_is_unspecified():
    empty = json_bytes_empty()
    assert empty.unspecified is True
    assert empty.value == b""
    assert empty.original == ""


def test_big_int_and_uint64_zero():
    bi = json_big_int_zero()
    assert (bi.value, bi.original, bi.unspecified) == (0, "", True)
    u = json_uint64_zero()
    assert (u.value, u.original, u.unspecified) == (0, "", True)
    assert u.original_empty() is True


def test_uint64_original_empty_false_when_text_present():
    assert JSONUint64(value=5, original="5").original_empty() is False


def test_bytes_from_tree_original_empty():
    assert JSONBytesFromTree(value=b"", original="").original_empty() is True
    assert JSONBytesFromTree(value=b"a", original="str:a").original_empty() is False
    assert JSONBytesFromTree(value=b"a", original=["str:a"]).original_empty() is False
    assert JSONBytesFromTree().original_empty() is False


def test_bytes_from_tree_values_preserves_order():
    items = [JSONBytesFromTree(value=b"x"), JSONBytesFromTree(value=b"yz")]
    assert json_bytes_from_tree_values(items) == [b"x", b"yz"]
    assert json_bytes_from_tree_values([]) == []


def test_value_list():
    empty = JSONValueList()
    assert empty.is_unspecified() is True
    assert empty.to_values() == []
    lst = JSONValueList(values=[JSONBytesFromString(b"a", "str:a"), JSONBytesFromString(b"b", "str:b")])
    assert lst.is_unspecified() is False
    assert lst.to_values() == [b"a", b"b"]


def test_check_bytes_unspecified():
    cb = json_check_bytes_unspecified()
    assert cb.is_unspecified() is True
    assert cb.original_empty() is True
    assert cb.check(b"") is True
    assert cb.check(b"x") is False


def test_check_bytes_star_accepts_anything():
    cb = json_check_bytes_star()
    assert cb.original == "*"
    assert cb.is_unspecified() is False
    assert cb.original_empty() is False
    assert cb.check(b"anything") is True
    assert cb.check(b"") is True


def test_check_bytes_reconstructed():
    cb = json_check_bytes_reconstructed(b"\x01\x02", "0x0102")
    assert cb.original == "0x0102"
    assert cb.check(b"\x01\x02") is True
    assert cb.check(b"\x01") is False


def test_check_bytes_original_tree_not_empty():
    cb = JSONCheckBytes(value=b"ab", original=["str:a", "str:b"])
    assert cb.original_empty() is False
    assert cb.check(b"ab") is True


def test_check_big_int():
    unspecified = json_check_big_int_unspecified()
    assert unspecified.is_unspecified() is True
    assert unspecified.check(0) is True
    assert unspecified.check(1) is False
    star = JSONCheckBigInt(value=None, is_star=True, original="*")
    assert star.check(-12345) is True
    explicit = JSONCheckBigInt(value=-1, original="-1")
    assert explicit.check(-1) is True
    assert explicit.check(255) is False


def test_check_uint64():
    unspecified = json_check_uint64_unspecified()
    assert unspecified.is_unspecified() is True
    assert unspecified.check(0) is True
    explicit = JSONCheckUint64(value=7, original="7")
    assert explicit.check(7) is True
    assert explicit.check(8) is False
    star = JSONCheckUint64(is_star=True, original="*")
    assert star.check(99) is True


@pytest.mark.parametrize("value", [1, 2, 100])
def test_check_bool_positive_means_true(value):
    cu = JSONCheckUint64(value=value)
    assert cu.check_bool(True) is True
    assert cu.check_bool(False) is False


def test_check_bool_zero_and_star():
    zero = JSONCheckUint64(value=0)
    assert zero.check_bool(False) is True
    assert zero.check_bool(True) is False
    star = JSONCheckUint64(is_star=True)
    assert star.check_bool(True) and star.check_bool(False)


def test_check_value_list_constructors():
    unspecified = json_check_value_list_unspecified()
    assert unspecified.is_unspecified() is True
    assert unspecified.check_list([]) is True
    assert unspecified.check_list([b"a"]) is False
    star = json_check_value_list_star()
    assert star.is_unspecified() is False
    assert star.check_list([b"a", b"b"]) is True


def test_check_value_list_elementwise():
    lst = JSONCheckValueList(
        values=[json_check_bytes_reconstructed(b"a", "str:a"), json_check_bytes_star()]
    )
    assert lst.check_list([b"a", b"whatever"]) is True
    assert lst.check_list([b"b", b"whatever"]) is False
    assert lst.check_list([b"a"]) is False