import pytest

from lamina.lstruct import LStruct, get_attr, hash_string, set_attr, update


def test_hash_of_empty_string_is_offset_basis():
    assert hash_string("") == 14695981039346656037


def test_hash_of_single_letter_matches_fnv1a():
    assert hash_string("a") == 0xAF63DC4C8601EC8C


def test_hash_fits_in_64_bits():
    for key in ["", "abc", "é", "a much longer key with spaces"]:
        assert 0 <= hash_string(key) < 2**64


def test_construct_and_find():
    s = LStruct([("x", 1), ("y", "two")])
    assert s.find("x") == 1
    assert s.find("y") == "two"
    assert s.find("z") is None
    assert len(s) == 2


def test_insert_overwrites_existing_key():
    s = LStruct([("x", 1)])
    s.insert("x", 5)
    assert s.find("x") == 5
    assert len(s) == 1


def test_many_inserts_survive_resizing():
    s = LStruct()
    for i in range(200):
        s.insert(f"k{i}", i)
    assert len(s) == 200
    assert all(s.find(f"k{i}") == i for i in range(200))
    assert sorted(s.to_list()) == sorted((f"k{i}", i) for i in range(200))


def test_iteration_matches_to_list():
    s = LStruct([("a", 1), ("b", 2), ("c", 3)])
    assert list(s) == [key for key, _ in s.to_list()]
    assert "b" in s
    assert "q" not in s


def test_str_format():
    s = LStruct([("a", 1)])
    assert str(s) == "{\na: 1,\n}"
    assert str(LStruct()) == "{\n}"


def test_get_attr_missing_raises():
    with pytest.raises(AttributeError, match="hasn't attribute named missing"):
        get_attr(LStruct(), "missing")


def test_set_attr_then_get_attr():
    s = LStruct()
    set_attr(s, "name", "value")
    assert get_attr(s, "name") == "value"


def test_get_attr_returns_none_value():
    s = LStruct([("empty", None)])
    assert get_attr(s, "empty") is None


def test_update_merges_and_overwrites():
    a = LStruct([("x", 1), ("y", 2)])
    b = LStruct([("y", 20), ("z", 30)])
    update(a, b)
    assert dict(a.to_list()) == {"x": 1, "y": 20, "z": 30}
    assert dict(b.to_list()) == {"y": 20, "z": 30}