import pytest

from zerokit.linked_list import LinkedList
from zerokit.list_codec import (
    from_json,
    from_msgpack,
    from_yaml,
    main,
    read_yaml,
    to_json,
    to_msgpack,
    to_yaml,
    write_yaml,
)


@pytest.fixture
def sample():
    return LinkedList().cons(1).cons(2).cons(3)


def test_json_layout(sample):
    assert to_json(sample) == (
        '{"Node":{"data":3,"next":{"Node":{"data":2,'
        '"next":{"Node":{"data":1,"next":"Nil"}}}}}}'
    )


def test_json_empty_list():
    assert to_json(LinkedList()) == '"Nil"'


def test_json_round_trip(sample):
    assert list(from_json(to_json(sample))) == [3, 2, 1]


def test_yaml_round_trip(sample):
    assert from_yaml(to_yaml(sample)) == sample


def test_msgpack_round_trip(sample):
    assert from_msgpack(to_msgpack(sample)) == sample


def test_round_trip_empty():
    empty = LinkedList()
    assert list(from_json(to_json(empty))) == []
    assert list(from_yaml(to_yaml(empty))) == []
    assert list(from_msgpack(to_msgpack(empty))) == []


def test_round_trip_strings():
    lst = LinkedList().cons("x").cons("y")
    assert list(from_yaml(to_yaml(lst))) == ["y", "x"]
    assert list(from_msgpack(to_msgpack(lst))) == ["y", "x"]


def test_msgpack_smaller_than_json(sample):
    assert len(to_msgpack(sample)) < len(to_json(sample).encode())


def test_from_json_rejects_unknown_variant():
    with pytest.raises(ValueError):
        from_json('{"Cell":{"data":1,"next":"Nil"}}')


def test_from_json_rejects_missing_field():
    with pytest.raises(ValueError):
        from_json('{"Node":{"data":1}}')


def test_from_msgpack_rejects_bad_node():
    with pytest.raises(ValueError):
        from_msgpack(to_json(LinkedList().cons(1)).encode())


def test_yaml_file_round_trip(tmp_path, sample):
    path = tmp_path / "list.yml"
    write_yaml(sample, path)
    assert read_yaml(path) == sample


def test_main_writes_file(tmp_path, capsys):
    path = tmp_path / "out.yml"
    assert main([str(path)]) == 0
    assert list(read_yaml(path)) == [3, 2, 1]
    out = capsys.readouterr().out
    assert out.splitlines()[1] == to_json(LinkedList().cons(1).cons(2).cons(3))