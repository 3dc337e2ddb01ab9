"""Encode a :class:`LinkedList` as JSON, YAML and MessagePack, and decode it back.

A list is stored as nested tagged variants: an empty list is the string
``"Nil"`` and a node is ``{"Node": {"data": ..., "next": ...}}``. In
MessagePack a node's fields are stored as an array ``[data, next]``.
"""

from __future__ import annotations

import json
import sys
from pathlib import Path
from typing import Any, Optional, Sequence

import msgpack
import yaml

from zerokit.linked_list import LinkedList

_NIL = "Nil"
_NODE = "Node"


def _build(items: list) -> LinkedList:
    lst = LinkedList()
    for data in reversed(items):
        lst = lst.cons(data)
    return lst


def _to_tagged(lst: LinkedList) -> Any:
    node: Any = _NIL
    for data in reversed(list(lst)):
        node = {_NODE: {"data": data, "next": node}}
    return node


def _from_tagged(obj: Any) -> LinkedList:
    items = []
    while obj != _NIL:
        if not (isinstance(obj, dict) and list(obj) == [_NODE]):
            raise ValueError(f"expected a list variant, found {obj!r}")
        fields = obj[_NODE]
        if not (isinstance(fields, dict) and set(fields) == {"data", "next"}):
            raise ValueError(f"malformed node: {fields!r}")
        items.append(fields["data"])
        obj = fields["next"]
    return _build(items)


def _to_packed(lst: LinkedList) -> Any:
    node: Any = _NIL
    for data in reversed(list(lst)):
        node = {_NODE: [data, node]}
    return node


def _from_packed(obj: Any) -> LinkedList:
    items = []
    while obj != _NIL:
        if not (isinstance(obj, dict) and list(obj) == [_NODE]):
            raise ValueError(f"expected a list variant, found {obj!r}")
        fields = obj[_NODE]
        if not (isinstance(fields, (list, tuple)) and len(fields) == 2):
            raise ValueError(f"malformed node: {fields!r}")
        items.append(fields[0])
        obj = fields[1]
    return _build(items)


def to_json(lst: LinkedList) -> str:
    """Return the compact JSON text for ``lst``."""
    return json.dumps(_to_tagged(lst), separators=(",", ":"), ensure_ascii=False)


def from_json(text: str) -> LinkedList:
    """Decode a list from JSON text; raise ValueError on malformed input."""
    return _from_tagged(json.loads(text))


def to_yaml(lst: LinkedList) -> str:
    """Return the YAML document for ``lst``."""
    return yaml.safe_dump(_to_tagged(lst), sort_keys=False, allow_unicode=True)


def from_yaml(text: str) -> LinkedList:
    """Decode a list from a YAML document; raise ValueError on malformed input."""
    try:
        obj = yaml.safe_load(text)
    except yaml.YAMLError as exc:
        raise ValueError(f"invalid YAML: {exc}") from exc
    return _from_tagged(obj)


def to_msgpack(lst: LinkedList) -> bytes:
    """Return the MessagePack encoding of ``lst``."""
    return msgpack.packb(_to_packed(lst), use_bin_type=True)


def from_msgpack(data: bytes) -> LinkedList:
    """Decode a list from MessagePack bytes; raise ValueError on malformed input."""
    try:
        obj = msgpack.unpackb(data, raw=False)
    except (msgpack.ExtraData, msgpack.FormatError, msgpack.StackError) as exc:
        raise ValueError(f"invalid MessagePack data: {exc}") from exc
    return _from_packed(obj)


def write_yaml(lst: LinkedList, path) -> None:
    """Write ``lst`` as YAML to the file at ``path``, replacing it."""
    Path(path).write_text(to_yaml(lst), encoding="utf-8")


def read_yaml(path) -> LinkedList:
    """Read a list from the YAML file at ``path``."""
    return from_yaml(Path(path).read_text(encoding="utf-8"))


def main(argv: Optional[Sequence[str]] = None) -> int:
    """Show each encoding of a sample list and round-trip it through a YAML file."""
    args = list(sys.argv[1:] if argv is None else argv)
    path = Path(args[0]) if args else Path("test.yml")

    lst = LinkedList().cons(1).cons(2).cons(3)

    js = to_json(lst)
    print(f"JSON: {len(js.encode('utf-8'))} bytes")
    print(js)

    yml = to_yaml(lst)
    print(f"YAML: {len(yml.encode('utf-8'))} bytes")
    print(yml)

    packed = to_msgpack(lst)
    print(f"MessagePack: {len(packed)} bytes")

    print(repr(from_json(js)))
    print(repr(from_yaml(yml)))
    print(repr(from_msgpack(packed)))

    try:
        write_yaml(lst, path)
        print(repr(read_yaml(path)))
    except OSError as exc:
        print(f"zerokit-list-codec: {exc}", file=sys.stderr)
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())