"""Namespace- and cardinality-tolerant reads over XML-derived trees.

Trees arrive exactly as the XML converter produced them: keys keep their
namespace prefixes (`ns2:Document`, `Document`) and repeated elements are lists
while single elements are bare objects. Nothing here rewrites the tree; every
lookup resolves the prefix on read, and `as_list` is the one place where the
single-vs-many ambiguity is flattened.
"""

from __future__ import annotations

from collections.abc import Mapping
from typing import Any, Iterator, List, Optional, Sequence, Union

NS_SEPARATOR = ":"
TEXT_KEY = "_"

FieldPath = Union[str, Sequence[str]]


def _local_name(key: str) -> str:
    return key.rsplit(NS_SEPARATOR, 1)[-1]


def _wrap(value: Any) -> Any:
    if isinstance(value, NormalizedTree):
        return value
    if isinstance(value, Mapping):
        return NormalizedTree(value)
    if isinstance(value, (list, tuple)):
        return tuple(_wrap(item) for item in value)
    return value


class NormalizedTree(Mapping):
    """Read-only mapping view; `tree["Document"]` also finds `tree["ns:Document"]`."""

    __slots__ = ("_raw",)

    def __init__(self, raw: Mapping[str, Any]):
        self._raw = raw

    def __getitem__(self, name: str) -> Any:
        if not isinstance(name, str):
            raise KeyError(name)
        if name in self._raw:
            return _wrap(self._raw[name])
        # First match in declared order wins when several prefixes share a local name.
        for key, value in self._raw.items():
            if isinstance(key, str) and _local_name(key) == name:
                return _wrap(value)
        raise KeyError(name)

    def __iter__(self) -> Iterator[str]:
        return iter(self._raw)

    def __len__(self) -> int:
        return len(self._raw)

    def __repr__(self) -> str:
        return f"NormalizedTree({list(self._raw)!r})"

    @property
    def text(self) -> Optional[str]:
        return _scalar(self._raw.get(TEXT_KEY))

    def list(self, name: str) -> List[Any]:
        return as_list(self.get(name))

    def resolve(self, path: FieldPath) -> Any:
        return resolve(self, path)

    def extract(self, path: FieldPath) -> Optional[str]:
        return extract(self, path)


def normalize(raw: Any) -> NormalizedTree:
    if isinstance(raw, NormalizedTree):
        return raw
    if isinstance(raw, Mapping):
        return NormalizedTree(raw)
    return NormalizedTree({})


def as_list(value: Any) -> List[Any]:
    if value is None:
        return []
    if isinstance(value, (list, tuple)):
        return list(value)
    return [value]


def first(value: Any) -> Any:
    items = as_list(value)
    return items[0] if items else None


def _segments(path: FieldPath) -> List[str]:
    if isinstance(path, str):
        return [seg for seg in path.split(".") if seg]
    return list(path)


def resolve(tree: Any, path: FieldPath) -> Any:
    """Walk `path`, taking the first element of any sequence met on the way.

    Returns the resolved node, scalar or sequence; `None` as soon as a segment
    is missing or an intermediate value is not a node.
    """
    node = tree if isinstance(tree, NormalizedTree) else _wrap(tree)
    for segment in _segments(path):
        if isinstance(node, tuple):
            node = first(node)
        if not isinstance(node, NormalizedTree):
            return None
        node = node.get(segment)
        if node is None:
            return None
    return node


def _scalar(value: Any) -> Optional[str]:
    if isinstance(value, str):
        return value
    if isinstance(value, bool):
        return None
    if isinstance(value, (int, float)):
        return str(value)
    return None


def extract(tree: Any, path: FieldPath) -> Optional[str]:
    value = resolve(tree, path)
    if isinstance(value, tuple):
        value = first(value)
    return _scalar(value)
