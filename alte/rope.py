"""A rope of text: a binary tree of string leaves indexed by character."""

from __future__ import annotations

from collections.abc import Iterator

MAX_LEAF_BYTES = 64
"""Largest UTF-8 size of a leaf produced when a rope is built from text."""

LEAF_SPLIT_THRESHOLD = MAX_LEAF_BYTES * 2
"""Character count above which a leaf grown by insertion is rebuilt."""


class _Node:
    __slots__ = ("text", "left", "right", "weight")

    def __init__(
        self,
        text: str = "",
        left: _Node | None = None,
        right: _Node | None = None,
    ) -> None:
        self.text = text
        self.left = left
        self.right = right
        self.weight = 0

    @property
    def is_leaf(self) -> bool:
        return self.left is None and self.right is None


def _build(text: str) -> _Node | None:
    if not text:
        return None
    if len(text.encode("utf-8")) <= MAX_LEAF_BYTES:
        leaf = _Node(text)
        leaf.weight = len(text)
        return leaf
    mid = len(text) // 2
    left = _build(text[:mid])
    right = _build(text[mid:])
    node = _Node(left=left, right=right)
    node.weight = _length(left)
    return node


def _length(node: _Node | None) -> int:
    if node is None:
        return 0
    if node.is_leaf:
        return node.weight
    return _length(node.left) + _length(node.right)


def _leaves(node: _Node | None) -> Iterator[str]:
    if node is None:
        return
    if node.is_leaf:
        yield node.text
    else:
        yield from _leaves(node.left)
        yield from _leaves(node.right)


def _insert(node: _Node | None, index: int, text: str) -> _Node | None:
    if node is None:
        return _build(text) if index == 0 else None
    if node.is_leaf:
        if index > node.weight:
            raise IndexError("insert index out of bounds for leaf")
        combined = node.text[:index] + text + node.text[index:]
        if len(combined) <= LEAF_SPLIT_THRESHOLD:
            node.text = combined
            node.weight = len(combined)
            return node
        return _build(combined)
    if index <= node.weight:
        node.left = _insert(node.left, index, text)
        node.weight = _length(node.left)
    else:
        node.right = _insert(node.right, index - node.weight, text)
    return node


def _delete(node: _Node | None, index: int, count: int) -> tuple[_Node | None, int]:
    """Delete up to ``count`` characters from ``index``; return the new node and what is left to delete."""
    if node is None or count == 0:
        return node, count

    if node.is_leaf:
        if index < node.weight:
            here = min(count, node.weight - index)
            node.text = node.text[:index] + node.text[index + here:]
            node.weight = len(node.text)
            count -= here
        if not node.text:
            return None, count
        return node, count

    left_len = _length(node.left)
    if index < left_len:
        node.left, count = _delete(node.left, index, count)
        node.weight = _length(node.left)
        if count > 0:
            node.right, count = _delete(node.right, 0, count)
    else:
        node.right, count = _delete(node.right, index - left_len, count)

    if node.left is None:
        return node.right, count
    if node.right is None:
        return node.left, count
    node.weight = _length(node.left)
    return node, count


class Rope:
    """Editable text stored as a tree of small string pieces."""

    def __init__(self, text: str = "") -> None:
        self._root = _build(text)

    def __len__(self) -> int:
        return _length(self._root)

    def __str__(self) -> str:
        return "".join(_leaves(self._root))

    def __repr__(self) -> str:
        return f"Rope({str(self)!r})"

    def insert(self, index: int, text: str) -> None:
        """Insert ``text`` before the character at ``index``."""
        if not text:
            return
        if index < 0 or index > len(self):
            raise IndexError("Character index out of range in insert.")
        self._root = _insert(self._root, index, text)

    def remove(self, index: int, count: int) -> None:
        """Remove ``count`` characters starting at ``index``."""
        if count < 0:
            raise ValueError("count must not be negative")
        if count == 0:
            return
        length = len(self)
        if index < 0 or index >= length:
            raise IndexError("Deletion start index is out of bounds.")
        if index + count > length:
            raise IndexError("Deletion range (index + count) exceeds rope length.")
        self._root, _ = _delete(self._root, index, count)

    def character_at(self, index: int) -> str:
        """Return the character at ``index``."""
        if index < 0 or index >= len(self):
            raise IndexError("Character index out of range in character_at.")
        node = self._root
        while node is not None and not node.is_leaf:
            if index < node.weight:
                node = node.left
            else:
                index -= node.weight
                node = node.right
        if node is None:
            raise IndexError("Character index out of range in character_at.")
        return node.text[index]