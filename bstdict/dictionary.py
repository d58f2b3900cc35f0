"""An ordered dictionary backed by an unbalanced binary search tree.

Besides the usual mapping operations the dictionary carries a built-in
cursor ("current") that can walk the keys forwards or backwards.
"""

from __future__ import annotations

from typing import Any, Iterator, Optional


class _Node:
    __slots__ = ("key", "value", "parent", "left", "right")

    def __init__(self, key: Any, value: Any, parent: Optional[_Node] = None) -> None:
        self.key = key
        self.value = value
        self.parent = parent
        self.left: Optional[_Node] = None
        self.right: Optional[_Node] = None


def _leftmost(node: _Node) -> _Node:
    while node.left is not None:
        node = node.left
    return node


def _rightmost(node: _Node) -> _Node:
    while node.right is not None:
        node = node.right
    return node


def _successor(node: _Node) -> Optional[_Node]:
    if node.right is not None:
        return _leftmost(node.right)
    parent = node.parent
    while parent is not None and node is parent.right:
        node, parent = parent, parent.parent
    return parent


def _predecessor(node: _Node) -> Optional[_Node]:
    if node.left is not None:
        return _rightmost(node.left)
    parent = node.parent
    while parent is not None and node is parent.left:
        node, parent = parent, parent.parent
    return parent


class Dictionary:
    """Mapping of ordered keys to values, stored in a binary search tree."""

    def __init__(self, other: Optional[Dictionary] = None) -> None:
        self._root: Optional[_Node] = None
        self._current: Optional[_Node] = None
        self._size = 0
        if other is not None:
            self._copy_tree(other)

    # -- internal helpers -------------------------------------------------

    def _copy_tree(self, other: Dictionary) -> None:
        """Copy the shape and contents of another tree into this empty one."""
        if other._root is None:
            return
        src_root = other._root
        self._root = _Node(src_root.key, src_root.value)
        stack = [(src_root, self._root)]
        while stack:
            src, dst = stack.pop()
            for side in ("left", "right"):
                child = getattr(src, side)
                if child is not None:
                    clone = _Node(child.key, child.value, dst)
                    setattr(dst, side, clone)
                    stack.append((child, clone))
        self._size = other._size

    def _search(self, key: Any) -> Optional[_Node]:
        node = self._root
        while node is not None and key != node.key:
            node = node.left if key < node.key else node.right
        return node

    def _transplant(self, u: _Node, v: Optional[_Node]) -> None:
        if u.parent is None:
            self._root = v
        elif u is u.parent.left:
            u.parent.left = v
        else:
            u.parent.right = v
        if v is not None:
            v.parent = u.parent

    def _in_order(self) -> Iterator[_Node]:
        if self._root is None:
            return
        node: Optional[_Node] = _leftmost(self._root)
        while node is not None:
            following = _successor(node)
            yield node
            node = following

    def _pre_order(self) -> Iterator[_Node]:
        stack = [self._root] if self._root is not None else []
        while stack:
            node = stack.pop()
            yield node
            if node.right is not None:
                stack.append(node.right)
            if node.left is not None:
                stack.append(node.left)

    def _require_current(self) -> _Node:
        if self._current is None:
            raise LookupError("no current pair")
        return self._current

    # -- mapping protocol -------------------------------------------------

    def __len__(self) -> int:
        return self._size

    def __contains__(self, key: Any) -> bool:
        return self._search(key) is not None

    def __getitem__(self, key: Any) -> Any:
        node = self._search(key)
        if node is None:
            raise KeyError(key)
        return node.value

    def __setitem__(self, key: Any, value: Any) -> None:
        parent: Optional[_Node] = None
        node = self._root
        while node is not None:
            if key == node.key:
                node.value = value
                return
            parent = node
            node = node.left if key < node.key else node.right
        fresh = _Node(key, value, parent)
        if parent is None:
            self._root = fresh
        elif key < parent.key:
            parent.left = fresh
        else:
            parent.right = fresh
        self._size += 1

    def __delitem__(self, key: Any) -> None:
        z = self._search(key)
        if z is None:
            raise KeyError(key)
        if z.left is None:
            self._transplant(z, z.right)
        elif z.right is None:
            self._transplant(z, z.left)
        else:
            y = _leftmost(z.right)
            if y.parent is not z:
                self._transplant(y, y.right)
                y.right = z.right
                y.right.parent = y
            self._transplant(z, y)
            y.left = z.left
            y.left.parent = y
        if z is self._current:
            self._current = None
        self._size -= 1

    def __iter__(self) -> Iterator[Any]:
        return (node.key for node in self._in_order())

    def __reversed__(self) -> Iterator[Any]:
        node = _rightmost(self._root) if self._root is not None else None
        while node is not None:
            preceding = _predecessor(node)
            yield node.key
            node = preceding

    def items(self) -> Iterator[tuple]:
        """Yield (key, value) pairs in key order."""
        return ((node.key, node.value) for node in self._in_order())

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Dictionary):
            return NotImplemented
        return len(self) == len(other) and list(self.items()) == list(other.items())

    __hash__ = None  # type: ignore[assignment]

    def __str__(self) -> str:
        return "".join(f"{key} : {value}\n" for key, value in self.items())

    def __repr__(self) -> str:
        pairs = ", ".join(f"{key!r}: {value!r}" for key, value in self.items())
        return f"Dictionary({{{pairs}}})"

    def __copy__(self) -> Dictionary:
        return Dictionary(self)

    def clear(self) -> None:
        """Remove every pair."""
        self._root = None
        self._current = None
        self._size = 0

    def pre_string(self) -> str:
        """Return the keys in pre-order, each followed by a newline."""
        return "".join(f"{node.key}\n" for node in self._pre_order())

    # -- cursor -----------------------------------------------------------

    def has_current(self) -> bool:
        return self._current is not None

    def current_key(self) -> Any:
        return self._require_current().key

    def current_value(self) -> Any:
        return self._require_current().value

    def set_current_value(self, value: Any) -> None:
        self._require_current().value = value

    def begin(self) -> None:
        """Place the cursor on the smallest key, if there is one."""
        if self._root is not None:
            self._current = _leftmost(self._root)

    def end(self) -> None:
        """Place the cursor on the largest key, if there is one."""
        if self._root is not None:
            self._current = _rightmost(self._root)

    def next(self) -> None:
        """Advance the cursor; past the last key it becomes undefined."""
        if self._current is not None:
            self._current = _successor(self._current)

    def prev(self) -> None:
        """Move the cursor back; before the first key it becomes undefined."""
        if self._current is not None:
            self._current = _predecessor(self._current)