"""In-memory RecordStore backed by an unbalanced binary search tree.

Events and tickets share one tree, ordered by their composite key with
plain string comparison. Nothing is rebalanced, so walks are written with
explicit stacks instead of recursion: keys inserted in ascending order
produce a tree as deep as it is large.
"""

from collections.abc import Iterator

from venue.domain import Record, RecordKind, Ticket
from venue.stores.interfaces import RecordStore


class _Node:
    __slots__ = ("key", "record", "left", "right")

    def __init__(self, key: str, record: Record) -> None:
        self.key = key
        self.record = record
        self.left: _Node | None = None
        self.right: _Node | None = None


class BinarySearchTreeStore(RecordStore):
    """Unbalanced BST keyed by composite record keys."""

    def __init__(self) -> None:
        self._root: _Node | None = None
        self._size = 0

    def __len__(self) -> int:
        return self._size

    def insert(self, key: str, record: Record) -> None:
        if self._root is None:
            self._root = _Node(key, record)
            self._size += 1
            return

        node = self._root
        while True:
            if key < node.key:
                if node.left is None:
                    node.left = _Node(key, record)
                    break
                node = node.left
            elif key > node.key:
                if node.right is None:
                    node.right = _Node(key, record)
                    break
                node = node.right
            else:
                # Existing record wins; callers check with search() first.
                return
        self._size += 1

    def search(self, key: str) -> Record | None:
        node = self._root
        while node is not None:
            if key == node.key:
                return node.record
            node = node.left if key < node.key else node.right
        return None

    def delete(self, key: str) -> None:
        parent: _Node | None = None
        node = self._root
        while node is not None and node.key != key:
            parent = node
            node = node.left if key < node.key else node.right
        if node is None:
            return

        if node.left is not None and node.right is not None:
            # Two children: take over the in-order successor's content,
            # then unlink the successor, which has no left child.
            successor_parent = node
            successor = node.right
            while successor.left is not None:
                successor_parent = successor
                successor = successor.left
            node.key = successor.key
            node.record = successor.record
            if successor_parent is node:
                successor_parent.right = successor.right
            else:
                successor_parent.left = successor.right
        else:
            child = node.left if node.left is not None else node.right
            if parent is None:
                self._root = child
            elif parent.left is node:
                parent.left = child
            else:
                parent.right = child
        self._size -= 1

    def traverse_filtered(
        self, kind: RecordKind | None = None, event_code: int | None = None
    ) -> list[Record]:
        records: list[Record] = []
        for node in self._in_order():
            record = node.record
            if kind is not None and record.kind is not kind:
                continue
            if (
                kind is RecordKind.TICKET
                and event_code is not None
                and isinstance(record, Ticket)
                and record.event_code != event_code
            ):
                continue
            records.append(record)
        return records

    def keys(self) -> list[str]:
        return [node.key for node in self._in_order()]

    def destroy(self) -> int:
        released = 0
        for node in self._post_order():
            node.left = None
            node.right = None
            released += 1
        self._root = None
        self._size = 0
        return released

    def _in_order(self) -> Iterator[_Node]:
        stack: list[_Node] = []
        node = self._root
        while stack or node is not None:
            while node is not None:
                stack.append(node)
                node = node.left
            node = stack.pop()
            yield node
            node = node.right

    def _post_order(self) -> list[_Node]:
        if self._root is None:
            return []
        stack = [self._root]
        visited: list[_Node] = []
        while stack:
            node = stack.pop()
            visited.append(node)
            if node.left is not None:
                stack.append(node.left)
            if node.right is not None:
                stack.append(node.right)
        visited.reverse()
        return visited
