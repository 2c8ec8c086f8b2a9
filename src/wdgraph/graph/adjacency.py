"""Per-vertex adjacency sequences sorted by edge weight.

Each vertex handle owns a singly linked list of ``_Node`` objects, one
per outgoing edge.  A node stores the *target handle* (not the label)
and the edge weight.  Lists are kept sorted ascending by weight, so
enumerating a vertex's successors always yields the cheapest edge
first.  Equal weights keep insertion order: a new node goes after the
last node whose weight is <= its own.

Because nodes point at handles, removing a vertex is the expensive
operation here.  ``drop`` walks every list once to unlink edges into
the removed vertex and to decrement every target above it, keeping the
handles in line with the compacted vertex table.
"""
from __future__ import annotations

from typing import Iterator


class _Node:
    """One outgoing edge in a sequence."""

    __slots__ = ("target", "weight", "next")

    def __init__(self, target: int, weight: int) -> None:
        self.target = target
        self.weight = weight
        self.next: _Node | None = None


class AdjacencyIndex:
    """One sorted linked sequence per vertex handle."""

    __slots__ = ("_heads",)

    def __init__(self) -> None:
        self._heads: list[_Node | None] = []

    # ---- mutation --------------------------------------------------------

    def add_sequence(self) -> int:
        """Append an empty sequence for a new vertex.  Returns its handle."""
        self._heads.append(None)
        return len(self._heads) - 1

    def insert(self, source: int, target: int, weight: int) -> None:
        """Insert edge source -> target keeping the sequence sorted.

        Does not check for an existing source -> target node; callers
        replacing an edge remove the old one first.
        """
        node = _Node(target, weight)
        prev: _Node | None = None
        cur = self._heads[source]
        while cur is not None and cur.weight <= weight:
            prev = cur
            cur = cur.next
        node.next = cur
        if prev is None:
            self._heads[source] = node
        else:
            prev.next = node

    def remove(self, source: int, target: int) -> bool:
        """Unlink the first node pointing at *target*.  False if none."""
        prev: _Node | None = None
        cur = self._heads[source]
        while cur is not None and cur.target != target:
            prev = cur
            cur = cur.next
        if cur is None:
            return False
        if prev is None:
            self._heads[source] = cur.next
        else:
            prev.next = cur.next
        return True

    def clear_sequence(self, source: int) -> None:
        """Drop every outgoing edge of *source*."""
        self._heads[source] = None

    def drop(self, handle: int) -> None:
        """Forget *handle* entirely and re-index everything above it.

        Removes edges into *handle* from every sequence, deletes the
        sequence owned by *handle*, then decrements every target greater
        than *handle* so targets match the compacted vertex table.
        """
        for source in range(len(self._heads)):
            if source != handle:
                while self.remove(source, handle):
                    pass
        del self._heads[handle]
        for head in self._heads:
            node = head
            while node is not None:
                if node.target > handle:
                    node.target -= 1
                node = node.next

    def clear(self) -> None:
        self._heads.clear()

    # ---- queries ---------------------------------------------------------

    def find(self, source: int, target: int) -> int | None:
        """Weight of edge source -> target, or None if there is none."""
        node = self._heads[source]
        while node is not None:
            if node.target == target:
                return node.weight
            node = node.next
        return None

    def iter_sequence(self, source: int) -> Iterator[tuple[int, int]]:
        """Yield (target, weight) pairs in ascending weight order."""
        node = self._heads[source]
        while node is not None:
            yield node.target, node.weight
            node = node.next

    def out_degree(self, source: int) -> int:
        return sum(1 for _ in self.iter_sequence(source))

    @property
    def edge_count(self) -> int:
        return sum(self.out_degree(s) for s in range(len(self._heads)))

    # ---- dunder ----------------------------------------------------------

    def __len__(self) -> int:
        return len(self._heads)

    def __repr__(self) -> str:
        return f"AdjacencyIndex(sequences={len(self)}, edges={self.edge_count})"
