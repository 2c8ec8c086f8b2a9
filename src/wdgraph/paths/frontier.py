"""Candidate set of not-yet-settled vertices for a shortest-path run.

Each PathRecord names a vertex handle, the handle of its best known
predecessor, and the best known path weight from the source (None until
some path is known).  Records are mutated in place as better (or, for
the basic variant, merely newer) paths turn up, so their position in the
frontier never changes after they are added.

Records compare by identity.  Two records with the same fields are still
two different candidates, and ``remove`` only ever takes out the exact
object it was given.
"""
from __future__ import annotations

from dataclasses import dataclass
from typing import Iterator


@dataclass(slots=True, eq=False)
class PathRecord:
    """Best known way to reach one vertex."""
    vertex: int
    predecessor: int
    weight: int | None = None    # None = no known path yet

    @property
    def reachable(self) -> bool:
        return self.weight is not None


class Frontier:
    """Insertion-ordered collection of PathRecords.

    Backed by a plain list: selection and lookup are linear scans.
    """

    __slots__ = ("_records",)

    def __init__(self) -> None:
        self._records: list[PathRecord] = []

    def add(self, record: PathRecord) -> None:
        self._records.append(record)

    def remove(self, record: PathRecord) -> None:
        """Remove *record* itself (not an equal-looking one).

        Raises ValueError if that object is not in the frontier.
        """
        for i, r in enumerate(self._records):
            if r is record:
                del self._records[i]
                return
        raise ValueError(f"{record!r} is not in the frontier")

    def get(self, vertex: int) -> PathRecord | None:
        """Record for *vertex*, or None if it is not a candidate."""
        for r in self._records:
            if r.vertex == vertex:
                return r
        return None

    def first_reachable(self) -> PathRecord | None:
        """First record, in insertion order, that has a known weight.

        Not the lightest one: selection is by arrival order.
        """
        for r in self._records:
            if r.reachable:
                return r
        return None

    def is_empty(self) -> bool:
        return not self._records

    def __iter__(self) -> Iterator[PathRecord]:
        return iter(list(self._records))

    def __len__(self) -> int:
        return len(self._records)

    def __bool__(self) -> bool:
        return bool(self._records)

    def __repr__(self) -> str:
        return f"Frontier(records={len(self)})"
