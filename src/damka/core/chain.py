"""MoveChain — accumulator describing one turn."""

from __future__ import annotations

from functools import total_ordering

from damka.core.position import Position, PositionLike, as_position


@total_ordering
class MoveChain:
    """Steps and captures taken by a single piece during one turn.

    ``start`` is fixed at construction; ``end`` follows the moving piece.
    Each :meth:`step` is one diagonal advance, optionally jumping over a
    captured piece. Segments explored separately are spliced together with
    :meth:`merge`.

    Chains compare by ``step_count`` only, so a search can rank candidates
    with ``max()`` or a heap. Two chains of equal length but different
    captures compare equal; callers that need a tie-break must supply
    their own key.
    """

    __slots__ = ("start", "end", "step_count", "captures")

    def __init__(self, start: PositionLike) -> None:
        self.start: Position = as_position(start)
        self.end: Position = self.start
        self.step_count = 0
        self.captures: list[Position] = []

    @classmethod
    def from_position(cls, value: PositionLike) -> MoveChain:
        return cls(value)

    # ── Building ─────────────────────────────────────────────────────────

    def step(self, position: PositionLike, captured: PositionLike | None = None) -> None:
        """Advance the head to *position*, recording *captured* if given."""
        self.end = as_position(position)
        self.step_count += 1
        if captured is not None:
            self.captures.append(as_position(captured))

    def merge(self, other: MoveChain) -> None:
        """Append *other* to this chain. ``start`` is kept; *other* is not modified."""
        self.end = other.end
        self.step_count += other.step_count
        self.captures.extend(other.captures)

    def copy(self) -> MoveChain:
        c = MoveChain(self.start)
        c.end = self.end
        c.step_count = self.step_count
        c.captures = self.captures.copy()
        return c

    # ── Queries ──────────────────────────────────────────────────────────

    @property
    def capture_count(self) -> int:
        return len(self.captures)

    @property
    def is_capture(self) -> bool:
        return bool(self.captures)

    # ── Ordering (by step count) ─────────────────────────────────────────

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, MoveChain):
            return NotImplemented
        return self.step_count == other.step_count

    def __lt__(self, other: object) -> bool:
        if not isinstance(other, MoveChain):
            return NotImplemented
        return self.step_count < other.step_count

    __hash__ = None  # type: ignore[assignment]

    def __repr__(self) -> str:
        captures = ", ".join(str(p) for p in self.captures)
        return (
            f"MoveChain(start={self.start}, end={self.end}, "
            f"step_count={self.step_count}, captures=[{captures}])"
        )
