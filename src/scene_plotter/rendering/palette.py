"""Per-object color palette."""

from collections.abc import Sequence

from scene_plotter.config import DEFAULT_PALETTE


class ColorPalette:
    """Table of shades, one row per object.

    Shade 0 of a row is the current-position color. Shades 1.. are used for
    trail segments by age, so the trail fades as it gets older.
    """

    def __init__(self, shades: Sequence[Sequence[str]]):
        rows = [tuple(row) for row in shades]
        if not rows:
            raise ValueError("Palette must define at least one object color")
        depth = len(rows[0])
        if depth == 0:
            raise ValueError("Palette rows must contain at least one shade")
        for index, row in enumerate(rows):
            if len(row) != depth:
                raise ValueError(
                    f"Palette row {index} has {len(row)} shades, expected {depth} like row 0"
                )
        self._rows: tuple[tuple[str, ...], ...] = tuple(rows)

    @classmethod
    def default(cls) -> "ColorPalette":
        return cls(DEFAULT_PALETTE)

    @property
    def capacity(self) -> int:
        """Number of distinct objects this palette can color."""
        return len(self._rows)

    @property
    def depth(self) -> int:
        """Number of shades per object."""
        return len(self._rows[0])

    def current(self, object_index: int) -> str:
        return self.shade(object_index, 0)

    def shade(self, object_index: int, age: int) -> str:
        """Color of ``object_index`` for a segment ``age`` frames old.

        Raises:
            IndexError: object_index or age outside the table
        """
        if not 0 <= object_index < self.capacity:
            raise IndexError(
                f"Object index {object_index} outside palette capacity {self.capacity}"
            )
        if not 0 <= age < self.depth:
            raise IndexError(f"Age {age} outside palette depth {self.depth}")
        return self._rows[object_index][age]

    def __len__(self) -> int:
        return self.capacity

    def __repr__(self) -> str:
        return f"ColorPalette(capacity={self.capacity}, depth={self.depth})"
