"""Copy-count layouts.

A layout maps the number of copies per sheet to the ``nup`` grid passed to
``\\includepdf`` and to the sheet orientation. The table is fixed; only the
five values in :data:`SUPPORTED_COPIES` exist.
"""

from __future__ import annotations

from dataclasses import dataclass

_GEOMETRIES: dict[int, str] = {
    2: "2x1",
    4: "2x2",
    8: "4x2",
    9: "3x3",
    16: "4x4",
}

_LANDSCAPE_GEOMETRIES = frozenset({"2x1", "4x2"})

SUPPORTED_COPIES: tuple[int, ...] = tuple(_GEOMETRIES)


class UnsupportedLayoutError(ValueError):
    """Raised when a Layout is built for a copy-count outside the fixed set."""

    def __init__(self, copies: object) -> None:
        supported = ", ".join(str(n) for n in SUPPORTED_COPIES)
        super().__init__(f"unsupported number of copies: {copies!r} (supported: {supported})")
        self.copies = copies


@dataclass(frozen=True)
class Layout:
    """Immutable (copies, geometry, orientation) value.

    Raises:
        UnsupportedLayoutError: if *copies* is not one of :data:`SUPPORTED_COPIES`.
    """

    copies: int

    def __post_init__(self) -> None:
        if type(self.copies) is not int or self.copies not in _GEOMETRIES:
            raise UnsupportedLayoutError(self.copies)

    @property
    def geometry(self) -> str:
        """The ``nup`` grid, e.g. ``"2x2"``."""
        return _GEOMETRIES[self.copies]

    @property
    def is_landscape(self) -> bool:
        return self.geometry in _LANDSCAPE_GEOMETRIES

    @property
    def grid(self) -> tuple[int, int]:
        """The two factors of :attr:`geometry` as integers."""
        first, _, second = self.geometry.partition("x")
        return int(first), int(second)
