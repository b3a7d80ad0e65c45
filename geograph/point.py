# point.py

from PyQt5.QtCore import QPointF
from typing import Tuple


class Point:
    """
    Immutable planar position. The coordinates live in a QPointF that is
    never handed out directly; getPosition() returns a copy.
    """
    __slots__ = ("_position",)

    def __init__(self, x: float, y: float):
        self._position = QPointF(float(x), float(y))

    @property
    def x(self) -> float:
        return self._position.x()

    @property
    def y(self) -> float:
        return self._position.y()

    # --- Getters (kept for compatibility) ---
    def getPosition(self) -> QPointF:
        return QPointF(self._position)

    def pos_tuple(self) -> Tuple[float, float]:
        return (self._position.x(), self._position.y())

    def __eq__(self, other) -> bool:
        return (type(other) is type(self)
                and self.x == other.x and self.y == other.y)

    def __hash__(self) -> int:
        return hash((type(self).__name__, self.x, self.y))

    def __repr__(self) -> str:
        return f"P({self.x}, {self.y})"
