#
# PROJECT: contribution-city
# MODULE: contribution_city/math_utils.py
# STATUS: Level 2 - Implementation
# LOG_REF: 2026-10-18
#


class GridPoint:
    """Immutable point in city-grid space.  gz is the vertical (height) axis."""
    __slots__ = ('gx', 'gy', 'gz')

    def __init__(self, gx: float, gy: float, gz: float = 0.0):
        self.gx = float(gx)
        self.gy = float(gy)
        self.gz = float(gz)

    def __repr__(self):
        return f"GridPoint({self.gx:.2f}, {self.gy:.2f}, {self.gz:.2f})"

    def __iter__(self):
        yield self.gx
        yield self.gy
        yield self.gz

    def __eq__(self, other):
        if isinstance(other, GridPoint):
            return (self.gx, self.gy, self.gz) == (other.gx, other.gy, other.gz)
        return NotImplemented

    def __hash__(self):
        return hash((self.gx, self.gy, self.gz))


class ScreenPoint:
    """Pixel position in the output document (y grows downward)."""
    __slots__ = ('x', 'y')

    def __init__(self, x: float, y: float):
        self.x = float(x)
        self.y = float(y)

    def __repr__(self):
        return f"ScreenPoint({self.x:.2f}, {self.y:.2f})"

    def __iter__(self):
        yield self.x
        yield self.y

    def __eq__(self, other):
        if isinstance(other, ScreenPoint):
            return (self.x, self.y) == (other.x, other.y)
        return NotImplemented

    def __hash__(self):
        return hash((self.x, self.y))
