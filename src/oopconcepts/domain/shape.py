"""Drawable shapes."""

from abc import ABC, abstractmethod

DEFAULT_COLOR = "Black"


def _fmt(value: float) -> str:
    # 5.0 -> "5", 2.3456789 -> "2.3456789", never exponent notation for integers
    value = float(value)
    if value.is_integer():
        return str(int(value))
    return repr(value)


class Shape(ABC):
    """Abstract shape with a color."""

    def __init__(self, color: str = DEFAULT_COLOR):
        self.color = color

    def set_color(self, color: str) -> None:
        """Change the color. Geometry is left alone."""
        self.color = color

    @abstractmethod
    def draw(self) -> str:
        """Return a description of the drawn shape."""
        pass


class Circle(Shape):
    def __init__(self, radius: float, color: str = DEFAULT_COLOR):
        super().__init__(color)
        self.radius = radius

    def draw(self) -> str:
        return f"Drawing a {self.color} Circle with radius {_fmt(self.radius)}"


class Rectangle(Shape):
    def __init__(self, width: float, height: float, color: str = DEFAULT_COLOR):
        super().__init__(color)
        self.width = width
        self.height = height

    def draw(self) -> str:
        return (
            f"Drawing a {self.color} Rectangle with width {_fmt(self.width)} "
            f"and height {_fmt(self.height)}"
        )


class Triangle(Shape):
    def __init__(self, base: float, height: float, color: str = DEFAULT_COLOR):
        super().__init__(color)
        self.base = base
        self.height = height

    def draw(self) -> str:
        return (
            f"Drawing a {self.color} Triangle with base {_fmt(self.base)} "
            f"and height {_fmt(self.height)}"
        )


# Shape name -> (class, number of dimensions the constructor takes)
SHAPE_TYPES: dict[str, tuple[type[Shape], int]] = {
    "circle": (Circle, 1),
    "rectangle": (Rectangle, 2),
    "triangle": (Triangle, 2),
}
