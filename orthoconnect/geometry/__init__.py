from .primitives import (
    Point,
    Size,
    Line,
    Rectangle,
    distance,
)
