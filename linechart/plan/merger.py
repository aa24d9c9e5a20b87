from typing import List, Sequence, Tuple

Point = Tuple[float, float]


def merge_coordinates(xs: Sequence[float], ys: Sequence[float]) -> List[Point]:
    """
    Pair X and Y values into points, one point per X value

    Y values are consumed as a stack: the first point takes the last Y value,
    the second point the one before it, and so on. Points left over once the
    stack is empty keep y = 0; Y values left on the stack are dropped.
    """
    stack = list(ys)
    points: List[Point] = []
    for x in xs:
        y = stack.pop() if stack else 0.0
        points.append((float(x), float(y)))
    return points
