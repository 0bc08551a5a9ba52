from dataclasses import dataclass, field
import math


@dataclass(frozen=True)
class Node:
    """A room, door or corridor junction. Identity is the integer id."""
    id: int
    name: str = field(compare=False)
    x: float = field(compare=False)
    y: float = field(compare=False)
    floor: int = field(compare=False, default=1)

    def to_dict(self):
        return {'id': self.id, 'name': self.name, 'x': self.x, 'y': self.y, 'floor': self.floor}


def euclidean_distance(a, b):
    return math.sqrt((b.x - a.x) * (b.x - a.x) + (b.y - a.y) * (b.y - a.y))


@dataclass(frozen=True)
class Edge:
    """Undirected passage between two nodes."""
    id: int
    first: Node
    second: Node
    weight: float

    @classmethod
    def between(cls, edge_id, first, second):
        """Build an edge weighted by the straight-line distance of its endpoints."""
        return cls(edge_id, first, second, euclidean_distance(first, second))
