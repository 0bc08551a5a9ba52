"""
Sample building used to populate an empty database: two corridor junctions
with four doors hanging off them, all on the first floor.
"""
from roomfind.models import Edge, Node

# (id, name, x, y, floor)
NODES = [
    (1, 'D1', 1.0, 3.0, 1),
    (2, 'Corridor 1', 3.5, 6.0, 1),
    (3, 'D2', 3.5, 10.0, 1),
    (4, 'Corridor 2', 7.5, 6.0, 1),
    (5, 'D3', 7.5, 10.0, 1),
    (6, 'D4', 11.0, 6.0, 1),
]

# (from node id, to node id); weights come from the coordinates
EDGES = [
    (1, 2),
    (2, 3),
    (2, 4),
    (4, 5),
    (4, 6),
]


def seed_nodes():
    return [Node(*row) for row in NODES]


def seed_edges(nodes=None):
    nodes_by_id = {n.id: n for n in (nodes or seed_nodes())}
    return [
        Edge.between(i, nodes_by_id[f], nodes_by_id[t])
        for i, (f, t) in enumerate(EDGES, start=1)
    ]
