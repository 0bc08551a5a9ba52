import heapq
from collections import namedtuple

# distance reported for a target that cannot be reached from the start
UNREACHABLE = float('inf')

Found = namedtuple('Found', ['distance', 'path'])
Unreachable = namedtuple('Unreachable', ['start', 'target'])


class NodeNotInGraph(KeyError):
    def __init__(self, node):
        super().__init__(node)
        self.node = node

    def __str__(self):
        return f'node {self.node.id} ({self.node.name!r}) is not part of the graph'


def dijkstra_with_path(graph, start, target):
    """
    Find the shortest path from start to target using Dijkstra's algorithm.
    Returns (distance, path) where path runs from start to target inclusive.

    If target cannot be reached the distance is UNREACHABLE and the path
    holds only target.
    """
    for node in (start, target):
        if node not in graph:
            raise NodeNotInGraph(node)

    # per-call state, keyed by node id
    dist = {node.id: UNREACHABLE for node in graph.get_nodes()}
    dist[start.id] = 0.0
    previous = {}
    visited = set()

    # Priority queue: stores (distance_from_start, node_id, node)
    queue = [(0.0, start.id, start)]

    while queue:
        current_dist, node_id, node = heapq.heappop(queue)

        # stale entry for a node that was already finalized
        if node_id in visited:
            continue
        visited.add(node_id)

        if node_id == target.id:
            break

        for neighbor, weight in graph.get_neighbors(node):
            if neighbor.id in visited:
                continue
            new_dist = current_dist + weight
            if new_dist < dist[neighbor.id]:
                dist[neighbor.id] = new_dist
                previous[neighbor.id] = node
                heapq.heappush(queue, (new_dist, neighbor.id, neighbor))

    # reconstruct path
    path = []
    node = target
    while node is not None:
        path.append(node)
        node = previous.get(node.id)
    path.reverse()

    return dist[target.id], path


def find_path(graph, start, target):
    """Like dijkstra_with_path, but returns Found or Unreachable."""
    distance, path = dijkstra_with_path(graph, start, target)
    if distance == UNREACHABLE:
        return Unreachable(start, target)
    return Found(distance, path)
