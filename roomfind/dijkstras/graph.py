class Graph:
    """Adjacency list built from flat node and edge lists.

    Every node gets an entry, including isolated ones. Each edge is added in
    both directions. Edges touching a node that was not passed in are ignored.
    All lookups are keyed by node id.
    """

    def __init__(self, nodes, edges):
        self._nodes = {}
        self._adjacency = {}
        for node in nodes:
            self._nodes[node.id] = node
            self._adjacency[node.id] = []

        for edge in edges:
            if edge.first.id not in self._adjacency or edge.second.id not in self._adjacency:
                continue
            self._adjacency[edge.first.id].append((edge.second, edge.weight))
            self._adjacency[edge.second.id].append((edge.first, edge.weight))

    def get_nodes(self):
        return list(self._nodes.values())

    def get_neighbors(self, node):
        # unknown nodes simply have no neighbours
        return list(self._adjacency.get(node.id, []))

    def node_by_name(self, name):
        for node in self._nodes.values():
            if node.name == name:
                return node
        return None

    def __contains__(self, node):
        return node.id in self._nodes

    def __len__(self):
        return len(self._nodes)
