from roomfind.dijkstras.graph import Graph
from roomfind.dijkstras.dijkstra import (
    UNREACHABLE,
    Found,
    NodeNotInGraph,
    Unreachable,
    dijkstra_with_path,
    find_path,
)
