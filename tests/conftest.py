import pytest

from roomfind import db
from roomfind.dijkstras.graph import Graph
from roomfind.seed_data import seed_edges, seed_nodes


@pytest.fixture
def building():
    nodes = seed_nodes()
    return nodes, seed_edges(nodes)


@pytest.fixture
def graph(building):
    nodes, edges = building
    return Graph(nodes, edges)


@pytest.fixture
def db_path(tmp_path, building):
    path = str(tmp_path / 'paths.db')
    conn = db.connect(path)
    db.create_tables(conn)
    db.insert_data(conn, *building)
    conn.close()
    return path
