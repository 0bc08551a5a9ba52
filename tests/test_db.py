import math

from roomfind import db
from roomfind.dijkstras.dijkstra import dijkstra_with_path


def test_get_db_path_env_override(monkeypatch, tmp_path):
    monkeypatch.setenv('ROOMFIND_DB', str(tmp_path / 'other.db'))
    assert db.get_db_path() == str(tmp_path / 'other.db')

    monkeypatch.delenv('ROOMFIND_DB')
    assert db.get_db_path().endswith(db.DB_NAME)


def test_round_trip_through_sqlite(db_path, building):
    nodes, edges = building
    conn = db.connect(db_path)
    loaded_nodes = db.load_nodes(conn)
    loaded_edges = db.load_edges(conn, {n.id: n for n in loaded_nodes})
    conn.close()

    assert sorted(n.id for n in loaded_nodes) == [1, 2, 3, 4, 5, 6]
    by_id = {n.id: n for n in loaded_nodes}
    assert by_id[2].name == 'Corridor 1'
    assert (by_id[2].x, by_id[2].y, by_id[2].floor) == (3.5, 6.0, 1)
    assert [(e.first.id, e.second.id) for e in loaded_edges] == [(1, 2), (2, 3), (2, 4), (4, 5), (4, 6)]
    assert math.isclose(loaded_edges[0].weight, edges[0].weight)


def test_edges_with_unknown_nodes_are_dropped(db_path):
    conn = db.connect(db_path)
    conn.execute('INSERT INTO edges (id, from_node, to_node, weight) VALUES (99, 6, 404, 1.0)')
    conn.commit()

    nodes = db.load_nodes(conn)
    edges = db.load_edges(conn, {n.id: n for n in nodes})
    conn.close()

    assert len(edges) == 5
    assert 99 not in [e.id for e in edges]


def test_edges_with_bad_weights_are_dropped(db_path):
    conn = db.connect(db_path)
    conn.executemany(
        'INSERT INTO edges (id, from_node, to_node, weight) VALUES (?, ?, ?, ?)',
        [(9, 1, 6, -50.0), (10, 1, 6, float('inf')), (11, 1, 6, 'far')],
    )
    conn.commit()

    edges = db.load_edges(conn, {n.id: n for n in db.load_nodes(conn)})
    graph = db.load_graph(conn)
    conn.close()

    assert sorted(e.id for e in edges) == [1, 2, 3, 4, 5]
    distance, path = dijkstra_with_path(graph, graph.node_by_name('D1'), graph.node_by_name('D4'))
    assert [n.id for n in path] == [1, 2, 4, 6]
    assert math.isclose(distance, 11.405, abs_tol=1e-3)


def test_load_graph_and_query(db_path):
    conn = db.connect(db_path)
    graph = db.load_graph(conn)
    conn.close()

    distance, path = dijkstra_with_path(graph, graph.node_by_name('D2'), graph.node_by_name('D3'))
    assert [n.id for n in path] == [3, 2, 4, 5]
    assert distance == 12.0


def test_clear_and_table_exists(db_path):
    conn = db.connect(db_path)
    assert db.table_exists(conn, 'nodes')
    assert db.table_exists(conn, 'edges')
    assert not db.table_exists(conn, 'paths')

    db.clear_tables(conn)
    assert db.load_nodes(conn) == []
    assert db.load_edges(conn, {}) == []
    conn.close()
