"""
SQLite storage for the building graph.

Tables:
    nodes(id, name, latitude, longitude, floor)   -- latitude/longitude hold x/y
    edges(id, from_node, to_node, weight)
"""
import math
import os
import sqlite3

from roomfind.dijkstras.graph import Graph
from roomfind.models import Edge, Node

DB_NAME = 'paths.db'


def get_db_path():
    # ROOMFIND_DB overrides the default file next to the package
    return os.environ.get('ROOMFIND_DB') or os.path.join(os.path.dirname(__file__), DB_NAME)


def connect(db_path=None):
    return sqlite3.connect(db_path or get_db_path())


def table_exists(conn, name):
    cur = conn.execute("SELECT name FROM sqlite_master WHERE type='table' AND name=?", (name,))
    return cur.fetchone() is not None


def create_tables(conn):
    conn.execute('''
    CREATE TABLE IF NOT EXISTS nodes (
        id INTEGER PRIMARY KEY,
        name TEXT NOT NULL,
        latitude REAL NOT NULL,
        longitude REAL NOT NULL,
        floor INTEGER NOT NULL
    )
    ''')
    conn.execute('''
    CREATE TABLE IF NOT EXISTS edges (
        id INTEGER PRIMARY KEY,
        from_node INTEGER NOT NULL,
        to_node INTEGER NOT NULL,
        weight REAL NOT NULL,
        FOREIGN KEY(from_node) REFERENCES nodes(id) ON DELETE CASCADE,
        FOREIGN KEY(to_node) REFERENCES nodes(id) ON DELETE CASCADE
    )
    ''')
    conn.commit()


def clear_tables(conn):
    conn.execute('DELETE FROM edges')
    conn.execute('DELETE FROM nodes')
    conn.commit()


def insert_data(conn, nodes, edges):
    """Insert node and edge records. Edges are renumbered 1..n in the given order."""
    cur = conn.cursor()
    cur.executemany(
        'INSERT INTO nodes (id, name, latitude, longitude, floor) VALUES (?, ?, ?, ?, ?)',
        [(n.id, n.name, n.x, n.y, n.floor) for n in nodes],
    )
    cur.executemany(
        'INSERT INTO edges (id, from_node, to_node, weight) VALUES (?, ?, ?, ?)',
        [(i, e.first.id, e.second.id, e.weight) for i, e in enumerate(edges, start=1)],
    )
    conn.commit()


def load_nodes(conn):
    cur = conn.execute('SELECT id, name, latitude, longitude, floor FROM nodes')
    return [
        Node(int(node_id), name, float(x), float(y), int(floor))
        for node_id, name, x, y, floor in cur.fetchall()
    ]


def load_edges(conn, nodes_by_id):
    """Load edges, dropping any that reference a node id not in nodes_by_id
    or carry a negative or non-finite weight."""
    edges = []
    cur = conn.execute('SELECT id, from_node, to_node, weight FROM edges')
    for edge_id, from_id, to_id, weight in cur.fetchall():
        first = nodes_by_id.get(from_id)
        second = nodes_by_id.get(to_id)
        if first is None or second is None:
            continue
        try:
            weight = float(weight)
        except (TypeError, ValueError):
            continue
        if not math.isfinite(weight) or weight < 0:
            continue
        edges.append(Edge(int(edge_id), first, second, weight))
    return edges


def load_graph(conn):
    nodes = load_nodes(conn)
    nodes_by_id = {n.id: n for n in nodes}
    return Graph(nodes, load_edges(conn, nodes_by_id))
