"""
Interactive shortest-path query against the building database.

Usage:
    roomfind                 # query the default database
    roomfind --db paths.db   # query another database file
    roomfind --init          # (re)create the tables with the sample building first
"""
import argparse
import sqlite3
import sys

from roomfind import db
from roomfind.dijkstras.dijkstra import Unreachable, find_path
from roomfind.seed_data import seed_edges, seed_nodes


def init_db(conn):
    db.create_tables(conn)
    db.clear_tables(conn)
    nodes = seed_nodes()
    db.insert_data(conn, nodes, seed_edges(nodes))
    print('Tables created and sample building inserted.')


def format_path(path):
    return ' -> '.join(str(node.id) for node in path)


def run_query(conn):
    graph = db.load_graph(conn)

    print('Enter the start node name:')
    start = input().strip()
    print('Enter the target node name:')
    target = input().strip()

    if not start or not target:
        print('Error: node name must not be empty.')
        return 1

    start_node = graph.node_by_name(start)
    target_node = graph.node_by_name(target)
    if start_node is None or target_node is None:
        print('Error: one of the nodes was not found in the graph.')
        return 1

    result = find_path(graph, start_node, target_node)
    if isinstance(result, Unreachable):
        print(f'No path between {start_node.name} and {target_node.name}.')
        return 1

    print(f'Shortest path from {start_node.name} to {target_node.name}:')
    print(f'Distance: {result.distance}')
    print(f'Path: {format_path(result.path)}')
    return 0


def main(argv=None):
    parser = argparse.ArgumentParser(prog='roomfind', description='Shortest route between two rooms.')
    parser.add_argument('--db', default=None, help='SQLite database file (default: %s)' % db.DB_NAME)
    parser.add_argument('--init', action='store_true', help='create tables and insert the sample building')
    args = parser.parse_args(argv)

    db_path = args.db or db.get_db_path()
    try:
        conn = db.connect(db_path)
        try:
            print(f'Connected to SQLite database {db_path}.')
            if args.init:
                init_db(conn)
            return run_query(conn)
        finally:
            conn.close()
    except sqlite3.Error as e:
        print(f'Database error: {e}')
        return 1
    except EOFError:
        print('Error: node name must not be empty.')
        return 1


if __name__ == '__main__':
    sys.exit(main())
