"""
Simple helper to load a CSV of edges into the building SQLite database.

CSV format (headers expected):
from_node,to_node[,weight]

Each id is a node id from the `nodes` table. When the weight column is missing
or empty, the straight-line distance between the two nodes is used.

Usage:
    python -m roomfind.load_paths edges.csv [--db paths.db]

This will create the tables if they don't exist and append the edges.
"""
import argparse
import csv
import os
import sys

from roomfind import db
from roomfind.models import euclidean_distance


def load_csv(csv_path, nodes_by_id):
    rows = []
    with open(csv_path, newline='', encoding='utf-8') as fh:
        reader = csv.DictReader(fh)
        for r in reader:
            try:
                f = int(r['from_node'])
                t = int(r['to_node'])
                raw_weight = (r.get('weight') or '').strip()
                if f not in nodes_by_id or t not in nodes_by_id:
                    raise ValueError('unknown node id')
                if raw_weight:
                    w = float(raw_weight)
                else:
                    w = euclidean_distance(nodes_by_id[f], nodes_by_id[t])
                if w < 0:
                    raise ValueError('negative weight')
                rows.append((f, t, w))
            except (KeyError, ValueError, TypeError) as e:
                print('Skipping row (invalid):', r, 'error:', e)
    return rows


def insert_edges(conn, rows):
    cur = conn.cursor()
    cur.execute('SELECT COALESCE(MAX(id), 0) FROM edges')
    next_id = cur.fetchone()[0] + 1
    cur.executemany(
        'INSERT INTO edges(id, from_node, to_node, weight) VALUES (?, ?, ?, ?)',
        [(next_id + i, f, t, w) for i, (f, t, w) in enumerate(rows)],
    )
    conn.commit()


def main(argv=None):
    parser = argparse.ArgumentParser(description='Load edges from a CSV file.')
    parser.add_argument('csv_path')
    parser.add_argument('--db', default=None)
    args = parser.parse_args(argv)

    if not os.path.exists(args.csv_path):
        print('CSV file not found:', args.csv_path)
        return 2

    db_path = args.db or db.get_db_path()
    conn = db.connect(db_path)
    try:
        db.create_tables(conn)
        nodes_by_id = {n.id: n for n in db.load_nodes(conn)}
        rows = load_csv(args.csv_path, nodes_by_id)
        if not rows:
            print('No valid rows found in CSV.')
            return 0
        insert_edges(conn, rows)
        print(f'Inserted {len(rows)} edge rows into {db_path}')
    finally:
        conn.close()
    return 0


if __name__ == '__main__':
    sys.exit(main())
