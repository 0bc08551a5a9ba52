#!/usr/bin/env python3
"""Print a JSON summary of the building database."""
import argparse
import json
import os
import sys

from roomfind import db


def summarize(conn):
    cur = conn.cursor()
    cur.execute("SELECT name FROM sqlite_master WHERE type='table'")
    tables = [r[0] for r in cur.fetchall()]
    summary = {'tables': tables}

    if 'nodes' in tables:
        cur.execute('SELECT count(*) FROM nodes')
        summary['nodes_count'] = cur.fetchone()[0]
        cur.execute('SELECT DISTINCT floor FROM nodes ORDER BY floor')
        summary['floors'] = [r[0] for r in cur.fetchall()]
        summary['nodes_sample'] = [n.to_dict() for n in db.load_nodes(conn)[:5]]

    if 'edges' in tables:
        cur.execute('SELECT count(*) FROM edges')
        summary['edges_count'] = cur.fetchone()[0]
        cur.execute('SELECT id, from_node, to_node, weight FROM edges LIMIT 5')
        summary['edges_sample'] = [
            {'id': r[0], 'from_node': r[1], 'to_node': r[2], 'weight': r[3]} for r in cur.fetchall()
        ]

    # edges the loader will drop
    if 'nodes' in tables and 'edges' in tables:
        cur.execute('''
            SELECT count(*) FROM edges
            WHERE from_node NOT IN (SELECT id FROM nodes) OR to_node NOT IN (SELECT id FROM nodes)
        ''')
        summary['dangling_edges'] = cur.fetchone()[0]

    return summary


def main(argv=None):
    parser = argparse.ArgumentParser(description='Summarize the building database.')
    parser.add_argument('--db', default=None)
    args = parser.parse_args(argv)

    p = args.db or db.get_db_path()
    print('db path:', p, 'exists=', os.path.exists(p))
    if not os.path.exists(p):
        print(json.dumps({'error': 'db_not_found', 'path': p}))
        return 1

    conn = db.connect(p)
    try:
        summary = summarize(conn)
    finally:
        conn.close()
    print(json.dumps(summary, indent=2))
    return 0


if __name__ == '__main__':
    sys.exit(main())
