"""
Recompute the weight of every edge as the straight-line distance between the
coordinates of its two nodes.

Usage:
    python -m roomfind.generate_paths_from_coords          # updates the database
    python -m roomfind.generate_paths_from_coords --dry    # shows what would change

Edges pointing at a missing node are left untouched.
"""
import argparse
import sys

from roomfind import db
from roomfind.models import euclidean_distance


def recompute_weights(conn):
    """Return a list of (edge_id, old_weight, new_weight) for edges whose weight changes."""
    nodes_by_id = {n.id: n for n in db.load_nodes(conn)}
    changes = []
    for edge in db.load_edges(conn, nodes_by_id):
        w = euclidean_distance(edge.first, edge.second)
        if abs(w - edge.weight) > 1e-9:
            changes.append((edge.id, edge.weight, w))
    return changes


def main(argv=None):
    parser = argparse.ArgumentParser(description='Derive edge weights from node coordinates.')
    parser.add_argument('--db', default=None)
    parser.add_argument('--dry', action='store_true', help="don't write to the database")
    args = parser.parse_args(argv)

    conn = db.connect(args.db or db.get_db_path())
    try:
        if not db.table_exists(conn, 'edges'):
            print('Database has no edges table. Aborting.')
            return 1

        changes = recompute_weights(conn)
        for edge_id, old, new in changes:
            print(f'edge {edge_id}: {old:.3f} -> {new:.3f}')

        if args.dry:
            print(f'{len(changes)} edge weights would change')
            return 0

        conn.executemany('UPDATE edges SET weight = ? WHERE id = ?', [(new, edge_id) for edge_id, _, new in changes])
        conn.commit()
        print(f'Updated {len(changes)} edge weights')
    finally:
        conn.close()
    return 0


if __name__ == '__main__':
    sys.exit(main())
