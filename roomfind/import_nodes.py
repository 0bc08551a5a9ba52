"""
Import building nodes from a spreadsheet (.xlsx or .csv) into the `nodes` table.

Expected columns (case and surrounding whitespace don't matter):
    id, name, x, y, floor

Usage:
    python -m roomfind.import_nodes nodes.xlsx [--db paths.db] [--replace]
"""
import argparse
import re
import sys

import pandas as pd

from roomfind import db
from roomfind.models import Node

REQUIRED = ['id', 'name', 'x', 'y', 'floor']

# accepted spellings for each column
ALIASES = {
    'node_id': 'id',
    'room': 'name',
    'latitude': 'x',
    'longitude': 'y',
    'level': 'floor',
}


def norm_col(c):
    c = str(c).strip().lower()
    c = re.sub(r'\s+', '_', c)       # collapse whitespace
    c = c.rstrip('.')
    return ALIASES.get(c, c)


def read_sheet(path):
    # keep everything as text first so nothing turns into NaN unexpectedly
    if str(path).lower().endswith('.csv'):
        df = pd.read_csv(path, dtype=str, keep_default_na=False)
    else:
        df = pd.read_excel(path, sheet_name=0, dtype=str, keep_default_na=False)
    df.columns = [norm_col(c) for c in df.columns]
    missing = [c for c in REQUIRED if c not in df.columns]
    if missing:
        raise ValueError('missing column(s): ' + ', '.join(missing))
    return df


def frame_to_nodes(df):
    """Convert rows to Node records, skipping (and reporting) rows that don't parse."""
    df = df[REQUIRED].apply(lambda col: col.str.strip())
    numeric = df[['id', 'x', 'y', 'floor']].apply(pd.to_numeric, errors='coerce')
    bad = numeric.isna().any(axis=1) | (df['name'] == '')
    # ids and floors must be whole numbers
    bad |= (numeric[['id', 'floor']] % 1 != 0).any(axis=1)
    for idx in bad[bad].index:
        print('Skipping row (invalid):', df.loc[idx].to_dict())

    nodes = []
    for idx in bad[~bad].index:
        row = numeric.loc[idx]
        nodes.append(Node(int(row['id']), df.at[idx, 'name'], float(row['x']), float(row['y']), int(row['floor'])))
    return nodes


def write_nodes(conn, nodes, replace=False):
    db.create_tables(conn)
    if replace:
        db.clear_tables(conn)
    conn.executemany(
        'INSERT OR REPLACE INTO nodes (id, name, latitude, longitude, floor) VALUES (?, ?, ?, ?, ?)',
        [(n.id, n.name, n.x, n.y, n.floor) for n in nodes],
    )
    conn.commit()


def main(argv=None):
    parser = argparse.ArgumentParser(description='Import nodes from a spreadsheet.')
    parser.add_argument('path')
    parser.add_argument('--db', default=None)
    parser.add_argument('--replace', action='store_true', help='clear nodes and edges first')
    args = parser.parse_args(argv)

    try:
        nodes = frame_to_nodes(read_sheet(args.path))
    except (OSError, ValueError) as e:
        print('Could not read', args.path, 'error:', e)
        return 2

    db_path = args.db or db.get_db_path()
    conn = db.connect(db_path)
    try:
        write_nodes(conn, nodes, replace=args.replace)
    finally:
        conn.close()
    print(f'Imported {len(nodes)} nodes into {db_path}')
    return 0


if __name__ == '__main__':
    sys.exit(main())
