from flask import Flask, jsonify, request
import os
import sqlite3

from roomfind import db
from roomfind.dijkstras.dijkstra import Unreachable, find_path

app = Flask(__name__)
# DATABASE unset means db.get_db_path(), resolved per request
app.config['DATABASE'] = None


def get_db_path():
    p = app.config.get('DATABASE') or db.get_db_path()
    if not p or not os.path.exists(p):
        return None
    return p


@app.route('/health')
def health_check():
    """Health check endpoint"""
    return {'status': 'healthy', 'service': 'RoomFind Backend'}


@app.route('/api/nodes')
def api_nodes():
    """Return every node in the building. Optional `floor` query param filters by floor."""
    floor = request.args.get('floor')
    if floor is not None:
        try:
            floor = int(floor)
        except ValueError:
            return jsonify({'error': 'floor must be an integer'}), 400

    path = get_db_path()
    if not path:
        return jsonify({'error': 'Server database not found.'}), 500

    conn = db.connect(path)
    try:
        if not db.table_exists(conn, 'nodes'):
            return jsonify({'error': 'Database does not contain a `nodes` table.'}), 500
        nodes = db.load_nodes(conn)
    except sqlite3.Error as e:
        app.logger.error('Failed to load nodes from %s: %s', path, e)
        return jsonify({'error': 'Failed to load nodes: ' + str(e)}), 500
    finally:
        conn.close()

    if floor is not None:
        nodes = [n for n in nodes if n.floor == floor]
    return jsonify([n.to_dict() for n in sorted(nodes, key=lambda n: n.id)])


@app.route('/api/pathfind')
def api_pathfind():
    """Compute shortest path between two nodes given by name.
    Query params: start (name), end (name)
    Returns: { path: [node dicts], distance: float }
    """
    start = (request.args.get('start') or '').strip()
    end = (request.args.get('end') or '').strip()
    if not start or not end:
        return jsonify({'error': 'Provide `start` and `end` query parameters (node names).'}), 400

    path = get_db_path()
    if not path:
        return jsonify({'error': 'Server database not found.'}), 500

    conn = db.connect(path)
    try:
        if not db.table_exists(conn, 'nodes') or not db.table_exists(conn, 'edges'):
            return jsonify({'error': 'Path graph not available on server.'}), 500
        graph = db.load_graph(conn)
    except sqlite3.Error as e:
        app.logger.error('Failed to load graph from %s: %s', path, e)
        return jsonify({'error': 'Failed to load graph: ' + str(e)}), 500
    finally:
        conn.close()

    start_node = graph.node_by_name(start)
    end_node = graph.node_by_name(end)
    missing = [name for name, node in ((start, start_node), (end, end_node)) if node is None]
    if missing:
        return jsonify({'error': 'Unknown node(s): ' + ', '.join(missing)}), 404

    result = find_path(graph, start_node, end_node)
    if isinstance(result, Unreachable):
        return jsonify({'error': 'No path found between requested nodes.'}), 404

    return jsonify({'path': [n.to_dict() for n in result.path], 'distance': result.distance})


if __name__ == '__main__':
    app.run(debug=True, host='0.0.0.0', port=5000)
