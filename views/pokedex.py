from flask import Blueprint, current_app, jsonify, render_template, request

from services.session import LoadState

bp = Blueprint('pokedex', __name__)


def _controller():
    return current_app.extensions['pokedex']


@bp.route('/')
def index():
    return render_template('pokedex.html', active_page='pokedex')


@bp.route('/api/state')
def state():
    return jsonify(_controller().snapshot())


@bp.route('/api/pokemon')
def pokemon():
    ctrl = _controller()
    term = request.args.get('q') or ''
    snap = ctrl.search(term)
    if snap['load_state'] == LoadState.FAILED.value:
        return jsonify({"error": snap['error']}), 503
    return jsonify({
        'load_state': snap['load_state'],
        'error': snap['error'],
        'search_term': snap['search_term'],
        'results': snap['results'],
    })


@bp.route('/api/select', methods=['POST'])
def select():
    data = request.get_json(silent=True) or {}
    try:
        pid = int(data.get('id'))
    except (TypeError, ValueError):
        return jsonify({"error": "Missing or invalid id"}), 400
    ctrl = _controller()
    if ctrl.state.load_state != LoadState.READY:
        return jsonify({"error": "Pokémon are not loaded yet"}), 409
    try:
        detail = ctrl.select_by_id(pid)
    except KeyError:
        return jsonify({"error": f"Unknown Pokémon #{pid}"}), 404
    return jsonify(detail.to_dict())


@bp.route('/api/dismiss', methods=['POST'])
def dismiss():
    _controller().dismiss()
    return jsonify({'selected': None})
