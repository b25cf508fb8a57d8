# app.py
import logging
import threading
from flask import Flask, jsonify, request

# Core Application Imports
from helpers.game_helpers import (
    build_controller, cities_as_geojson, city_to_dict, snapshot_to_dict,
    outcome_to_dict, rankings_to_list, format_response
)
from worldnav.constants.game import GameConstants
from worldnav.exceptions import ValidationError
from worldnav.session.data_models import ArrivalEffect

app = Flask(__name__)
log = logging.getLogger('werkzeug')
log.setLevel(logging.WARNING)

# Global State Dictionary
state = {
    'controller': None,
    # Requests are served on several threads; game transitions run one at a time
    'lock': threading.Lock()
}

def get_controller():
    with state['lock']:
        if state['controller'] is None:
            state['controller'] = build_controller()
        return state['controller']

def _json_body() -> dict:
    return request.get_json(silent=True) or {}

@app.route('/')
def index():
    controller = get_controller()
    return jsonify(format_response(
        success=True,
        message="World Navigation Challenge: navigate to 20 cities as fast as you can!",
        data={
            "cities_available": len(controller.catalog.cities),
            "phase": controller.phase.value,
            "players_ranked": len(controller.rankings_sorted())
        }
    ))

@app.route('/cities')
def cities():
    return jsonify(cities_as_geojson(get_controller().catalog.cities))

@app.route('/game/start', methods=['POST'])
def start_game():
    data = _json_body()
    controller = get_controller()

    first_city = None
    city_name = data.get('city')
    if city_name:
        first_city = next((c for c in controller.catalog.cities if c.name == city_name), None)
        if first_city is None:
            return jsonify(format_response(False, f"Unknown city: {city_name}")), 400

    with state['lock']:
        try:
            snapshot = controller.start_game(data.get('player_name', ''), first_city)
        except ValidationError as e:
            logging.warning(f"Game not started: {e}")
            return jsonify(format_response(False, str(e))), 400
        position = controller.plane_position

    return jsonify(format_response(
        success=True,
        message=f"Navigate to: {snapshot.current_city.label}",
        data={
            "session": snapshot_to_dict(snapshot),
            "plane": {"lat": position.lat, "lon": position.lon}
        }
    ))

@app.route('/plane/move', methods=['POST'])
def move_plane():
    data = _json_body()
    try:
        d_lat = float(data.get('d_lat', 0.0))
        d_lon = float(data.get('d_lon', 0.0))
    except (TypeError, ValueError):
        return jsonify(format_response(False, "d_lat and d_lon must be numbers")), 400

    controller = get_controller()
    with state['lock']:
        position, outcome = controller.move_plane(d_lat, d_lon)
        target = controller.session.current_city
        heading = controller.plane.heading_to(target.coordinate) if target else None

    return jsonify(format_response(
        success=True,
        message=outcome.message if outcome else "Plane moved",
        data={
            "plane": {"lat": position.lat, "lon": position.lon, "heading": heading},
            "arrival": outcome_to_dict(outcome)
        }
    ))

@app.route('/game/continue', methods=['POST'])
def continue_game():
    controller = get_controller()
    with state['lock']:
        try:
            next_city = controller.advance_to_city()
        except ValidationError as e:
            return jsonify(format_response(False, str(e))), 409
        snapshot = controller.snapshot()

    if next_city is None:
        return jsonify(format_response(False, "No arrival to continue from", {"session": snapshot_to_dict(snapshot)})), 409
    return jsonify(format_response(
        success=True,
        message=f"Navigate to: {next_city.label}",
        data={"next_city": city_to_dict(next_city), "session": snapshot_to_dict(snapshot)}
    ))

@app.route('/game/arrive', methods=['POST'])
def arrive():
    controller = get_controller()
    with state['lock']:
        try:
            outcome = controller.report_arrival()
        except ValidationError as e:
            return jsonify(format_response(False, str(e))), 409

    status = 409 if outcome.effect is ArrivalEffect.IGNORED else 200
    return jsonify(format_response(
        success=status == 200,
        message=outcome.message,
        data={"arrival": outcome_to_dict(outcome)}
    )), status

@app.route('/game/session')
def game_session():
    snapshot = get_controller().snapshot()
    return jsonify(format_response(True, snapshot.phase.value, {"session": snapshot_to_dict(snapshot)}))

@app.route('/rankings')
def rankings():
    players = rankings_to_list(get_controller().rankings_sorted())
    return jsonify(format_response(True, f"{len(players)} players ranked", {"players": players}))

@app.route('/rules')
def rules():
    return jsonify(format_response(True, "Game rules", {
        "cities_per_session": GameConstants.CITIES_PER_SESSION,
        "arrival_threshold_m": GameConstants.ARRIVAL_THRESHOLD_M,
        "plane_step_deg": GameConstants.PLANE_STEP_DEG,
        "max_tier": GameConstants.MAX_TIER,
        "primary_only_max_tier": GameConstants.PRIMARY_ONLY_MAX_TIER
    }))

if __name__ == '__main__':
    logging.basicConfig(level=logging.INFO, format='%(asctime)s - %(levelname)s - %(message)s')
    get_controller()
    app.run(debug=True, use_reloader=False)
