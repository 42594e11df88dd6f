from flask import Blueprint, current_app, jsonify, request

from ..services.aggregation import room_grid
from ..services.state import available_rooms
from ..services.store import load_state
from ..utils.serialize import room_out
from ..utils.time import today_wib


bp = Blueprint("rooms", __name__)


@bp.route("/rooms", methods=["GET"])
def get_rooms():
    state = load_state()
    grid = room_grid(state.customers, today_wib(), current_app.config["TOTAL_ROOMS"])
    return jsonify([room_out(r) for r in grid])


@bp.route("/rooms/available", methods=["GET"])
def get_available_rooms():
    current = request.args.get("current", type=int)
    state = load_state()
    return jsonify(available_rooms(state, current_app.config["TOTAL_ROOMS"], current_room=current))
