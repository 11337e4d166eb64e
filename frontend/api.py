# frontend/api.py

from flask import Blueprint, current_app, jsonify, request

from backend.board import NoSafeRevealError
from backend.game import GridSession

api_blueprint = Blueprint("api", __name__)

DEFAULT_WIDTH = 8
DEFAULT_HEIGHT = 8
DEFAULT_DIFFICULTY = 15
MAX_SIDE = 200


def as_int(value):
    """int() that refuses to truncate: 3.7 and True are errors, 3.0 is 3."""
    if isinstance(value, bool):
        raise TypeError(f"expected an integer, got {value!r}")
    number = int(value)
    if number != value and not isinstance(value, str):
        raise ValueError(f"expected an integer, got {value!r}")
    return number


def parse_grid_params(data):
    """
    Pull width/height/difficulty/seed out of a request payload.
    Raises ValueError with a message suitable for the client.
    """
    if not isinstance(data, dict):
        raise ValueError("request body must be a JSON object")

    try:
        width = as_int(data.get("width", DEFAULT_WIDTH))
        height = as_int(data.get("height", DEFAULT_HEIGHT))
        difficulty = as_int(data.get("difficulty", DEFAULT_DIFFICULTY))
        seed = data.get("seed")
        seed = as_int(seed) if seed is not None else None
    except (TypeError, ValueError, OverflowError):
        raise ValueError("width, height, difficulty and seed must be integers")

    if not (1 <= width <= MAX_SIDE and 1 <= height <= MAX_SIDE):
        raise ValueError(f"width and height must be between 1 and {MAX_SIDE}")
    if not 0 <= difficulty <= 100:
        raise ValueError("difficulty must be between 0 and 100")
    return width, height, difficulty, seed


def build_session(data):
    width, height, difficulty, seed = parse_grid_params(data)
    return GridSession(width=width, height=height, difficulty=difficulty, seed=seed,
                       config=current_app.config["GRID_CONFIG"])


@api_blueprint.route("/grid", methods=["POST"])
def new_grid():
    data = request.get_json(silent=True) or {}
    try:
        session = build_session(data)
    except ValueError as exc:
        return jsonify({"error": str(exc)}), 400

    try:
        state = session.generate()
    except NoSafeRevealError:
        return jsonify({"error": "no safe reveal available"}), 422
    return jsonify(state)
