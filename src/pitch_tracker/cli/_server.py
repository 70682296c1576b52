import logging

from flask import Flask, Response, jsonify, request

from pitch_tracker.domain.pitch import PitchRecord
from pitch_tracker.services.query import PitchingQueryService

logger = logging.getLogger(__name__)


def pitch_to_json(pitch: PitchRecord) -> dict[str, object]:
    return {
        "id": pitch.id,
        "pitcherId": pitch.pitcher_id,
        "inning": pitch.inning_label,
        "pitcherName": pitch.pitcher_name,
        "batterName": pitch.batter_name,
        "count": pitch.count_label,
        "pitchType": pitch.pitch_type,
        "speed": pitch.speed,
        "result": pitch.result_description,
    }


def _parse_id(raw: str | None) -> int | None:
    """Positive decimal id, or None."""
    if raw is None or not raw.strip().isdecimal():
        return None
    value = int(raw)
    return value if value > 0 else None


def create_pitch_data_app(service: PitchingQueryService) -> Flask:
    """Create a Flask app serving pitch detail for a game.

    GET /api/pitch-data/<game_id> returns the game's pitch records as JSON,
    optionally narrowed with ``?pitcherId=``. Non-numeric ids are rejected
    with 400; unexpected failures answer 500 with the error message.
    GET /api/pitchers lists the configured pitchers.
    """
    app = Flask(__name__)

    @app.route("/api/pitch-data/<game_id>")
    def pitch_data(game_id: str) -> tuple[Response, int]:
        parsed_game_id = _parse_id(game_id)
        if parsed_game_id is None:
            return jsonify({"error": "Invalid game id"}), 400

        raw_pitcher_id = request.args.get("pitcherId")
        pitcher_id = _parse_id(raw_pitcher_id)
        if raw_pitcher_id is not None and pitcher_id is None:
            return jsonify({"error": "Invalid pitcher id"}), 400

        try:
            pitches = service.pitches(parsed_game_id, pitcher_id)
        except Exception as e:
            logger.exception("Error serving pitch data for game %d", parsed_game_id)
            return jsonify({"error": str(e) or "Internal Server Error"}), 500
        return jsonify([pitch_to_json(p) for p in pitches]), 200

    @app.route("/api/pitchers")
    def pitchers() -> tuple[Response, int]:
        return jsonify([{"id": p.id, "name": p.name, "nameEn": p.name_en} for p in service.pitchers()]), 200

    return app
