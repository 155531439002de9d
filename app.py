"""
FNL Coach: Flask JSON API.
Stateless: every request carries the serialized career (`state`) and gets the next one back.
Callers persist state however they like; the server holds nothing between requests.
"""
import logging
import random

from flask import Flask, jsonify, request

from generation import seeded_rng
from models import ActiveGame, CoachProfile, GameState, ARCHETYPE_DESCRIPTIONS, compute_team_rating
from models.constants import (
    ROSTER_CAP,
    PHASE_WEEKS,
    PHASE_LABELS,
    PLAY_CALLS,
    COACH_ARCHETYPES,
    HIREABLE_ROLES,
    STYLE_LABELS,
)
from simulation import (
    create_career,
    advance_week,
    current_matchup,
    launch_game,
    merge_finished_game,
    execute_single_play,
    execute_coach_play,
    available_play_calls,
    recruit,
    scout,
    cut_player,
    reorder_roster,
    move_player,
    auto_sort_roster,
    hire_staff,
    set_staff_style,
    staff_hire_cost,
)

_log = logging.getLogger("fnlcoach.app")

app = Flask(__name__)
app.config["ROSTER_CAP"] = ROSTER_CAP
app.config.from_prefixed_env("FNL")

MALFORMED = (KeyError, TypeError, ValueError, AttributeError)


def _body() -> dict:
    data = request.get_json(silent=True)
    return data if isinstance(data, dict) else {}


def _rng(data: dict) -> random.Random:
    """RNG for the request; honours an optional int or string `seed`."""
    seed_raw = data.get("seed")
    if seed_raw is None or seed_raw == "":
        return random.Random()
    seed = seed_raw
    if isinstance(seed_raw, str):
        try:
            seed = int(seed_raw)
        except ValueError:
            seed = seed_raw  # string seeds are hashed
    return seeded_rng(seed)


def _load_state(data: dict):
    """Returns (GameState, None) or (None, error response)."""
    raw = data.get("state")
    if not isinstance(raw, dict):
        return None, (jsonify({"error": "Missing state"}), 400)
    try:
        return GameState.from_dict(raw), None
    except MALFORMED as e:
        _log.warning("Rejected malformed state: %r", e)
        return None, (jsonify({"error": f"Malformed state: {e}"}), 400)


def _load_game(raw):
    if not isinstance(raw, dict):
        return None, (jsonify({"error": "Missing game"}), 400)
    try:
        return ActiveGame.from_dict(raw), None
    except MALFORMED as e:
        return None, (jsonify({"error": f"Malformed game: {e}"}), 400)


def _state_response(state: GameState):
    return jsonify({"state": state.to_dict()})


# ===================================================================
# Career and season
# ===================================================================

@app.route("/api/constants", methods=["GET"])
def api_constants():
    """Policy constants the client needs to enforce and display."""
    return jsonify({
        "roster_cap": app.config["ROSTER_CAP"],
        "phase_weeks": PHASE_WEEKS,
        "phase_labels": PHASE_LABELS,
        "play_calls": list(PLAY_CALLS),
        "coach_archetypes": ARCHETYPE_DESCRIPTIONS,
        "hireable_roles": list(HIREABLE_ROLES),
        "style_labels": STYLE_LABELS,
    })


@app.route("/api/career", methods=["POST"])
def api_create_career():
    """Start a career: { coach: {name, appearance, archetype}, team_name, seed? }."""
    data = _body()
    team_name = (data.get("team_name") or "").strip()
    if not team_name:
        return jsonify({"error": "Missing team_name"}), 400
    coach_raw = data.get("coach")
    if not isinstance(coach_raw, dict):
        return jsonify({"error": f"Missing coach (archetype one of {', '.join(COACH_ARCHETYPES)})"}), 400
    try:
        coach = CoachProfile.from_dict(coach_raw)
    except ValueError as e:
        return jsonify({"error": str(e)}), 400
    return _state_response(create_career(coach, team_name, _rng(data)))


@app.route("/api/season/advance", methods=["POST"])
def api_advance_week():
    data = _body()
    state, error = _load_state(data)
    if error:
        return error
    # A finished live game is merged by the advance itself
    if state.active_game is not None and not state.active_game.is_game_over:
        return jsonify({"error": "Finish the live game before advancing"}), 409
    return _state_response(advance_week(state, _rng(data)))


# ===================================================================
# Live game
# ===================================================================

@app.route("/api/game/start", methods=["POST"])
def api_game_start():
    """Start a live game for { matchup_id } (defaults to this week's matchup)."""
    data = _body()
    state, error = _load_state(data)
    if error:
        return error
    matchup_id = data.get("matchup_id")
    if not matchup_id:
        matchup = current_matchup(state)
        if matchup is None:
            return jsonify({"error": "No game this week"}), 404
        matchup_id = matchup.id
    matchup = state.find_matchup(matchup_id)
    if matchup is None:
        return jsonify({"error": "Matchup not found"}), 404
    if matchup.played:
        return jsonify({"error": "Matchup already played"}), 409
    state = launch_game(state, matchup_id, _rng(data))
    return jsonify({"state": state.to_dict(), "game": state.active_game.to_dict()})


@app.route("/api/game/play", methods=["POST"])
def api_game_play():
    """One autoplay tick: { game, seed? }."""
    data = _body()
    game, error = _load_game(data.get("game"))
    if error:
        return error
    game = execute_single_play(game, _rng(data))
    return jsonify({"game": game.to_dict(), "available_calls": available_play_calls(game)})


@app.route("/api/game/call", methods=["POST"])
def api_game_call():
    """Coach play call: { game, play_type, team_rating?, coach_archetype?, seed? }.
    When `state` is sent, team rating and archetype are read from it."""
    data = _body()
    game, error = _load_game(data.get("game"))
    if error:
        return error
    play_type = data.get("play_type")
    if play_type not in PLAY_CALLS:
        return jsonify({"error": f"play_type must be one of {', '.join(PLAY_CALLS)}"}), 400

    team_rating = data.get("team_rating", 0)
    archetype = data.get("coach_archetype")
    if "state" in data:
        state, error = _load_state(data)
        if error:
            return error
        team_rating = compute_team_rating(state.roster)
        archetype = state.coach.archetype
    try:
        team_rating = int(team_rating)
    except (TypeError, ValueError):
        return jsonify({"error": "team_rating must be an integer"}), 400

    game = execute_coach_play(game, play_type, team_rating, archetype, _rng(data))
    return jsonify({"game": game.to_dict(), "available_calls": available_play_calls(game)})


@app.route("/api/game/finish", methods=["POST"])
def api_game_finish():
    """Merge a finished game into the season: { state, game? } (game defaults to state's active game)."""
    data = _body()
    state, error = _load_state(data)
    if error:
        return error
    game = None
    if data.get("game") is not None:
        game, error = _load_game(data["game"])
        if error:
            return error
    target = game or state.active_game
    if target is None:
        return jsonify({"error": "No live game"}), 404
    if not target.is_game_over:
        return jsonify({"error": "Game is not over"}), 409
    return _state_response(merge_finished_game(state, game, _rng(data)))


# ===================================================================
# Recruiting
# ===================================================================

@app.route("/api/recruiting/recruit", methods=["POST"])
def api_recruit():
    data = _body()
    state, error = _load_state(data)
    if error:
        return error
    if len(state.roster) >= app.config["ROSTER_CAP"]:
        return jsonify({"error": f"Roster is full ({app.config['ROSTER_CAP']} players)"}), 409
    return _state_response(recruit(state, data.get("player_id", ""), _rng(data)))


@app.route("/api/recruiting/scout", methods=["POST"])
def api_scout():
    data = _body()
    state, error = _load_state(data)
    if error:
        return error
    if state.scouting_points <= 0:
        return jsonify({"error": "No scouting points left this week"}), 409
    return _state_response(scout(state, data.get("player_id", "")))


# ===================================================================
# Roster
# ===================================================================

@app.route("/api/roster/cut", methods=["POST"])
def api_cut_player():
    data = _body()
    state, error = _load_state(data)
    if error:
        return error
    return _state_response(cut_player(state, data.get("player_id", "")))


@app.route("/api/roster/reorder", methods=["POST"])
def api_reorder_roster():
    data = _body()
    state, error = _load_state(data)
    if error:
        return error
    player_ids = data.get("player_ids")
    if not isinstance(player_ids, list):
        return jsonify({"error": "Missing player_ids"}), 400
    return _state_response(reorder_roster(state, [str(pid) for pid in player_ids]))


@app.route("/api/roster/move", methods=["POST"])
def api_move_player():
    data = _body()
    state, error = _load_state(data)
    if error:
        return error
    direction = data.get("direction")
    if direction not in ("up", "down"):
        return jsonify({"error": "direction must be 'up' or 'down'"}), 400
    return _state_response(move_player(state, data.get("player_id", ""), direction))


@app.route("/api/roster/auto-sort", methods=["POST"])
def api_auto_sort():
    data = _body()
    state, error = _load_state(data)
    if error:
        return error
    key = data.get("key", "overall")
    if key not in ("overall", "potential"):
        return jsonify({"error": "key must be 'overall' or 'potential'"}), 400
    return _state_response(auto_sort_roster(state, key))


# ===================================================================
# Staff
# ===================================================================

@app.route("/api/staff/hire", methods=["POST"])
def api_hire_staff():
    data = _body()
    state, error = _load_state(data)
    if error:
        return error
    candidate_id = data.get("candidate_id", "")
    candidate = next((c for c in state.staff_candidates if c.id == candidate_id), None)
    if candidate is not None and state.user_school.budget < staff_hire_cost(candidate):
        return jsonify({"error": "Insufficient budget"}), 409
    return _state_response(hire_staff(state, candidate_id))


@app.route("/api/staff/style", methods=["POST"])
def api_staff_style():
    data = _body()
    state, error = _load_state(data)
    if error:
        return error
    try:
        value = int(data.get("value"))
    except (TypeError, ValueError):
        return jsonify({"error": "value must be an integer 0-100"}), 400
    return _state_response(set_staff_style(state, data.get("staff_id", ""), value))


if __name__ == "__main__":
    logging.basicConfig(level=logging.INFO, format="%(asctime)s %(name)s %(levelname)s %(message)s")
    app.run(debug=True, port=5000)
