from flask import Blueprint, request, jsonify, current_app
from typing import Any, Dict, List, Optional

from .models import Match, CustomAchievement, Goal
from .analytics import (
    calculate_historical_records,
    calculate_current_streaks,
    calculate_team_morale,
    calculate_consistency,
    yearly_consistency,
    monthly_consistency,
    momentum_series,
    evaluate_achievements,
    evaluate_custom_achievements,
    evaluate_goals,
    calculate_player_stats,
)

# Create blueprint
bp = Blueprint('analytics', __name__, url_prefix='/api/analytics')


def get_json_body() -> Dict[str, Any]:
    """Request body as a dict; anything else is a client error"""
    data = request.get_json(silent=True)
    if not isinstance(data, dict):
        raise ValueError('Request body must be a JSON object')
    return data


def load_matches(data: Dict[str, Any]) -> List[Match]:
    raw_matches = data.get('matches', [])
    if not isinstance(raw_matches, list):
        raise ValueError('matches must be a list')
    return [Match(**m) for m in raw_matches]


def parse_year(data: Dict[str, Any]) -> Optional[int]:
    year = data.get('year')
    if year is None or year == '' or year == 'all':
        return None
    return int(year)


def bad_request(e: Exception):
    current_app.logger.warning(f"Invalid analytics request on {request.path}: {e}")
    return jsonify({'success': False, 'errors': [f'Invalid request data: {str(e)}']}), 400


@bp.route('/records', methods=['POST'])
def historical_records():
    """All-time streak and single-match records"""
    try:
        matches = load_matches(get_json_body())
    except (ValueError, TypeError) as e:
        return bad_request(e)

    records = calculate_historical_records(matches)
    return jsonify({'success': True, 'records': records.model_dump()})


@bp.route('/streaks', methods=['POST'])
def current_streaks():
    """Streaks still running at the latest match"""
    try:
        matches = load_matches(get_json_body())
    except (ValueError, TypeError) as e:
        return bad_request(e)

    streaks = calculate_current_streaks(matches)
    return jsonify({'success': True, 'streaks': streaks.model_dump()})


@bp.route('/morale', methods=['POST'])
def morale():
    """Current morale; null when there are not enough matches yet"""
    try:
        matches = load_matches(get_json_body())
    except (ValueError, TypeError) as e:
        return bad_request(e)

    result = calculate_team_morale(matches)
    return jsonify({
        'success': True,
        'morale': result.model_dump(mode='json') if result else None
    })


@bp.route('/consistency', methods=['POST'])
def consistency():
    """Consistency for the selected year (or all time), per year and per month"""
    try:
        data = get_json_body()
        matches = load_matches(data)
        year = parse_year(data)
    except (ValueError, TypeError) as e:
        return bad_request(e)

    if year is None:
        selected = matches
        monthly = []
    else:
        selected = [m for m in matches if m.match_date.year == year]
        monthly = monthly_consistency(matches, year)

    return jsonify({
        'success': True,
        'year': year,
        'score': calculate_consistency(selected),
        'yearly': [y.model_dump() for y in yearly_consistency(matches)],
        'monthly': [m.model_dump() for m in monthly]
    })


@bp.route('/momentum', methods=['POST'])
def momentum():
    """Trailing consistency at each match of a year"""
    try:
        data = get_json_body()
        matches = load_matches(data)
        year = parse_year(data)
    except (ValueError, TypeError) as e:
        return bad_request(e)

    series = momentum_series(matches, year)
    return jsonify({'success': True, 'series': [point.model_dump() for point in series]})


@bp.route('/achievements', methods=['POST'])
def achievements():
    """Built-in achievements with progress and unlocked tier"""
    try:
        matches = load_matches(get_json_body())
    except (ValueError, TypeError) as e:
        return bad_request(e)

    results = evaluate_achievements(matches)
    return jsonify({
        'success': True,
        'achievements': [a.model_dump() for a in results],
        'unlocked_count': sum(1 for a in results if a.unlocked)
    })


@bp.route('/custom-achievements', methods=['POST'])
def custom_achievements():
    """Re-evaluate user-defined achievements against the matches"""
    try:
        data = get_json_body()
        matches = load_matches(data)
        raw_achievements = data.get('achievements', [])
        if not isinstance(raw_achievements, list):
            raise ValueError('achievements must be a list')
        custom = [CustomAchievement(**a) for a in raw_achievements]
    except (ValueError, TypeError) as e:
        return bad_request(e)

    results = evaluate_custom_achievements(custom, matches)
    return jsonify({'success': True, 'achievements': [a.model_dump() for a in results]})


@bp.route('/goals', methods=['POST'])
def goals():
    """Progress towards personal goals"""
    try:
        data = get_json_body()
        matches = load_matches(data)
        raw_goals = data.get('goals', [])
        if not isinstance(raw_goals, list):
            raise ValueError('goals must be a list')
        goal_list = [Goal(**g) for g in raw_goals]
    except (ValueError, TypeError) as e:
        return bad_request(e)

    results = evaluate_goals(goal_list, matches)
    return jsonify({'success': True, 'goals': [g.model_dump(mode='json') for g in results]})


@bp.route('/level', methods=['POST'])
def player_level():
    """Player level and XP"""
    try:
        matches = load_matches(get_json_body())
    except (ValueError, TypeError) as e:
        return bad_request(e)

    return jsonify({'success': True, 'stats': calculate_player_stats(matches).model_dump()})
