"""
Ranking Controller

Handles the leaderboard endpoints.
"""

from flask import Blueprint, request, jsonify
from ..models.errors import ScoreSubmissionError
from ..services.game_service import get_game_service
from ..services.ranking_service import get_ranking_service
from ..utils.decorators import require_service
from ..utils.game_logger import game_logger

ranking_bp = Blueprint('ranking', __name__)


@ranking_bp.route('/ranking', methods=['GET'])
@require_service(get_ranking_service, 'Ranking')
def get_ranking(service):
    """Get the sorted leaderboard."""
    try:
        game_logger.log_user_action(request, 'get_ranking')

        response_data = {
            'success': True,
            'ranking': [entry.to_dict() for entry in service.get_ranking()]
        }
        game_logger.log_server_response(request, 'get_ranking', True, response_data)
        return jsonify(response_data)

    except Exception as e:
        game_logger.log_error(request, e, 'get_ranking')
        error_response = {
            'success': False,
            'error': str(e)
        }
        game_logger.log_server_response(request, 'get_ranking', False, error_response)
        return jsonify(error_response), 500


@ranking_bp.route('/ranking', methods=['POST'])
@require_service(get_ranking_service, 'Ranking')
def save_score(service):
    """Save the finished round under a player name, then start a new round."""
    try:
        game_service = get_game_service()
        if not game_service:
            return jsonify({
                'success': False,
                'error': 'Game service unavailable'
            }), 500

        data = request.get_json(silent=True) or {}
        name = data.get('name')
        game_logger.log_user_action(request, 'save_score', name=name)

        round_state = game_service.get_round_state()
        try:
            ranking = service.submit_score(name if isinstance(name, str) else '', round_state)
        except ScoreSubmissionError as e:
            error_response = {
                'success': False,
                'error': str(e)
            }
            game_logger.log_server_response(request, 'save_score', False, error_response)
            return jsonify(error_response), 400

        state = game_service.restart()

        response_data = {
            'success': True,
            'ranking': [entry.to_dict() for entry in ranking],
            'state': state
        }
        game_logger.log_server_response(request, 'save_score', True, response_data)
        game_logger.log_game_event(
            'score_saved', request.remote_addr,
            name=name.strip(), attempts=round_state.current_row, acertos=round_state.acertos
        )
        return jsonify(response_data)

    except Exception as e:
        game_logger.log_error(request, e, 'save_score')
        error_response = {
            'success': False,
            'error': str(e)
        }
        game_logger.log_server_response(request, 'save_score', False, error_response)
        return jsonify(error_response), 500


@ranking_bp.route('/ranking', methods=['DELETE'])
@require_service(get_ranking_service, 'Ranking')
def clear_ranking(service):
    """Reset the leaderboard."""
    try:
        game_logger.log_user_action(request, 'clear_ranking')

        service.clear_ranking()

        response_data = {
            'success': True,
            'ranking': []
        }
        game_logger.log_server_response(request, 'clear_ranking', True, response_data)
        game_logger.log_game_event('ranking_cleared', request.remote_addr)
        return jsonify(response_data)

    except Exception as e:
        game_logger.log_error(request, e, 'clear_ranking')
        error_response = {
            'success': False,
            'error': str(e)
        }
        game_logger.log_server_response(request, 'clear_ranking', False, error_response)
        return jsonify(error_response), 500
