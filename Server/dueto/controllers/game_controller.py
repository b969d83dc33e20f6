"""
Game Controller

Handles the round endpoints: typing, submitting guesses and restarting.
"""

from flask import Blueprint, request, jsonify
from ..models.errors import GuessError
from ..services.game_service import get_game_service
from ..services.ranking_service import get_ranking_service
from ..utils.decorators import require_service
from ..utils.game_logger import game_logger

game_bp = Blueprint('game', __name__)


@game_bp.route('/round', methods=['GET'])
@require_service(get_game_service, 'Game')
def get_round(service):
    """Get the current round."""
    try:
        game_logger.log_user_action(request, 'get_round')

        response_data = {
            'success': True,
            'state': service.get_view()
        }
        game_logger.log_server_response(request, 'get_round', True, response_data)
        return jsonify(response_data)

    except Exception as e:
        game_logger.log_error(request, e, 'get_round')
        error_response = {
            'success': False,
            'error': str(e)
        }
        game_logger.log_server_response(request, 'get_round', False, error_response)
        return jsonify(error_response), 500


@game_bp.route('/round', methods=['POST'])
@require_service(get_game_service, 'Game')
def restart_round(service):
    """Discard the current round and start a new one."""
    try:
        game_logger.log_user_action(request, 'restart')

        state = service.restart()
        response_data = {
            'success': True,
            'state': state
        }

        game_logger.log_server_response(request, 'restart', True, response_data)
        game_logger.log_game_event('round_started', request.remote_addr)
        return jsonify(response_data)

    except Exception as e:
        game_logger.log_error(request, e, 'restart')
        error_response = {
            'success': False,
            'error': str(e)
        }
        game_logger.log_server_response(request, 'restart', False, error_response)
        return jsonify(error_response), 500


@game_bp.route('/round/letter', methods=['POST'])
@require_service(get_game_service, 'Game')
def append_letter(service):
    """Type one letter into the guess buffer."""
    try:
        data = request.get_json(silent=True) or {}
        letter = data.get('letter')
        if not isinstance(letter, str) or not letter:
            error_response = {
                'success': False,
                'error': 'Letter is required'
            }
            game_logger.log_server_response(request, 'append_letter', False, error_response)
            return jsonify(error_response), 400

        game_logger.log_user_action(request, 'append_letter', letter=letter)

        response_data = {
            'success': True,
            'state': service.append_letter(letter)
        }
        game_logger.log_server_response(request, 'append_letter', True, response_data)
        return jsonify(response_data)

    except Exception as e:
        game_logger.log_error(request, e, 'append_letter')
        error_response = {
            'success': False,
            'error': str(e)
        }
        game_logger.log_server_response(request, 'append_letter', False, error_response)
        return jsonify(error_response), 500


@game_bp.route('/round/delete', methods=['POST'])
@require_service(get_game_service, 'Game')
def delete_letter(service):
    """Remove the last letter from the guess buffer."""
    try:
        game_logger.log_user_action(request, 'delete_letter')

        response_data = {
            'success': True,
            'state': service.delete_letter()
        }
        game_logger.log_server_response(request, 'delete_letter', True, response_data)
        return jsonify(response_data)

    except Exception as e:
        game_logger.log_error(request, e, 'delete_letter')
        error_response = {
            'success': False,
            'error': str(e)
        }
        game_logger.log_server_response(request, 'delete_letter', False, error_response)
        return jsonify(error_response), 500


@game_bp.route('/round/guess', methods=['POST'])
@require_service(get_game_service, 'Game')
def submit_guess(service):
    """Submit the buffered guess for evaluation against both words."""
    try:
        game_logger.log_user_action(request, 'submit_guess')

        try:
            state = service.submit_guess()
        except GuessError as e:
            # Rejected guesses leave the round untouched
            error_response = {
                'success': False,
                'error': str(e),
                'error_type': type(e).__name__,
                'state': service.get_view()
            }
            game_logger.log_server_response(
                request, 'submit_guess', False, error_response,
                validation_error=str(e)
            )
            return jsonify(error_response), 400

        response_data = {
            'success': True,
            'state': state
        }
        game_logger.log_server_response(
            request, 'submit_guess', True, response_data,
            row=state['current_row'], game_over=state['game_over']
        )
        game_logger.log_round_end(state, request.remote_addr)
        return jsonify(response_data)

    except Exception as e:
        game_logger.log_error(request, e, 'submit_guess')
        error_response = {
            'success': False,
            'error': str(e)
        }
        game_logger.log_server_response(request, 'submit_guess', False, error_response)
        return jsonify(error_response), 500


@game_bp.route('/health', methods=['GET'])
def health_check():
    """Health check endpoint."""
    try:
        game_service = get_game_service()
        ranking_service = get_ranking_service()

        game_logger.log_user_action(request, 'health_check')

        response_data = {
            'status': 'healthy',
            'game_available': game_service is not None,
            'ranking_available': ranking_service is not None,
            'store': type(game_service.store).__name__ if game_service else None,
            'word_source': type(game_service.word_source).__name__ if game_service else None,
            'log_stats': game_logger.get_log_stats()
        }

        game_logger.log_server_response(request, 'health_check', True, response_data)
        return jsonify(response_data)

    except Exception as e:
        game_logger.log_error(request, e, 'health_check')
        error_response = {
            'status': 'error',
            'error': str(e)
        }
        game_logger.log_server_response(request, 'health_check', False, error_response)
        return jsonify(error_response), 500
