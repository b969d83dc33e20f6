"""
WebSocket Event Handlers

Keyboard input arriving over Socket.IO. Each key maps to one round
operation and the updated round is pushed back to the sender.
"""

from flask import request
from flask_socketio import emit
from ..models.errors import GuessError
from ..services.game_service import get_game_service
from ..utils.game_logger import game_logger

ENTER_KEYS = {'ENTER', 'Enter'}
DELETE_KEYS = {'BACKSPACE', 'Backspace', 'DELETE', 'Delete'}


def register_websocket_handlers(socketio):
    """Register all WebSocket event handlers."""

    @socketio.on('connect')
    def handle_connect():
        """Send the current round to a newly connected client."""
        game_service = get_game_service()
        if game_service:
            emit('round_state', game_service.get_view())

    @socketio.on('key_press')
    def handle_key_press(data):
        """Handle one key from the on-screen or physical keyboard."""
        game_service = get_game_service()
        if not game_service:
            emit('error', {'error': 'Game service unavailable'})
            return

        key = (data or {}).get('key') if isinstance(data, dict) else None
        if not isinstance(key, str) or not key:
            emit('error', {'error': 'Key is required'})
            return

        if key in ENTER_KEYS:
            try:
                state = game_service.submit_guess()
            except GuessError as e:
                game_logger.logger.info(f"Guess rejected over WebSocket ({request.sid}): {e}")
                emit('guess_error', {'error': str(e), 'error_type': type(e).__name__})
                return
            game_logger.log_round_end(state, request.remote_addr)
        elif key in DELETE_KEYS:
            state = game_service.delete_letter()
        else:
            state = game_service.append_letter(key)

        emit('round_state', state)

    @socketio.on('restart')
    def handle_restart(data=None):
        """Start a new round on request."""
        game_service = get_game_service()
        if not game_service:
            emit('error', {'error': 'Game service unavailable'})
            return

        state = game_service.restart()
        game_logger.log_game_event('round_started', request.remote_addr)
        emit('round_state', state)
