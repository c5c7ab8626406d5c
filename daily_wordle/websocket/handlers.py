"""
WebSocket Event Handlers

Presentation-layer adapter: forwards keyboard and modal commands to the
caller's game engine and pushes every state change back as 'game_state'.
"""

from flask import request
from flask_socketio import emit
from ..models.errors import WordleError
from ..services.session_service import get_session_service
from ..utils.decorators import websocket_session_required
from ..utils.game_logger import game_logger
from ..utils.helpers import error_payload, snapshot_payload


def register_websocket_handlers(socketio):
    """Register all WebSocket event handlers."""
    
    def _push_state(sid):
        def listener(engine):
            socketio.emit('game_state', snapshot_payload(engine), to=sid)
        return listener
    
    @socketio.on('connect')
    def handle_connect():
        """Handle WebSocket connection."""
        pass

    @socketio.on('disconnect')
    def handle_disconnect(reason=None):
        """Tear down the caller's engine; pending reveals are discarded."""
        session_service = get_session_service()
        if session_service and session_service.end_session(request.sid):
            game_logger.logger.info(f"WebSocket: session {request.sid} closed ({reason or 'disconnect'})")

    @socketio.on('start_game')
    def handle_start_game(data=None):
        """Load (or resume) today's puzzle for a player."""
        session_service = get_session_service()
        if not session_service:
            emit('error', {'error': 'Session service unavailable', 'error_type': 'ServiceUnavailable'})
            return
        
        player_id = data.get('player_id') if isinstance(data, dict) else None
        game_logger.log_user_action(request, 'start_game', player=player_id)
        
        try:
            engine = session_service.create_session(request.sid, player_id)
            engine.add_listener(_push_state(request.sid))
            engine.start()
        except (ValueError, WordleError) as e:
            session_service.end_session(request.sid)
            game_logger.log_error(request, e, 'start_game')
            emit('error', error_payload(e))

    @socketio.on('keyboard_change')
    @websocket_session_required
    def handle_keyboard_change(data=None, engine=None):
        """Replace the letters of the attempt being typed."""
        text = data.get('text', '') if isinstance(data, dict) else None
        if not isinstance(text, str):
            emit('error', {'error': 'text must be a string', 'error_type': 'InvalidAttemptError'})
            return
        
        game_logger.log_user_action(request, 'keyboard_change', engine.puzzle_id, text=text)
        
        if not engine.set_current_guess(text):
            # Ignored input: resend state so the client drops the rejected text
            emit('game_state', snapshot_payload(engine))

    @socketio.on('submit_attempt')
    @websocket_session_required
    def handle_submit_attempt(data=None, engine=None):
        """Score the attempt being typed."""
        game_logger.log_user_action(
            request, 'submit_attempt', engine.puzzle_id,
            attempt_index=engine.current_attempt_index
        )
        try:
            engine.submit()
        except WordleError as e:
            game_logger.log_error(request, e, 'submit_attempt', engine.puzzle_id)
            emit('error', error_payload(e))

    @socketio.on('show_result_modal')
    @websocket_session_required
    def handle_show_result_modal(data=None, engine=None):
        engine.show_result_modal()

    @socketio.on('dismiss_result_modal')
    @websocket_session_required
    def handle_dismiss_result_modal(data=None, engine=None):
        engine.dismiss_result_modal()
