"""
Attempt Controller

Handles the scoring and puzzle-information HTTP endpoints.
"""

from flask import Blueprint, request, jsonify
from ..config.game_settings import MAX_ATTEMPTS, WORD_LENGTH
from ..models.errors import InvalidWordError, WordOfDayUnavailableError
from ..services.scoring_service import get_scoring_service
from ..services.session_service import get_session_service
from ..utils.decorators import allow_methods
from ..utils.game_logger import game_logger

attempt_bp = Blueprint('attempt', __name__)

ALL_METHODS = ['GET', 'POST', 'PUT', 'PATCH', 'DELETE']


def _service_unavailable():
    return jsonify({'message': 'Scoring service unavailable'}), 500


@attempt_bp.route('/attempt', methods=ALL_METHODS)
@allow_methods('GET')
def score_attempt():
    """Score a submitted word against the word of the day, or an earlier puzzle if `puzzle_id` is given."""
    scoring_service = get_scoring_service()
    if not scoring_service:
        return _service_unavailable()
    
    word = request.args.get('word')
    requested_puzzle = request.args.get('puzzle_id', type=int)
    puzzle_id = None
    
    try:
        puzzle_id = requested_puzzle if requested_puzzle is not None else scoring_service.puzzle_id
        
        # Log user action
        game_logger.log_user_action(request, 'score_attempt', puzzle_id, word=word)
        
        if not isinstance(word, str):
            raise InvalidWordError("Submitted word is invalid")
        
        # No stripping: the raw value must be WORD_LENGTH long
        letters = scoring_service.score(word.lower(), requested_puzzle)
        response_data = {'letters': [letter.to_dict() for letter in letters]}
        
        game_logger.log_server_response(
            request, 'score_attempt', True, response_data, puzzle_id, word=word
        )
        return jsonify(response_data)
    
    except InvalidWordError as e:
        error_response = {'message': str(e)}
        game_logger.log_server_response(
            request, 'score_attempt', False, error_response, puzzle_id,
            validation_error=str(e), attempted_word=word
        )
        return jsonify(error_response), 422
    
    except WordOfDayUnavailableError as e:
        game_logger.log_error(request, e, 'score_attempt', puzzle_id)
        error_response = {'message': f'Failed to get word of the day: {e}'}
        game_logger.log_server_response(request, 'score_attempt', False, error_response, puzzle_id)
        return jsonify(error_response), 503
    
    except Exception as e:
        game_logger.log_error(request, e, 'score_attempt', puzzle_id)
        error_response = {'message': str(e)}
        game_logger.log_server_response(request, 'score_attempt', False, error_response, puzzle_id)
        return jsonify(error_response), 500


@attempt_bp.route('/puzzle', methods=ALL_METHODS)
@allow_methods('GET')
def get_puzzle():
    """Report today's puzzle number and board dimensions."""
    scoring_service = get_scoring_service()
    if not scoring_service:
        return _service_unavailable()
    
    try:
        game_logger.log_user_action(request, 'get_puzzle')
        
        puzzle_id = scoring_service.check_word_of_day()
        response_data = {
            'puzzle_id': puzzle_id,
            'word_length': WORD_LENGTH,
            'max_attempts': MAX_ATTEMPTS
        }
        
        game_logger.log_server_response(request, 'get_puzzle', True, response_data, puzzle_id)
        return jsonify(response_data)
    
    except WordOfDayUnavailableError as e:
        game_logger.log_error(request, e, 'get_puzzle')
        error_response = {'message': f'Failed to get word of the day: {e}'}
        game_logger.log_server_response(request, 'get_puzzle', False, error_response)
        return jsonify(error_response), 503


@attempt_bp.route('/health', methods=['GET'])
def health_check():
    """Health check endpoint."""
    try:
        session_service = get_session_service()
        
        game_logger.log_user_action(request, 'health_check')
        
        response_data = {
            'status': 'healthy',
            'scoring_available': get_scoring_service() is not None,
            'active_sessions': len(session_service.sessions) if session_service else 0,
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
