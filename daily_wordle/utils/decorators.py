"""
Request Decorators

Contains decorators shared by HTTP endpoints and WebSocket handlers.
"""

from functools import wraps
from flask import request, jsonify
from flask_socketio import emit


def allow_methods(*methods):
    """
    Decorator answering any HTTP method outside `methods` with a JSON 405.
    
    The route itself must be registered for every method it should answer,
    so disallowed methods reach this check instead of Flask's HTML 405 page.
    """
    allowed = {method.upper() for method in methods}
    
    def decorator(f):
        @wraps(f)
        def decorated_function(*args, **kwargs):
            if request.method not in allowed:
                response = jsonify({'message': 'Method not allowed'})
                response.headers['Allow'] = ', '.join(sorted(allowed))
                return response, 405
            return f(*args, **kwargs)
        return decorated_function
    
    return decorator


def websocket_session_required(f):
    """Decorator for WebSocket handlers that need the caller's game engine."""
    @wraps(f)
    def decorated_function(*args, **kwargs):
        from ..services.session_service import get_session_service
        
        session_service = get_session_service()
        if not session_service:
            emit('error', {'error': 'Session service unavailable', 'error_type': 'ServiceUnavailable'})
            return
        
        engine = session_service.get_session(request.sid)
        if engine is None:
            emit('error', {'error': 'No game started for this connection', 'error_type': 'NoSession'})
            return
        
        kwargs['engine'] = engine
        return f(*args, **kwargs)
    
    return decorated_function
