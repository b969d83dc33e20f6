"""
Endpoint Decorators

Contains decorators shared by the HTTP controllers.
"""

from functools import wraps
from flask import jsonify


def require_service(getter, name: str):
    """
    Decorator that returns a 500 envelope when a global service has not been
    initialized, and passes the service to the view as `service`.

    Args:
        getter: Zero-argument accessor such as get_game_service
        name: Human readable service name for the error message
    """
    def decorator(f):
        @wraps(f)
        def decorated_function(*args, **kwargs):
            service = getter()
            if not service:
                return jsonify({
                    'success': False,
                    'error': f'{name} service unavailable'
                }), 500

            kwargs['service'] = service
            return f(*args, **kwargs)

        return decorated_function

    return decorator
