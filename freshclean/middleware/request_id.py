"""
Request ID middleware for request tracing and logging
"""
import uuid


class RequestIdMiddleware:
    """
    WSGI middleware to add unique request ID to each request
    Reuses an incoming X-Request-ID header when the client sends one
    """

    def __init__(self, app):
        self.app = app

    def __call__(self, environ, start_response):
        request_id = environ.get('HTTP_X_REQUEST_ID') or str(uuid.uuid4())
        environ['request_id'] = request_id

        def custom_start_response(status, headers, exc_info=None):
            headers.append(('X-Request-ID', request_id))
            return start_response(status, headers, exc_info)

        return self.app(environ, custom_start_response)
