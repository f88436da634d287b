"""
Centralized Error Handler
Turns representation errors into JSON error responses
"""
import traceback
from typing import Optional, Dict, Any
from sanic import Request
from sanic.exceptions import SanicException
from sanic.response import HTTPResponse
from representations.logging import getLogger


class ErrorHandler:
    """
    Provides standardized JSON error responses and error reporting

    Usage:
        handler = ErrorHandler(debug=True)
        app.error_handler.add(FrameworkException, handler.handle_error)
    """
    def __init__(self, debug: bool = False, include_trace: bool = False):
        """
        Initialize error handler
        Args:
            debug: Enable debug mode (expose messages of foreign exceptions)
            include_trace: Include stack trace in error response (only in debug)
        """
        self.debug = debug
        self.include_trace = include_trace and debug
        self.logger = getLogger('application')

    async def handle_error(self, request: Request, error: Exception) -> HTTPResponse:
        """Sanic error handler entry point"""
        return self.render(error, request)

    def render(self, error: Exception, request: Optional[Request] = None) -> HTTPResponse:
        """
        Build a JSON error response for an exception
        """
        from representations.http import ResponseHelper

        response_data = self._build_error_response(error)
        status_code = self._get_status_code(error)

        self._log_error(error, status_code, request)

        return ResponseHelper.error(
            message=response_data['error']['message'],
            errors=response_data['error'].get('trace'),
            status=status_code,
            code=response_data['error']['type']
        )

    def _build_error_response(self, error: Exception) -> Dict[str, Any]:
        """
        Build standardized error payload
        """
        response = {
            'error': {
                'type': error.__class__.__name__,
                'message': self._get_error_message(error),
            }
        }

        if self.include_trace:
            response['error']['trace'] = traceback.format_exception(
                type(error), error, error.__traceback__
            )

        return response

    def _get_error_message(self, error: Exception) -> str:
        """
        Get user-friendly error message
        """
        if isinstance(error, SanicException):
            return str(error)

        if hasattr(error, 'message'):
            # Errors that carry internal detail show their class message instead
            if self.debug or getattr(error, 'public', True):
                return error.message
            return type(error).message

        # Don't expose internals outside debug mode
        if not self.debug:
            return "An error occurred while processing your request"

        return str(error)

    def _get_status_code(self, error: Exception) -> int:
        """
        Determine HTTP status code from error
        """
        if isinstance(error, SanicException):
            return error.status_code

        if hasattr(error, 'status_code'):
            return error.status_code

        return 500

    def _log_error(self, error: Exception, status_code: int, request: Optional[Request]):
        """
        Log error with context
        """
        log_data = {
            'error_type': error.__class__.__name__,
            'error_message': str(error),
            'status_code': status_code,
        }

        if request is not None:
            log_data['method'] = request.method
            log_data['path'] = request.path

        if status_code >= 500:
            self.logger.error(
                f"{status_code} Error: {error.__class__.__name__}",
                extra=log_data,
                exc_info=error
            )
        else:
            self.logger.warning(
                f"{status_code} Error: {error.__class__.__name__}",
                extra=log_data
            )
