"""
Custom exception handlers for the Saint Central API.

Implements Problem+JSON (RFC 7807) for standardized error responses.
"""

import logging
from rest_framework import status
from rest_framework.views import exception_handler
from rest_framework.exceptions import APIException


logger = logging.getLogger(__name__)


class ProblemDetailException(APIException):
    """
    Custom exception for Problem+JSON (RFC 7807) responses.

    Allows raising exceptions with standardized error details.
    """
    status_code = status.HTTP_400_BAD_REQUEST
    default_detail = 'A problem occurred'
    default_code = 'error'
    default_title = None

    def __init__(self, detail=None, title=None, status_code=None, type_uri='about:blank', instance=None):
        self.title = title or self.default_title
        self.type_uri = type_uri
        self.instance = instance

        if status_code:
            self.status_code = status_code

        super().__init__(detail or self.default_detail)


class AlreadyMemberError(ProblemDetailException):
    status_code = status.HTTP_409_CONFLICT
    default_detail = 'You are already a member.'
    default_code = 'already_member'
    default_title = 'Already a Member'


class NotMemberError(ProblemDetailException):
    status_code = status.HTTP_400_BAD_REQUEST
    default_detail = 'You are not a member.'
    default_code = 'not_member'


class MediaUploadError(ProblemDetailException):
    status_code = status.HTTP_400_BAD_REQUEST
    default_detail = 'Failed to upload image.'
    default_code = 'upload_failed'
    default_title = 'Upload Error'


def problem_exception_handler(exc, context):
    """
    Custom exception handler that returns Problem+JSON responses (RFC 7807).

    This provides standardized error responses across all API endpoints.
    """
    # Call REST framework's default exception handler first
    response = exception_handler(exc, context)

    if response is not None:
        title = getattr(exc, 'title', None) or get_error_title(
            response.status_code)
        problem_data = {
            'type': getattr(exc, 'type_uri', 'about:blank'),
            'title': title,
            'status': response.status_code,
            'detail': get_error_detail(response.data),
        }

        request = context.get('request')
        if request:
            problem_data['instance'] = request.build_absolute_uri()

        # Add validation errors for 400 Bad Request
        if response.status_code == status.HTTP_400_BAD_REQUEST:
            problem_data['invalid_params'] = format_validation_errors(
                response.data)

        log_error(exc, context, response.status_code)

        response.data = problem_data
        response.content_type = 'application/problem+json'

    return response


def get_error_title(status_code):
    """Get human-readable title for HTTP status code."""
    titles = {
        400: 'Bad Request',
        401: 'Unauthorized',
        403: 'Forbidden',
        404: 'Not Found',
        405: 'Method Not Allowed',
        409: 'Conflict',
        422: 'Unprocessable Entity',
        429: 'Too Many Requests',
        500: 'Internal Server Error',
        502: 'Bad Gateway',
        503: 'Service Unavailable',
    }
    return titles.get(status_code, 'Error')


def get_error_detail(data):
    """Extract human-readable detail from response data."""
    if isinstance(data, dict):
        # Handle DRF serializer errors
        if 'detail' in data:
            return str(data['detail'])
        elif 'non_field_errors' in data:
            return '; '.join(str(error) for error in data['non_field_errors'])
        else:
            # Return first error message found
            for key, value in data.items():
                if isinstance(value, list) and value:
                    return f"{key}: {value[0]}"
                elif isinstance(value, str):
                    return f"{key}: {value}"
    elif isinstance(data, list) and data:
        return str(data[0])

    return str(data)


def format_validation_errors(data):
    """Format validation errors for Problem+JSON invalid_params."""
    if not isinstance(data, dict):
        return []

    invalid_params = []
    for field, errors in data.items():
        if field == 'detail':
            continue
        if isinstance(errors, list):
            for error in errors:
                invalid_params.append({
                    'name': field,
                    'reason': str(error)
                })
        else:
            invalid_params.append({
                'name': field,
                'reason': str(errors)
            })

    return invalid_params


def log_error(exc, context, status_code):
    """Log error for monitoring and debugging."""
    request = context.get('request')
    user = getattr(request, 'user', None)

    logger.warning(
        f"API Error {status_code}: {exc}",
        extra={
            'status_code': status_code,
            'exception_type': type(exc).__name__,
            'user_id': str(user.id) if user and user.is_authenticated else None,
            'request_path': request.path if request else None,
            'request_method': request.method if request else None,
            'correlation_id': getattr(request, 'correlation_id', None),
        },
        exc_info=status_code >= 500  # Include stack trace for 5xx errors
    )
