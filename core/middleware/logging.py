"""
Structured logging middleware with PII masking.
Logs one start and one completion record per request without exposing
applicant contact details, credentials or uploaded documents.
"""

import logging
import time
import json
import re
import uuid
from typing import Callable, Any
from fastapi import Request, Response
from starlette.middleware.base import BaseHTTPMiddleware
from starlette.types import ASGIApp
import traceback

logger = logging.getLogger(__name__)


# Field names whose values are never logged verbatim
SENSITIVE_FIELD_PATTERNS = [
    re.compile(r'password', re.IGNORECASE),
    re.compile(r'token', re.IGNORECASE),
    re.compile(r'api[_-]?key', re.IGNORECASE),
    re.compile(r'secret', re.IGNORECASE),
    re.compile(r'authorization', re.IGNORECASE),
    re.compile(r'cookie', re.IGNORECASE),
    re.compile(r'session', re.IGNORECASE),
    re.compile(r'e[_-]?mail', re.IGNORECASE),
    re.compile(r'phone', re.IGNORECASE),
    re.compile(r'linkedin', re.IGNORECASE),
    re.compile(r'^(first|last)?_?name$', re.IGNORECASE),
    re.compile(r'notes|message', re.IGNORECASE),
]

# PII patterns to detect and mask inside free text
PII_PATTERNS = [
    (re.compile(r'\b[A-Za-z0-9._%+-]+@[A-Za-z0-9.-]+\.[A-Za-z]{2,}\b'), '[EMAIL]'),
    (re.compile(r'\b\d{3}[-.]?\d{3}[-.]?\d{4}\b'), '[PHONE]'),
    (re.compile(r'\+\d{1,3}[-.\s]?\d{1,4}[-.\s]?\d{1,4}[-.\s]?\d{1,9}'), '[PHONE]'),
    (re.compile(r'\b\d{3}-\d{2}-\d{4}\b'), '[SSN]'),
]

# Record attributes copied into the JSON line when callers pass them via extra=
EXTRA_LOG_FIELDS = (
    'request_id',
    'job_id',
    'recruiter_id',
    'candidate_id',
    'application_id',
    'skills',
    'has_email',
    'error',
)

SKIP_PATHS = ('/health', '/ready')


def is_sensitive_field(field_name: str) -> bool:
    """
    Check if a field name indicates sensitive data.

    Args:
        field_name: Name of the field to check

    Returns:
        True if field is sensitive, False otherwise
    """
    return any(pattern.search(field_name) for pattern in SENSITIVE_FIELD_PATTERNS)


def mask_pii(text: str) -> str:
    for pattern, replacement in PII_PATTERNS:
        text = pattern.sub(replacement, text)
    return text


def mask_sensitive_data(data: Any, depth: int = 0, max_depth: int = 10) -> Any:
    """
    Recursively mask sensitive data in dictionaries and lists.

    Args:
        data: Data structure to mask
        depth: Current recursion depth
        max_depth: Maximum recursion depth

    Returns:
        Data structure with sensitive values masked
    """
    if depth > max_depth:
        return "[MAX_DEPTH_EXCEEDED]"

    if isinstance(data, dict):
        return {
            key: "[REDACTED]"
            if is_sensitive_field(str(key))
            else mask_sensitive_data(value, depth + 1, max_depth)
            for key, value in data.items()
        }
    if isinstance(data, list):
        return [mask_sensitive_data(item, depth + 1, max_depth) for item in data]
    if isinstance(data, str):
        return mask_pii(data)
    return data


def mask_headers(headers: dict) -> dict:
    """Mask sensitive headers, keeping the scheme of Authorization."""
    masked = {}
    for key, value in headers.items():
        key_lower = key.lower()
        if key_lower == 'authorization' and isinstance(value, str) and ' ' in value:
            masked[key] = f"{value.split(' ', 1)[0]} [REDACTED]"
        elif is_sensitive_field(key_lower):
            masked[key] = "[REDACTED]"
        else:
            masked[key] = value
    return masked


def should_log_request(path: str) -> bool:
    """Health probes are not logged."""
    return not any(path.startswith(skip) for skip in SKIP_PATHS)


def get_client_ip(request: Request) -> str:
    """
    Extract client IP address from request, handling proxies.

    Returns:
        Client IPv4 with the last octet masked, or 'unknown'
    """
    forwarded_for = request.headers.get('x-forwarded-for')
    if forwarded_for:
        ip = forwarded_for.split(',')[0].strip()
    else:
        ip = request.client.host if request.client else 'unknown'

    parts = ip.split('.')
    if len(parts) == 4:
        return f"{parts[0]}.{parts[1]}.{parts[2]}.xxx"
    return 'unknown'


class StructuredLoggingMiddleware(BaseHTTPMiddleware):
    """
    Structured logging middleware with PII masking.

    - request_started / request_completed JSON records
    - x-request-id carried through or generated
    - JSON and urlencoded bodies logged masked when enabled; multipart
      uploads (resumes) are never read
    """

    def __init__(
        self,
        app: ASGIApp,
        log_request_body: bool = False,
        log_response_body: bool = False,
        max_body_size: int = 1024,
    ):
        """
        Initialize logging middleware.

        Args:
            app: The ASGI application
            log_request_body: Whether to log request bodies (masked)
            log_response_body: Whether to log JSON response bodies (masked)
            max_body_size: Maximum body size to log (bytes)
        """
        super().__init__(app)
        self.log_request_body = log_request_body
        self.log_response_body = log_response_body
        self.max_body_size = max_body_size

    async def dispatch(self, request: Request, call_next: Callable) -> Response:
        request_id = request.headers.get('x-request-id') or str(uuid.uuid4())
        request.state.request_id = request_id

        if not should_log_request(request.url.path):
            response = await call_next(request)
            response.headers['x-request-id'] = request_id
            return response

        start_time = time.time()

        request_log = {
            'event': 'request_started',
            'request_id': request_id,
            'method': request.method,
            'path': request.url.path,
            'query_params': mask_sensitive_data(dict(request.query_params)),
            'client_ip': get_client_ip(request),
            'user_agent': request.headers.get('user-agent', 'unknown'),
            'headers': mask_headers(dict(request.headers)),
        }

        if self.log_request_body and request.method in ('POST', 'PUT', 'PATCH'):
            body = await self._get_request_body(request)
            if body is not None:
                request_log['body'] = mask_sensitive_data(body)

        logger.info(json.dumps(request_log, default=str))

        response = None
        error_details = None
        try:
            response = await call_next(request)
            if self.log_response_body:
                response = await self._log_response_body(response, request_id)
        except Exception as exc:
            error_details = {'type': type(exc).__name__, 'message': mask_pii(str(exc))}
            logger.error(
                f"Request processing error: {request.method} {request.url.path}",
                exc_info=True,
                extra={'request_id': request_id, 'error': error_details},
            )
            raise
        finally:
            duration = time.time() - start_time
            status_code = response.status_code if response else 500
            response_log = {
                'event': 'request_completed',
                'request_id': request_id,
                'method': request.method,
                'path': request.url.path,
                'duration_ms': round(duration * 1000, 2),
                'status_code': status_code,
            }
            if error_details:
                response_log['error'] = error_details

            if status_code >= 500:
                logger.error(json.dumps(response_log))
            elif status_code >= 400:
                logger.warning(json.dumps(response_log))
            else:
                logger.info(json.dumps(response_log))

            if response:
                response.headers['x-request-id'] = request_id

        return response

    async def _get_request_body(self, request: Request) -> Any:
        """
        Read a loggable request body.

        Returns:
            Parsed body, a placeholder for other content types, or None
        """
        content_type = request.headers.get('content-type', '')

        if content_type.startswith('multipart/'):
            return {'_content_type': 'multipart/form-data'}

        try:
            if 'application/json' in content_type:
                body_bytes = await request.body()
                if len(body_bytes) > self.max_body_size:
                    return {'_truncated': True, '_size': len(body_bytes)}
                return json.loads(body_bytes.decode('utf-8'))

            if 'application/x-www-form-urlencoded' in content_type:
                form = await request.form()
                return dict(form)
        except (ValueError, UnicodeDecodeError) as e:
            logger.debug(f"Could not parse request body: {e}")
            return None

        return {'_content_type': content_type} if content_type else None

    async def _log_response_body(self, response: Response, request_id: str) -> Response:
        """Log a masked JSON response body and return an equivalent response."""
        if 'application/json' not in response.headers.get('content-type', ''):
            return response

        body = b"".join([chunk async for chunk in response.body_iterator])
        if len(body) <= self.max_body_size:
            try:
                logged: Any = mask_sensitive_data(json.loads(body))
            except ValueError:
                logged = {'_unparseable': True}
        else:
            logged = {'_truncated': True, '_size': len(body)}
        logger.info(json.dumps({
            'event': 'response_body',
            'request_id': request_id,
            'body': logged,
        }, default=str))

        return Response(
            content=body,
            status_code=response.status_code,
            headers=dict(response.headers),
            media_type=response.media_type,
        )


class StructuredFormatter(logging.Formatter):
    """Formats log records as single-line JSON."""

    def format(self, record: logging.LogRecord) -> str:
        log_data = {
            'timestamp': self.formatTime(record, self.datefmt),
            'level': record.levelname,
            'logger': record.name,
            'message': record.getMessage(),
        }

        for field in EXTRA_LOG_FIELDS:
            if hasattr(record, field):
                log_data[field] = getattr(record, field)

        if record.exc_info:
            log_data['exception'] = {
                'type': record.exc_info[0].__name__,
                'message': str(record.exc_info[1]),
                'traceback': traceback.format_exception(*record.exc_info),
            }

        return json.dumps(log_data, default=str)


def setup_logging(log_level: str = "INFO", json_logs: bool = True):
    """
    Configure application-wide structured logging.

    Args:
        log_level: Logging level (DEBUG, INFO, WARNING, ERROR)
        json_logs: Whether to format logs as JSON
    """
    level = getattr(logging, log_level.upper())

    root_logger = logging.getLogger()
    root_logger.setLevel(level)
    for handler in root_logger.handlers[:]:
        root_logger.removeHandler(handler)

    console_handler = logging.StreamHandler()
    console_handler.setLevel(level)
    if json_logs:
        console_handler.setFormatter(StructuredFormatter())
    else:
        console_handler.setFormatter(
            logging.Formatter('%(asctime)s - %(name)s - %(levelname)s - %(message)s')
        )
    root_logger.addHandler(console_handler)

    # Reduce noise from third-party libraries
    logging.getLogger('uvicorn.access').setLevel(logging.WARNING)
    logging.getLogger('sqlalchemy.engine').setLevel(logging.WARNING)
    logging.getLogger('httpx').setLevel(logging.WARNING)
    logging.getLogger('botocore').setLevel(logging.WARNING)
