from starlette.middleware.base import BaseHTTPMiddleware

from infrastructure.logging import bind_request_context, get_correlation_id
from infrastructure.logging.context import CORRELATION_ID_HEADER


class CorrelationIdMiddleware(BaseHTTPMiddleware):
    """Bind a correlation id to every log entry emitted while a request runs.

    An incoming ``X-Correlation-ID`` header is reused, otherwise one is
    generated. The id is echoed back on the response.
    """

    async def dispatch(self, request, call_next):
        with bind_request_context(
            correlation_id=request.headers.get(CORRELATION_ID_HEADER),
            request_path=request.url.path,
            request_method=request.method,
        ):
            correlation_id = get_correlation_id()
            request.state.correlation_id = correlation_id
            response = await call_next(request)
            response.headers[CORRELATION_ID_HEADER] = correlation_id
            return response
