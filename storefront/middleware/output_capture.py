import io
import logging
import sys
from contextvars import ContextVar
from typing import Optional

from starlette.middleware.base import BaseHTTPMiddleware


logger = logging.getLogger(__name__)

# Buffer of the request being handled in the current context, if any
_capture_buffer: ContextVar[Optional[io.StringIO]] = ContextVar(
    "capture_buffer", default=None
)


class CapturingStream:
    """
    Stands in for sys.stdout / sys.stderr. Writes go to the buffer of the
    request owning the current context, or to the wrapped stream otherwise.
    """

    def __init__(self, stream):
        self._stream = stream

    def write(self, text: str) -> int:
        buffer = _capture_buffer.get()
        if buffer is None:
            return self._stream.write(text)
        return buffer.write(text)

    def flush(self) -> None:
        if _capture_buffer.get() is None:
            self._stream.flush()

    def __getattr__(self, name):
        return getattr(self._stream, name)


def install_capture_streams() -> None:
    # The process streams are only ever wrapped, never swapped per request.
    if not isinstance(sys.stdout, CapturingStream):
        sys.stdout = CapturingStream(sys.stdout)
    if not isinstance(sys.stderr, CapturingStream):
        sys.stderr = CapturingStream(sys.stderr)


class OutputCaptureMiddleware(BaseHTTPMiddleware):
    """
    Keeps stray print()/warning output produced while handling a request
    away from the process streams. The captured text is dropped, unless the
    request dies with an unhandled exception, in which case it is logged.
    """

    def __init__(self, app):
        super().__init__(app)
        install_capture_streams()

    async def dispatch(self, request, call_next):
        # Something (a test runner, a reloader) may have replaced the streams
        install_capture_streams()

        buffer = io.StringIO()
        token = _capture_buffer.set(buffer)

        try:
            try:
                return await call_next(request)
            finally:
                _capture_buffer.reset(token)
        except Exception:
            captured = buffer.getvalue()
            if captured:
                logger.warning(
                    "Diagnostic output before failure | %s %s | %s",
                    request.method,
                    request.url.path,
                    captured,
                )
            raise
