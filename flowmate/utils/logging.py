"""
Shared logging configuration.

All records are JSON on a single line; tracebacks are folded into an
"exception" key instead of spanning several lines.
"""
import os
import sys
import json
import traceback
from typing import Optional
from aws_lambda_powertools import Logger

def single_line_trace(exc_info) -> Optional[str]:
    """Render exc_info as one line with frames separated by " | "."""
    if exc_info is True:
        exc_info = sys.exc_info()
    if not (isinstance(exc_info, tuple) and len(exc_info) == 3 and exc_info[0]):
        return None
    lines = traceback.format_exception(*exc_info)
    return ' | '.join(part.strip() for part in ''.join(lines).splitlines() if part.strip())

class SingleLineLogger(Logger):
    """Powertools logger whose exception() output stays on one line."""

    def exception(self, message, *args, **kwargs):
        extra = kwargs.pop('extra', None) or {}
        extra['exception'] = single_line_trace(kwargs.pop('exc_info', True))
        super().error(message, *args, extra=extra, **kwargs)

logger = SingleLineLogger(
    service='flowmate',
    level=os.environ.get('LOG_LEVEL', 'INFO'),
    json_serializer=json.dumps,
    use_rfc3339=True
)

def log_exception(logger, message, exc_info=None, **kwargs):
    """Log the exception being handled (or exc_info) as a single-line error."""
    extra = kwargs.pop('extra', None) or {}
    extra['exception'] = single_line_trace(exc_info or sys.exc_info())
    logger.error(message, extra=extra, **kwargs)
