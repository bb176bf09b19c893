import logging
import sys
from logging import Filter, LogRecord

from uvicorn.logging import DefaultFormatter

from meetnotes.env import email_pass, gemini_api_key, log_level

log_format = '%(asctime)s %(name)s %(levelprefix)s %(message)s'
access_log_format = '%(asctime)s %(name)s %(levelprefix)s %(client_addr)s - "%(request_line)s" %(status_code)s'


class AccessLogSuppressor(Filter):
    """Drops access log lines for health checks and metric scrapes."""

    exclude_paths = ('/favicon.ico', '/metrics', '/healthz')

    def filter(self, record: LogRecord) -> bool:
        log_msg = record.getMessage()

        return not any(excluded in log_msg for excluded in self.exclude_paths)


class SecretRedactor(Filter):
    """Masks the Gemini key and the mail password wherever they end up in a log line."""

    mask = '***'

    def __init__(self, secrets=None):
        super().__init__()
        self.secrets = [secret for secret in (secrets or []) if secret]

    def filter(self, record: LogRecord) -> bool:
        if not self.secrets:
            return True

        message = record.getMessage()
        redacted = message

        for secret in self.secrets:
            redacted = redacted.replace(secret, self.mask)

        if redacted != message:
            record.msg = redacted
            record.args = None

        return True


secret_redactor = SecretRedactor([gemini_api_key, email_pass])


def get_stream_handler(fmt: str = log_format) -> logging.Handler:
    handler = logging.StreamHandler(sys.stdout)
    handler.setFormatter(DefaultFormatter(fmt))
    handler.addFilter(secret_redactor)

    return handler


logging.getLogger('uvicorn.access').addFilter(AccessLogSuppressor())
logging.basicConfig(level=log_level, handlers=[get_stream_handler()])


def get_logger(name):
    return logging.getLogger(name)


def get_uvicorn_log_config() -> dict:
    """uvicorn's LOGGING_CONFIG with our formats, stdout handlers and the secret filter."""

    def handler(formatter, filters=()):
        return {
            'formatter': formatter,
            'class': 'logging.StreamHandler',
            'stream': 'ext://sys.stdout',
            'filters': list(filters),
        }

    return {
        'version': 1,
        'disable_existing_loggers': False,
        'filters': {'redact': {'()': lambda: secret_redactor}},
        'formatters': {
            'default': {'()': 'uvicorn.logging.DefaultFormatter', 'fmt': log_format, 'use_colors': None},
            'access': {'()': 'uvicorn.logging.AccessFormatter', 'fmt': access_log_format},
        },
        # access records keep their args for AccessFormatter, so only the default handler redacts
        'handlers': {'default': handler('default', ['redact']), 'access': handler('access')},
        'loggers': {
            'uvicorn': {'handlers': ['default'], 'level': log_level, 'propagate': False},
            'uvicorn.error': {'level': log_level},
            'uvicorn.access': {'handlers': ['access'], 'level': log_level, 'propagate': False},
        },
    }


uvicorn_log_config = get_uvicorn_log_config()
