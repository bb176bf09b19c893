from fastapi import Request
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse

from meetnotes.constants import app_title
from meetnotes.env import enable_metrics, modules
from meetnotes.errors import ErrorKind, RelayError
from meetnotes.logs import get_logger
from meetnotes.modules.monitoring import PROMETHEUS_NAMESPACE, RELAY_ERROR_COUNTER
from meetnotes.utils import create_app

log = get_logger('meetnotes.api')

app = create_app(title=app_title)

if 'summaries' in modules:
    from meetnotes.modules.summaries.router import router as summaries_router

    app.include_router(summaries_router)

if 'share' in modules:
    from meetnotes.modules.share.router import router as share_router

    app.include_router(share_router)

if enable_metrics:
    from meetnotes.modules.monitoring import instrumentator

    instrumentator.instrument(app, metric_namespace=PROMETHEUS_NAMESPACE)


def get_operation(request: Request) -> str:
    return request.url.path.rstrip('/').rsplit('/', 1)[-1] or 'unknown'


def describe_validation_error(error: RequestValidationError) -> str:
    details = []

    for err in error.errors():
        location = '.'.join(str(part) for part in err.get('loc', ()) if part != 'body')
        details.append(f'{location}: {err.get("msg")}' if location else err.get('msg', ''))

    return f'Invalid request body: {"; ".join(details)}' if details else 'Invalid request body'


@app.exception_handler(RelayError)
async def relay_error_handler(request: Request, error: RelayError):
    operation = get_operation(request)

    log.log(error.log_level, f'{operation} failed ({error.kind.value}): {error.message}')
    RELAY_ERROR_COUNTER.labels(operation=operation, kind=error.kind.value).inc()

    return JSONResponse(status_code=error.status_code, content={'error': error.message})


@app.exception_handler(RequestValidationError)
async def request_validation_error_handler(request: Request, error: RequestValidationError):
    operation = get_operation(request)
    message = describe_validation_error(error)

    log.info(f'{operation} failed ({ErrorKind.VALIDATION.value}): {message}')
    RELAY_ERROR_COUNTER.labels(operation=operation, kind=ErrorKind.VALIDATION.value).inc()

    return JSONResponse(status_code=400, content={'error': message})


__all__ = ['app']
