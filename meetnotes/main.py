import asyncio
import importlib.metadata
import sys
from contextlib import asynccontextmanager

from fastapi import FastAPI
from fastapi.responses import PlainTextResponse

from meetnotes import http_client
from meetnotes.apps.api import app as api_app
from meetnotes.config import get_config
from meetnotes.constants import app_title, health_message
from meetnotes.env import app_port, enable_metrics, metrics_port, modules
from meetnotes.logs import get_logger
from meetnotes.utils import create_app, create_webserver

log = get_logger(__name__)

if not modules:
    log.warning('No modules enabled!')
    sys.exit(1)

log.info(f'Enabled modules: {modules}')


def get_version() -> str:
    try:
        return importlib.metadata.version('meetnotes')
    except importlib.metadata.PackageNotFoundError:
        return 'dev'


@asynccontextmanager
async def lifespan(main_app: FastAPI):
    log.info(f'MeetNotes {get_version()} is up')

    config = get_config()

    if 'summaries' in modules and not config.gemini_api_key:
        log.warning('GEMINI_API_KEY is not set, summarize requests will fail')

    if 'share' in modules and not (config.email_user and config.email_pass):
        log.warning('EMAIL_USER / EMAIL_PASS are not set, share requests will fail')

    yield

    log.info('MeetNotes is shutting down')

    await http_client.close()


app = create_app(title=app_title, lifespan=lifespan)
app.mount('/api', api_app)


@app.get('/', response_class=PlainTextResponse)
def root():
    return health_message


async def main():
    tasks = [asyncio.create_task(create_webserver('meetnotes.main:app', port=app_port))]

    if enable_metrics:
        tasks.append(asyncio.create_task(create_webserver('meetnotes.metrics:metrics', port=metrics_port)))

    await asyncio.wait(tasks, return_when=asyncio.ALL_COMPLETED)


if __name__ == "__main__":
    try:
        asyncio.run(main())
    except KeyboardInterrupt:
        pass
