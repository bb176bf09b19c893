from meetnotes.logs import get_logger
from .common import emails, post
from .summaries import summarize, transcript

log = get_logger(__name__)


async def share(summary):
    resp = await post('api/share', {'summary': summary, 'emails': emails})
    assert resp.status == 200, log.error(f'Unexpected status code: {resp.status}, {await resp.text()}')

    log.info(f'Response: {(await resp.json()).get("message")}')


async def share_without_recipients():
    resp = await post('api/share', {'summary': 'Nothing to see here', 'emails': []})
    assert resp.status == 400, log.error(f'Unexpected status code: {resp.status}')


async def run():
    log.info('#### Running share e2e tests')

    log.info('POST api/share - reject an empty recipient list')
    await share_without_recipients()

    if not emails:
        log.info('No recipients given, skipping delivery')
        return True

    log.info(f'POST api/share - send a fresh summary to {", ".join(emails)}')
    await share(await summarize({'transcript': transcript}))

    return True
