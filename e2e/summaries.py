from meetnotes.logs import get_logger
from .common import get, post

log = get_logger(__name__)

transcript = '''
Alice: Good morning everyone. The goal today is to agree on the release date.
Bob: QA finished the regression pass yesterday, only two minor bugs are left open.
Carol: I can fix both of them by Wednesday.
Alice: Then let's ship on Friday. Bob, please update the changelog.
Bob: Will do. I will also send the release notes to support on Thursday.
'''


async def health():
    resp = await get('')
    assert resp.status == 200, log.error(f'Unexpected status code: {resp.status}')

    log.info(f'Response: {await resp.text()}')


async def summarize(data):
    resp = await post('api/summarize', data)
    assert resp.status == 200, log.error(f'Unexpected status code: {resp.status}')

    result = await resp.json()
    assert result.get('summary'), log.error(f'Unexpected response: {result}')
    log.info(f'Response: {result["summary"]}')

    return result['summary']


async def summarize_empty_transcript():
    resp = await post('api/summarize', {'transcript': ''})
    assert resp.status == 400, log.error(f'Unexpected status code: {resp.status}')

    result = await resp.json()
    log.info(f'Response: {result.get("error")}')


async def run():
    log.info('#### Running summaries e2e tests')

    log.info('GET / - health check')
    await health()

    log.info('POST api/summarize - summarize with the default instruction')
    await summarize({'transcript': transcript})

    log.info('POST api/summarize - summarize with a custom prompt')
    await summarize({'transcript': transcript, 'prompt': 'List the action items with their owners.'})

    log.info('POST api/summarize - reject an empty transcript')
    await summarize_empty_transcript()

    return True
