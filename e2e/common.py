from argparse import ArgumentParser

import aiohttp


session = None
parser = ArgumentParser()
parser.add_argument('-u', '--url', dest='url', help='meetnotes url', default='http://localhost:5000')
parser.add_argument(
    '-e',
    '--emails',
    dest='emails',
    help='comma separated recipients for the share e2e test, skipped when empty',
    default='',
)
parser.add_argument(
    '-modules',
    '--modules',
    dest='modules',
    help='modules to run e2e on',
    default='summaries,share',
)

args = parser.parse_args()
base_url = args.url
emails = [email.strip() for email in args.emails.split(',') if email.strip()]
modules = args.modules.split(',')


def get_session():
    global session

    if session is None:
        session = aiohttp.ClientSession()

    return session


async def close_session():
    if session is not None:
        await session.close()


async def post(path, data):
    url = f'{base_url}/{path}'

    return await get_session().post(url, json=data)


async def get(path):
    url = f'{base_url}/{path}'

    return await get_session().get(url)


__all__ = ['close_session', 'emails', 'get', 'modules', 'post']
