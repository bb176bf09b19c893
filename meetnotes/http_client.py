"""
Simple async HTTP client with a shared session. All outbound calls go to the
same generation API so a single session is enough.
"""

import aiohttp


_session = None


def _get_session():
    global _session

    if _session is None:
        _session = aiohttp.ClientSession()
    return _session


async def post(url, **kwargs):
    """
    POSTs and waits for the full body. Returns a `(status, data)` tuple where `data`
    is the decoded JSON regardless of the response content type, or None for an
    empty body. Invalid JSON raises ValueError.
    """

    session = _get_session()
    async with session.post(url, **kwargs) as response:
        return response.status, await response.json(content_type=None)


async def close():
    global _session

    if _session is not None:
        await _session.close()

        _session = None


__all__ = ['close', 'post']
