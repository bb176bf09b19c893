import asyncio
from typing import Any

import aiohttp

from meetnotes import http_client
from meetnotes.config import RelayConfig
from meetnotes.constants import upstream_failed_message
from meetnotes.errors import ConfigurationError, UpstreamError
from meetnotes.logs import get_logger

log = get_logger(__name__)

missing_api_key_message = 'Missing GEMINI_API_KEY in environment'


def get_error_message(data: Any) -> str | None:
    """Pulls the message out of a Gemini error payload, `{"error": {"message": ...}}` or `{"error": "..."}`."""

    if not isinstance(data, dict):
        return None

    error = data.get('error')
    if isinstance(error, dict):
        error = error.get('message')

    if isinstance(error, str) and error.strip():
        return error.strip()

    return None


async def generate_content(prompt: str, config: RelayConfig) -> dict:
    if not config.gemini_api_key:
        raise ConfigurationError(missing_api_key_message)

    body = {'contents': [{'parts': [{'text': prompt}]}]}

    try:
        status, data = await http_client.post(
            config.generate_content_url, params={'key': config.gemini_api_key}, json=body
        )
    except (aiohttp.ClientError, asyncio.TimeoutError, ValueError) as e:
        # aiohttp errors may embed the request URL, which carries the key
        detail = str(e).replace(config.gemini_api_key, '***')
        log.warning(f'Generation request to {config.gemini_model} failed: {type(e).__name__}: {detail}')
        raise UpstreamError(upstream_failed_message) from e

    error_message = get_error_message(data)

    if status >= 400 or not isinstance(data, dict) or data.get('error'):
        log.warning(f'Generation API responded with status {status}: {error_message or "no error message"}')
        raise UpstreamError(error_message or upstream_failed_message)

    return data


__all__ = ['generate_content', 'get_error_message', 'missing_api_key_message']
