import time
from typing import Any

from meetnotes.config import RelayConfig
from meetnotes.constants import no_summary_fallback
from meetnotes.logs import get_logger
from meetnotes.modules.monitoring import (
    SUMMARY_DURATION_METRIC,
    SUMMARY_FALLBACK_COUNTER,
    SUMMARY_INPUT_LENGTH_METRIC,
)

from .gemini import generate_content
from .models import SummaryPayload, SummaryResult
from .prompts import assemble_prompt

log = get_logger(__name__)

summary_path = ('candidates', 0, 'content', 'parts', 0, 'text')


def dig(data: Any, *path: str | int) -> Any:
    """
    Follows `path` through nested dicts and lists. Returns None as soon as a key
    is missing, an index is out of range or a container has the wrong type.
    """

    current = data

    for step in path:
        if isinstance(step, int):
            if not isinstance(current, list) or not -len(current) <= step < len(current):
                return None
            current = current[step]
        else:
            if not isinstance(current, dict):
                return None
            current = current.get(step)

        if current is None:
            return None

    return current


def extract_summary(data: Any) -> str:
    text = dig(data, *summary_path)

    if not isinstance(text, str) or not text.strip():
        return no_summary_fallback

    return text


async def summarize(payload: SummaryPayload, config: RelayConfig) -> SummaryResult:
    prompt = assemble_prompt(payload)
    SUMMARY_INPUT_LENGTH_METRIC.observe(len(prompt))

    start = time.perf_counter()
    data = await generate_content(prompt, config)
    duration = time.perf_counter() - start
    SUMMARY_DURATION_METRIC.observe(duration)

    summary = extract_summary(data)

    if summary == no_summary_fallback:
        SUMMARY_FALLBACK_COUNTER.inc()
        log.warning(f'Generation API returned no usable text, finish reason: {dig(data, "candidates", 0, "finishReason")}')
    else:
        log.info(f'Summary generated in {duration:.3f}s ({len(prompt)} chars in, {len(summary)} chars out)')

    return SummaryResult(summary=summary)


__all__ = ['dig', 'extract_summary', 'summarize']
