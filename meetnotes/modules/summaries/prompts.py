from meetnotes.constants import default_instruction, transcript_separator
from meetnotes.errors import ValidationError

from .models import SummaryPayload

missing_text_message = 'Missing required text input: provide a transcript or text'


def assemble_prompt(payload: SummaryPayload) -> str:
    """
    Combines the instruction and the transcript into the single text part sent to
    the generation API. The transcript is kept verbatim; a blank or missing
    instruction falls back to the default one.
    """

    text = payload.primary_text
    if text is None:
        raise ValidationError(missing_text_message)

    instruction = (payload.prompt or '').strip() or default_instruction

    return f'{instruction}{transcript_separator}{text}'


__all__ = ['assemble_prompt', 'missing_text_message']
