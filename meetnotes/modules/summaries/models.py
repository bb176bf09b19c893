from typing import Optional

from pydantic import BaseModel


class SummaryPayload(BaseModel):
    transcript: Optional[str] = None
    text: Optional[str] = None
    prompt: Optional[str] = None

    model_config = {
        'json_schema_extra': {
            'examples': [
                {
                    'transcript': 'Alice: We ship on Friday. Bob: I will update the changelog.',
                    'prompt': 'Summarize in bullet points and list action items.',
                }
            ]
        }
    }

    @property
    def primary_text(self) -> Optional[str]:
        """The first of `transcript`, `text` that is not blank."""

        for value in (self.transcript, self.text):
            if value and value.strip():
                return value

        return None


class SummaryResult(BaseModel):
    summary: str
