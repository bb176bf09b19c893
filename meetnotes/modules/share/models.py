import re
from typing import Optional

from pydantic import BaseModel, field_validator

from meetnotes.constants import share_success_message

address_separator = re.compile(r'[,;]')


class SharePayload(BaseModel):
    summary: Optional[str] = None
    emails: list[str] = []

    model_config = {
        'json_schema_extra': {
            'examples': [
                {
                    'summary': 'The team agreed to ship on Friday.',
                    'emails': ['alice@example.com', 'bob@example.com'],
                }
            ]
        }
    }

    @field_validator('emails', mode='before')
    @classmethod
    def split_addresses(cls, value):
        # a single "a@x.com, b@y.com" string is accepted as well as a list
        if isinstance(value, str):
            return address_separator.split(value)

        return value

    @field_validator('emails')
    @classmethod
    def drop_blank_addresses(cls, value: list[str]) -> list[str]:
        return [address.strip() for address in value if address.strip()]


class ShareResult(BaseModel):
    message: str = share_success_message
