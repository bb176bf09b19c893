from functools import lru_cache
from typing import Optional

from pydantic import BaseModel, ConfigDict, Field

from meetnotes import env


class RelayConfig(BaseModel):
    """
    Process-wide settings, read once from the environment and handed to the
    summaries and share modules. Secrets are kept out of repr().
    """

    model_config = ConfigDict(frozen=True)

    gemini_api_key: Optional[str] = Field(default=None, repr=False)
    gemini_model: str = 'gemini-pro'
    gemini_api_base_url: str = 'https://generativelanguage.googleapis.com/v1beta'
    email_user: Optional[str] = None
    email_pass: Optional[str] = Field(default=None, repr=False)
    smtp_host: str = 'smtp.gmail.com'
    smtp_port: int = 465

    @property
    def generate_content_url(self) -> str:
        return f'{self.gemini_api_base_url.rstrip("/")}/models/{self.gemini_model}:generateContent'


def load_config() -> RelayConfig:
    return RelayConfig(
        gemini_api_key=env.gemini_api_key or None,
        gemini_model=env.gemini_model,
        gemini_api_base_url=env.gemini_api_base_url,
        email_user=env.email_user or None,
        email_pass=env.email_pass or None,
        smtp_host=env.smtp_host,
        smtp_port=env.smtp_port,
    )


@lru_cache
def get_config() -> RelayConfig:
    return load_config()


__all__ = ['RelayConfig', 'get_config', 'load_config']
