from pydantic import Field
from pydantic_settings import SettingsConfigDict

from constants import DEFAULT_BASE_URL
from settings.base import BaseSettings


class OkxSettings(BaseSettings):
    model_config = SettingsConfigDict(env_prefix="okx_")

    base_url: str = Field(default=DEFAULT_BASE_URL, title="OKX REST base URL")
    access_key: str | None = Field(default=None, title="OKX access key")


okx_settings = OkxSettings()
