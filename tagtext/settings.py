from functools import lru_cache

from pydantic import field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from tagtext.encoding import TextEncoding


class Settings(BaseSettings):
    model_config = SettingsConfigDict(env_prefix="TAGTEXT_", env_file=".env", extra="ignore")

    default_encoding: TextEncoding = TextEncoding.UTF16
    include_bom: bool = True
    include_terminator: bool = False

    log_level: str = "INFO"

    @field_validator("default_encoding", mode="before")
    @classmethod
    def check_default_encoding(cls, v) -> TextEncoding:
        return TextEncoding.parse(v)


@lru_cache(maxsize=1)
def get_settings():
    return Settings()
