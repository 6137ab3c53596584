from typing import Literal

from pydantic import SecretStr
from pydantic_settings import BaseSettings, SettingsConfigDict


class Config(BaseSettings):
    # ABF pickup API
    abf_pickup_url: str = "https://www.abfs.com/xml/pickupxml.asp"
    abf_api_key: SecretStr = SecretStr("")

    # "test" submits requests without scheduling a real pickup
    abf_mode: Literal["test", "live"] = "test"

    # ABF is sometimes very slow to answer
    abf_timeout: float = 10.0

    # Logging
    log_level: str = "INFO"
    log_format: str = "<green>{time:HH:mm:ss}</green> | <level>{level: <8}</level> | <cyan>{name}</cyan>:<cyan>{line}</cyan> - <level>{message}</level>"
    model_config = SettingsConfigDict(env_file=".env", case_sensitive=False, extra="ignore")


config = Config()
