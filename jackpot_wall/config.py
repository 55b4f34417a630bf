"""
Application settings.

Loads configuration from environment variables (and an optional .env file)
using pydantic-settings.
"""

from functools import lru_cache
from typing import Optional

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

DEFAULT_CHAINHOOK_SECRET = "secret-token"

STACKS_HOSTS = {
    "mainnet": "api.mainnet.hiro.so",
    "testnet": "api.testnet.hiro.so",
}


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    # Chainhook webhook
    chainhook_secret: str = DEFAULT_CHAINHOOK_SECRET
    print_event_type: str = "SmartContractEvent"

    # Upstream APIs
    hiro_api_key: Optional[str] = None
    talent_protocol_api_key: Optional[str] = None
    talent_api_url: str = "https://api.talentprotocol.com/api/v3"
    upstream_timeout: float = Field(default=10.0, gt=0)

    # Network / deployed contract
    network: str = "testnet"
    mainnet_contract: str = "SP1TN1ERKXEM2H9TKKWGPGZVNVNEKS92M7MAMP23P"
    testnet_contract: str = "ST1TN1ERKXEM2H9TKKWGPGZVNVNEKS92M7MAMP23P"
    contract_name: str = "jackpot-wall"

    log_level: str = "INFO"

    @field_validator("network")
    @classmethod
    def validate_network(cls, v: str) -> str:
        value = (v or "").strip().lower()
        if value not in STACKS_HOSTS:
            raise ValueError(f"network must be one of {sorted(STACKS_HOSTS)}, got {v!r}")
        return value

    @field_validator("log_level")
    @classmethod
    def normalize_log_level(cls, v: str) -> str:
        return (v or "INFO").strip().upper()

    @property
    def is_mainnet(self) -> bool:
        return self.network == "mainnet"

    @property
    def contract_address(self) -> str:
        return self.mainnet_contract if self.is_mainnet else self.testnet_contract

    def stacks_host(self, mainnet: Optional[bool] = None) -> str:
        """Upstream Stacks API host; an explicit selector wins over NETWORK."""
        if mainnet is None:
            mainnet = self.is_mainnet
        return STACKS_HOSTS["mainnet" if mainnet else "testnet"]


@lru_cache
def get_settings() -> Settings:
    return Settings()
