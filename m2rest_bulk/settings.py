"""Environment configuration for the bulk tool."""

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict

from m2rest import MagentoClient, StoreConfig


class BulkSettings(BaseSettings):
    """Connection settings read from ``MAGENTO_*`` variables (or ``.env``)."""

    model_config = SettingsConfigDict(
        env_prefix="MAGENTO_",
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
        case_sensitive=False,
    )

    host: str = Field(..., min_length=1, description="Store host or URL, e.g. https://shop.example.com")
    bearer_token: str = Field(..., min_length=1, description="Integration access token")
    store_code: str = Field(default="all", min_length=1)
    timeout: float = Field(default=MagentoClient.TIMEOUT, gt=0, description="Per-request timeout (seconds)")
    debug: bool = False

    @property
    def store(self) -> StoreConfig:
        return StoreConfig.from_url(self.host, store_code=self.store_code)

    def build_client(self, pool_maxsize: int | None = None) -> MagentoClient:
        return MagentoClient.from_integration(
            self.store, self.bearer_token, timeout=self.timeout, pool_maxsize=pool_maxsize
        )
