"""Store endpoint and authentication settings."""

import enum
from dataclasses import dataclass
from urllib.parse import urlsplit

API_VERSION = "V1"


@dataclass(frozen=True)
class StoreConfig:
    """Identifies one Magento REST endpoint root."""

    scheme: str
    host: str
    store_code: str = "default"

    @property
    def base_url(self) -> str:
        """REST root, e.g. https://shop.example.com/rest/default/V1"""
        return f"{self.scheme}://{self.host}/rest/{self.store_code}/{API_VERSION}"

    @classmethod
    def from_url(cls, url: str, store_code: str = "default") -> "StoreConfig":
        """Build a config from a store URL such as ``https://shop.example.com``.

        A bare host name is assumed to be served over https.
        """
        url = url.strip().rstrip("/")
        if "://" not in url:
            return cls(scheme="https", host=url, store_code=store_code)

        parts = urlsplit(url)
        host = parts.netloc + parts.path.rstrip("/")
        return cls(scheme=parts.scheme or "https", host=host, store_code=store_code)


class AuthenticationType(enum.Enum):
    """Token endpoints for username/password authentication."""

    ADMIN = "/integration/admin/token"
    CUSTOMER = "/integration/customer/token"

    @property
    def route(self) -> str:
        return self.value
