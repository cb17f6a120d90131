"""Product attributes and their dropdown options."""

from .client import MagentoClient
from .entity import RemoteEntity
from .models import Attribute, Option
from .routes import ATTRIBUTE_OPTIONS_RELATIVE, PRODUCT_ATTRIBUTES

OPTION_ID_PREFIX = "id_"


class MagentoAttribute(RemoteEntity):
    def __init__(self, client: MagentoClient, attribute: Attribute | None = None, route: str | None = None):
        super().__init__(client, route)
        self.attribute = attribute or Attribute()

    @classmethod
    def create(cls, attribute: Attribute, client: MagentoClient) -> "MagentoAttribute":
        remote = cls(client)
        remote.logger.debug(f"Creating attribute '{attribute.attribute_code}'")
        remote.attribute = client.post(
            PRODUCT_ATTRIBUTES, {"attribute": attribute}, Attribute, operation="create attribute"
        )
        remote._bind_route(f"{PRODUCT_ATTRIBUTES}/{remote.attribute.attribute_code}")
        return remote

    @classmethod
    def get_by_code(cls, attribute_code: str, client: MagentoClient) -> "MagentoAttribute":
        """Fetch an attribute by its code.

        Raises:
            NotFound: If the attribute does not exist
        """
        remote = cls(client, route=f"{PRODUCT_ATTRIBUTES}/{attribute_code}")
        remote.update_from_remote()
        return remote

    def update_from_remote(self) -> None:
        route = self.require_route("update local attribute from remote")
        self.attribute = self.client.get(route, Attribute, operation="update local attribute from remote")
        self._mark_hydrated()

    def update_on_remote(self) -> None:
        """Push the local attribute to Magento and keep what it returns."""
        operation = "update remote attribute from local"
        route = self.require_route(operation)
        self.logger.debug(f"Updating attribute {route} on remote")
        self.attribute = self.client.put(route, {"attribute": self.attribute}, Attribute, operation=operation)

    def add_option(self, option: Option) -> str:
        """Add a dropdown option and re-fetch the attribute.

        Returns:
            The new option value, with Magento's ``id_`` prefix removed.
        """
        operation = "assign option to attribute"
        route = self.require_route(operation)
        self.logger.debug(f"Adding option '{option.label}' to {route}")

        value = self.client.post_text(
            f"{route}/{ATTRIBUTE_OPTIONS_RELATIVE}", {"option": option}, operation=operation
        )
        value = value.removeprefix(OPTION_ID_PREFIX)

        self.logger.debug(f"Option {value} added, updating attribute from remote")
        self.update_from_remote()
        return value
