"""Configurable products: options and child products."""

from .client import MagentoClient
from .entity import RemoteEntity
from .models import ConfigurableProductOption
from .routes import (
    CONFIGURABLE_CHILD_RELATIVE,
    CONFIGURABLE_OPTIONS_ALL_RELATIVE,
    CONFIGURABLE_OPTIONS_RELATIVE,
    CONFIGURABLE_PRODUCTS,
    encode_sku,
)


class MagentoConfigurableProduct(RemoteEntity):
    def __init__(self, client: MagentoClient, sku: str):
        super().__init__(client, f"{CONFIGURABLE_PRODUCTS}/{encode_sku(sku)}")
        self.sku = sku
        self.options: list[ConfigurableProductOption] = []

    @classmethod
    def set_option_for_existing(
        cls, sku: str, option: ConfigurableProductOption, client: MagentoClient
    ) -> "MagentoConfigurableProduct":
        """Add a configurable option to an existing product and load all options."""
        remote = cls(client, sku)
        remote.logger.debug(f"Setting option '{option.label}' for configurable product '{sku}'")
        client.request(
            "POST",
            f"{remote.route}/{CONFIGURABLE_OPTIONS_RELATIVE}",
            body={"option": option},
            operation="create configurable product option",
        )
        remote.update_options_from_remote()
        return remote

    @classmethod
    def get_by_sku(cls, sku: str, client: MagentoClient) -> "MagentoConfigurableProduct":
        remote = cls(client, sku)
        remote.update_options_from_remote()
        return remote

    def update_options_from_remote(self) -> None:
        operation = "get options for configurable product from remote"
        route = self.require_route(operation)
        self.options = self.client.get(
            f"{route}/{CONFIGURABLE_OPTIONS_ALL_RELATIVE}", list[ConfigurableProductOption], operation=operation
        )
        self._mark_hydrated()

    def add_child_by_sku(self, child_sku: str) -> None:
        operation = "add child by sku to configurable product"
        route = self.require_route(operation)
        self.logger.debug(f"Adding child '{child_sku}' to configurable product '{self.sku}'")
        self.client.request(
            "POST", f"{route}/{CONFIGURABLE_CHILD_RELATIVE}", body={"childSku": child_sku}, operation=operation
        )

    def update_option_by_id(self, option: ConfigurableProductOption) -> None:
        operation = "update option for configurable product"
        route = self.require_route(operation)
        self.logger.debug(f"Updating option {option.id} of configurable product '{self.sku}'")
        self.client.request(
            "PUT",
            f"{route}/{CONFIGURABLE_OPTIONS_RELATIVE}/{option.id}",
            body={"option": option},
            operation=operation,
        )
        self.update_options_from_remote()
