"""Attribute sets, their groups and assigned attributes."""

from .client import MagentoClient
from .entity import RemoteEntity
from .errors import NotFound
from .models import Attribute, AttributeSet, Group, MagentoModel
from .routes import (
    ATTRIBUTE_SET_ATTRIBUTES,
    ATTRIBUTE_SET_ATTRIBUTES_RELATIVE,
    ATTRIBUTE_SET_GROUPS,
    ATTRIBUTE_SET_GROUPS_LIST,
    ATTRIBUTE_SETS,
    ATTRIBUTE_SETS_LIST,
)
from .search import SearchQuery


class AttributeSetSearchResult(MagentoModel):
    items: list[AttributeSet] = []
    total_count: int | None = None


class GroupSearchResult(MagentoModel):
    items: list[Group] = []
    total_count: int | None = None


class MagentoAttributeSet(RemoteEntity):
    """An attribute set together with its groups and attributes.

    ``update_from_remote`` refreshes all three; every mutating call below ends
    with one so the local view matches Magento.
    """

    def __init__(
        self, client: MagentoClient, attribute_set: AttributeSet | None = None, route: str | None = None
    ):
        super().__init__(client, route)
        self.attribute_set = attribute_set or AttributeSet()
        self.groups: list[Group] = []
        self.attributes: list[Attribute] = []

    @classmethod
    def create(cls, attribute_set: AttributeSet, skeleton_id: int, client: MagentoClient) -> "MagentoAttributeSet":
        """Create an attribute set based on the skeleton set ``skeleton_id``."""
        remote = cls(client)
        payload = {"attributeSet": attribute_set, "skeletonId": skeleton_id}
        remote.logger.debug(f"Creating attribute set '{attribute_set.attribute_set_name}' from skeleton {skeleton_id}")

        remote.attribute_set = client.post(ATTRIBUTE_SETS, payload, AttributeSet, operation="create attribute-set")
        remote._bind_route(f"{ATTRIBUTE_SETS}/{remote.attribute_set.attribute_set_id}")
        remote.update_from_remote()
        return remote

    @classmethod
    def get_by_name(cls, name: str, client: MagentoClient) -> "MagentoAttributeSet":
        """Find an attribute set by name.

        Raises:
            NotFound: If no attribute set has this name
        """
        endpoint = SearchQuery().where("attribute_set_name", name, "in").apply(ATTRIBUTE_SETS_LIST)
        client.logger.debug(f"Getting attribute set by name '{name}'")
        result = client.get(endpoint, AttributeSetSearchResult, operation="get attribute-set by name from remote")
        if not result.items:
            client.logger.warning(f"Attribute set '{name}' not found by name")
            raise NotFound(f"no attribute set named {name!r}", "get attribute-set by name from remote")

        found = result.items[0]
        remote = cls(client, found, route=f"{ATTRIBUTE_SETS}/{found.attribute_set_id}")
        remote.update_from_remote()
        return remote

    def update_on_remote(self) -> None:
        operation = "update remote attribute-set from local"
        route = self.require_route(operation)
        self.logger.debug(f"Updating attribute set {route} on remote")
        self.attribute_set = self.client.put(
            route, {"attributeSet": self.attribute_set}, AttributeSet, operation=operation
        )

    def update_from_remote(self) -> None:
        self._update_details()
        self._update_groups()
        self._update_attributes()
        self._mark_hydrated()

    def _update_details(self) -> None:
        operation = "get details for attribute-set from remote"
        route = self.require_route(operation)
        self.attribute_set = self.client.get(route, AttributeSet, operation=operation)

    def _update_groups(self) -> None:
        endpoint = SearchQuery().where("attribute_set_id", self.attribute_set.attribute_set_id, "in").apply(
            ATTRIBUTE_SET_GROUPS_LIST
        )
        result = self.client.get(endpoint, GroupSearchResult, operation="get groups for attribute-set from remote")
        self.groups = result.items

    def _update_attributes(self) -> None:
        operation = "get attributes for attribute-set from remote"
        route = self.require_route(operation)
        self.attributes = self.client.get(
            f"{route}/{ATTRIBUTE_SET_ATTRIBUTES_RELATIVE}", list[Attribute], operation=operation
        )

    def assign_attribute(self, attribute_group_id: int, sort_order: int, attribute_code: str) -> None:
        operation = "assign attribute to attribute-set"
        self.require_route(operation)
        payload = {
            "attributeSetId": self.attribute_set.attribute_set_id,
            "attributeGroupId": attribute_group_id,
            "attributeCode": attribute_code,
            "sortOrder": sort_order,
        }
        self.logger.debug(
            f"Assigning attribute '{attribute_code}' to set {self.attribute_set.attribute_set_id} "
            f"(group {attribute_group_id}, sort order {sort_order})"
        )
        self.client.request("POST", ATTRIBUTE_SET_ATTRIBUTES, body=payload, operation=operation)
        self.update_from_remote()

    def create_group(self, group_name: str) -> None:
        operation = "create group on attribute-set"
        self.require_route(operation)
        group = Group(attribute_group_name=group_name, attribute_set_id=self.attribute_set.attribute_set_id)
        self.logger.debug(f"Creating group '{group_name}' on set {self.attribute_set.attribute_set_id}")
        self.client.request("POST", ATTRIBUTE_SET_GROUPS, body={"group": group}, operation=operation)
        self.update_from_remote()
