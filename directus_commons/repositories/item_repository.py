import logging
from typing import Any, Dict, List, Optional, Union

from directus_commons.constants.app_message import AppMessage
from directus_commons.constants.resource_paths import ResourcePaths
from directus_commons.model.context import Context
from directus_commons.model.query_model import QueryOptions
from directus_commons.services.http_service import HttpService
from directus_commons.utils.errors import ApiRequestError, InvalidArgumentError

logger = logging.getLogger(__name__)

ItemId = Union[str, int]


class ItemRepository:
    def __init__(self, context: Context, http: HttpService):
        self.context = context
        self.http = http
        logger.info("Initialized ItemRepository")

    def _send(self, method: str, uri: str, body: Any = None) -> Any:
        try:
            return self.http.send_request(method, uri, self.context.auth_headers, json=body)
        except ApiRequestError as e:
            logger.error(f"Error calling items endpoint: {str(e)}", exc_info=True)
            raise

    @staticmethod
    def _require(value: Any, message: str):
        if value is None or value == "":
            raise InvalidArgumentError(message)

    def list_items(self, collection: str, options: Optional[QueryOptions] = None) -> List[Dict[str, Any]]:
        """
        Read the items of a collection.

        Args:
            collection (str): collection name
            options (QueryOptions): fields, filter, sort, paging...

        Returns:
            list: the matching items

        Raises:
            ApiRequestError: If the server rejects the request
        """
        self._require(collection, AppMessage.COLLECTION_REQUIRED)
        uri = self.context.builder(ResourcePaths.ITEMS, collection).add_query_options(options).get()
        return self._send("GET", uri) or []

    def get_item(self, collection: str, item_id: ItemId,
                 options: Optional[QueryOptions] = None) -> Optional[Dict[str, Any]]:
        self._require(collection, AppMessage.COLLECTION_REQUIRED)
        self._require(item_id, AppMessage.ITEM_ID_REQUIRED)
        uri = self.context.builder(ResourcePaths.ITEMS, collection, item_id).add_query_options(options).get()
        return self._send("GET", uri)

    def create_item(self, collection: str, item: Dict[str, Any]) -> Dict[str, Any]:
        self._require(collection, AppMessage.COLLECTION_REQUIRED)
        return self._send("POST", self.context.builder(ResourcePaths.ITEMS, collection).get(), item)

    def create_items(self, collection: str, items: List[Dict[str, Any]]) -> List[Dict[str, Any]]:
        self._require(collection, AppMessage.COLLECTION_REQUIRED)
        if not items:
            return []
        return self._send("POST", self.context.builder(ResourcePaths.ITEMS, collection).get(), items)

    def update_item(self, collection: str, item_id: ItemId, changes: Dict[str, Any]) -> Dict[str, Any]:
        """
        Patch one item; only the given fields change.

        Raises:
            InvalidArgumentError: If collection or item_id is missing
            ApiRequestError: If the server rejects the request
        """
        self._require(collection, AppMessage.COLLECTION_REQUIRED)
        self._require(item_id, AppMessage.ITEM_ID_REQUIRED)
        return self._send("PATCH", self.context.builder(ResourcePaths.ITEMS, collection, item_id).get(), changes)

    def update_items(self, collection: str, keys: List[ItemId], changes: Dict[str, Any]) -> List[Dict[str, Any]]:
        self._require(collection, AppMessage.COLLECTION_REQUIRED)
        if not keys:
            return []
        body = {"keys": list(keys), "data": changes}
        return self._send("PATCH", self.context.builder(ResourcePaths.ITEMS, collection).get(), body)

    def delete_item(self, collection: str, item_id: ItemId) -> None:
        self._require(collection, AppMessage.COLLECTION_REQUIRED)
        self._require(item_id, AppMessage.ITEM_ID_REQUIRED)
        self._send("DELETE", self.context.builder(ResourcePaths.ITEMS, collection, item_id).get())

    def delete_items(self, collection: str, keys: List[ItemId]) -> None:
        self._require(collection, AppMessage.COLLECTION_REQUIRED)
        if not keys:
            return
        self._send("DELETE", self.context.builder(ResourcePaths.ITEMS, collection).get(), list(keys))

    # singletons are addressed by collection only, without an item id
    def get_singleton(self, collection: str, options: Optional[QueryOptions] = None) -> Optional[Dict[str, Any]]:
        self._require(collection, AppMessage.COLLECTION_REQUIRED)
        uri = self.context.builder(ResourcePaths.ITEMS, collection).add_query_options(options).get()
        return self._send("GET", uri)

    def update_singleton(self, collection: str, changes: Dict[str, Any]) -> Dict[str, Any]:
        self._require(collection, AppMessage.COLLECTION_REQUIRED)
        return self._send("PATCH", self.context.builder(ResourcePaths.ITEMS, collection).get(), changes)
