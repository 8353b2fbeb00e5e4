import json
import logging
import re
from typing import Any, Callable, Dict, Optional, Sequence, TYPE_CHECKING

from directus_commons.constants.app_constants import AppConstants
from directus_commons.constants.app_message import AppMessage
from directus_commons.utils.filter_expression import FilterExpression
from directus_commons.utils.request_uri_builder import RequestURIBuilder

if TYPE_CHECKING:
    from directus_commons.model.query_model import QueryOptions
    from directus_commons.model.resource_model import ResourceDescriptor

logger = logging.getLogger(__name__)

_DIGITS = re.compile(r"^[0-9]+$")


class ResourceURIBuilder(RequestURIBuilder):
    """
    RequestURIBuilder with one helper per query parameter the API knows.

    Every helper is a no-op when its argument is empty or invalid, and returns
    the builder so calls can be chained:

        uri = (ResourceURIBuilder(context.base_url, "items/articles")
               .add_fields(["id", "title"])
               .add_filter(FilterExpression().equals("status", "published"))
               .add_sort(["-date_created"])
               .add_limit(10)
               .get())
    """

    @classmethod
    def from_resource(cls,
                      base_uri: str,
                      descriptor: 'ResourceDescriptor',
                      *segments: Any,
                      warn: Optional[Callable[[str], None]] = None) -> 'ResourceURIBuilder':
        """
        Build from a resource descriptor instead of a raw path.

        When the descriptor is flagged as not implemented, `warn` (the module
        logger by default) receives one message; the builder is created anyway.
        """
        if not descriptor.implemented:
            sink = warn or logger.warning
            sink(AppMessage.RESOURCE_NOT_IMPLEMENTED.format(path=descriptor.path))
        builder = cls(base_uri, descriptor.path)
        for segment in segments:
            builder.add_path_param(segment)
        return builder

    @staticmethod
    def _as_count(value: Any, minimum: int = 0) -> Optional[int]:
        if isinstance(value, bool):
            return None
        if isinstance(value, int):
            number = value
        elif isinstance(value, str) and _DIGITS.match(value.strip()):
            number = int(value.strip())
        else:
            return None
        return number if number >= minimum else None

    def _add_count(self, name: str, value: Any, minimum: int = 0) -> 'ResourceURIBuilder':
        number = self._as_count(value, minimum)
        if number is None:
            logger.debug(f"Ignoring invalid {name} value: {value!r}")
            return self
        return self.add_query_param(name, number)

    # -------------------------
    # query parameters
    # -------------------------
    def add_fields(self, fields: Optional[Sequence[str]]) -> 'ResourceURIBuilder':
        if not fields:
            return self
        return self.add_query_param(AppConstants.FIELDS, AppConstants.LIST_SEPARATOR.join(fields))

    def add_filter(self, expression: Optional[FilterExpression]) -> 'ResourceURIBuilder':
        if expression is None:
            return self
        return self.add_query_param(AppConstants.FILTER, expression.get())

    def add_search(self, term: Optional[str]) -> 'ResourceURIBuilder':
        return self.add_query_param(AppConstants.SEARCH, term) if term else self

    def add_sort(self, fields: Optional[Sequence[str]]) -> 'ResourceURIBuilder':
        if not fields:
            return self
        return self.add_query_param(AppConstants.SORT, AppConstants.LIST_SEPARATOR.join(fields))

    def add_limit(self, limit: Any) -> 'ResourceURIBuilder':
        return self._add_count(AppConstants.LIMIT, limit)

    def add_offset(self, offset: Any) -> 'ResourceURIBuilder':
        return self._add_count(AppConstants.OFFSET, offset)

    def add_page(self, page: Any) -> 'ResourceURIBuilder':
        # pages are 1-based on the server
        return self._add_count(AppConstants.PAGE, page, minimum=1)

    def add_version(self, version: Optional[str]) -> 'ResourceURIBuilder':
        return self.add_query_param(AppConstants.VERSION_PARAM, version) if version else self

    def add_meta(self, meta: Optional[str]) -> 'ResourceURIBuilder':
        return self.add_query_param(AppConstants.META, meta) if meta else self

    def add_deep(self, deep: Optional[Dict[str, Any]]) -> 'ResourceURIBuilder':
        if not deep:
            return self
        return self.add_query_param(AppConstants.DEEP, json.dumps(deep, separators=(",", ":")))

    def add_query_options(self, options: Optional['QueryOptions']) -> 'ResourceURIBuilder':
        """Apply every parameter set on a QueryOptions model, in wire order."""
        if options is None:
            return self
        return (self.add_fields(options.fields)
                .add_filter(options.filter)
                .add_search(options.search)
                .add_sort(options.sort)
                .add_limit(options.limit)
                .add_offset(options.offset)
                .add_page(options.page)
                .add_version(options.version)
                .add_meta(options.meta)
                .add_deep(options.deep))
