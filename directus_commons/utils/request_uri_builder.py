import logging
from typing import Any, List, Optional
from urllib.parse import quote

from directus_commons.constants.app_constants import AppConstants
from directus_commons.constants.app_message import AppMessage
from directus_commons.utils.errors import InvalidArgumentError, NotInitializedError

logger = logging.getLogger(__name__)


class RequestURIBuilder:
    """
    Assembles a request URI from a base URI, ordered path segments and ordered
    query parameters.

    Query fragments are stored bare and joined when rendering: the first one
    gets `?`, every later one `&`. Callers never supply join characters.
    """

    def __init__(self, base_uri: Optional[str] = None, initial_segment: Optional[str] = None):
        self.base_uri: str = ""
        self.path_params: List[str] = []
        self.query_params: List[str] = []
        self.constructed = False
        if base_uri is not None:
            self.construct(base_uri, initial_segment)

    def construct(self, base_uri: str, initial_segment: Optional[str] = None) -> 'RequestURIBuilder':
        """
        Set the base URI and, optionally, the first path segment.

        Raises:
            InvalidArgumentError: if base_uri is empty
        """
        if not base_uri:
            raise InvalidArgumentError(AppMessage.BASE_URI_REQUIRED)
        if not base_uri.endswith(AppConstants.PATH_SEPARATOR):
            base_uri += AppConstants.PATH_SEPARATOR
        self.base_uri = base_uri
        self.constructed = True
        if initial_segment:
            # the resource path may span several segments, e.g. "items/articles"
            for part in str(initial_segment).split(AppConstants.PATH_SEPARATOR):
                self.add_path_param(part)
        return self

    def _ensure_constructed(self):
        if not self.constructed:
            raise NotInitializedError(AppMessage.NOT_INITIALIZED)

    # -------------------------
    # encoding helpers
    # -------------------------
    @staticmethod
    def _encode_segment(segment: str) -> str:
        if segment in AppConstants.DOT_SEGMENTS:
            raise InvalidArgumentError(AppMessage.DOT_SEGMENT.format(segment=segment))
        return quote(segment, safe=AppConstants.SEGMENT_SAFE_CHARS)

    @staticmethod
    def _encode_value(value: Any) -> str:
        return quote(str(value), safe=AppConstants.QUERY_SAFE_CHARS)

    # -------------------------
    # mutation
    # -------------------------
    def add_path_param(self, segment: Optional[Any]) -> 'RequestURIBuilder':
        self._ensure_constructed()
        if segment is None or segment == "":
            return self
        encoded = self._encode_segment(str(segment))
        if encoded:
            self.path_params.append(encoded)
        return self

    def add_query_param(self, name: Optional[str], value: Optional[Any] = None) -> 'RequestURIBuilder':
        """
        Append one query parameter.

        `add_query_param("limit", 10)` stores `limit=10`; `add_query_param("export")`
        or an empty value stores the bare flag. Leading `?` or `&` left over from
        hand-joined fragments are dropped.
        """
        self._ensure_constructed()
        if not name:
            return self
        name = name.lstrip(AppConstants.QUERY_PREFIX + AppConstants.QUERY_JOINER)
        if not name:
            return self
        if value is None or value == "":
            fragment = name
        else:
            fragment = f"{name}={self._encode_value(value)}"
        self.query_params.append(fragment)
        return self

    # -------------------------
    # rendering
    # -------------------------
    def get(self) -> str:
        self._ensure_constructed()
        uri = self.base_uri + AppConstants.PATH_SEPARATOR.join(self.path_params)
        if self.query_params:
            uri += AppConstants.QUERY_PREFIX + AppConstants.QUERY_JOINER.join(self.query_params)
        logger.debug(f"Rendered request URI: {uri}")
        return uri

    def __str__(self) -> str:
        return self.get()
