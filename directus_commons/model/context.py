import logging
from types import MappingProxyType
from typing import Any, Callable, Mapping, Optional

from directus_commons.constants.app_constants import AppConstants
from directus_commons.constants.app_message import AppMessage
from directus_commons.model.config_model import ClientConfig
from directus_commons.model.resource_model import ResourceDescriptor
from directus_commons.utils.errors import InvalidArgumentError
from directus_commons.utils.resource_uri_builder import ResourceURIBuilder

logger = logging.getLogger(__name__)


class Context:
    """
    Read-only carrier of the base URL, auth headers and resource table for one
    endpoint/token pair. Builders are seeded from it; nothing mutates it.
    """

    def __init__(self, config: ClientConfig, warn: Optional[Callable[[str], None]] = None):
        if not config.base_url:
            raise InvalidArgumentError(AppMessage.BASE_URI_REQUIRED)
        self._config = config
        self._base_url = config.base_url
        self._resource_paths = MappingProxyType(dict(config.resource_paths))
        self._auth_headers = MappingProxyType({
            name: template.format(token=config.token, user_agent=config.user_agent)
            for name, template in AppConstants.AUTH_HEADER_TEMPLATES.items()
        })
        self._warn = warn
        logger.info(f"Initialized Context for {self._base_url}")

    @property
    def base_url(self) -> str:
        return self._base_url

    @property
    def resource_paths(self) -> Mapping[str, ResourceDescriptor]:
        return self._resource_paths

    @property
    def auth_headers(self) -> Mapping[str, str]:
        return self._auth_headers

    @property
    def timeout(self) -> float:
        return self._config.timeout

    def resource(self, name: str) -> ResourceDescriptor:
        try:
            return self._resource_paths[name]
        except KeyError:
            raise InvalidArgumentError(AppMessage.UNKNOWN_RESOURCE.format(name=name)) from None

    def builder(self, name: str, *segments: Any) -> ResourceURIBuilder:
        """
        Start a ResourceURIBuilder for the named resource, e.g.
        `context.builder(ResourcePaths.ITEMS, "articles", 15)`.
        """
        return ResourceURIBuilder.from_resource(self._base_url, self.resource(name), *segments, warn=self._warn)

    def __repr__(self) -> str:
        return f"Context(base_url={self._base_url!r})"
