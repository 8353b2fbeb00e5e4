from directus_commons.dependencies.config_provider import load_client_config
from directus_commons.model.context import Context
from directus_commons.repositories.file_repository import FileRepository
from directus_commons.repositories.item_repository import ItemRepository
from directus_commons.services.http_service import HttpService

# Create singleton instances
__context = None
__http_service = None
__item_repository = None
__file_repository = None


def get_context() -> Context:
    global __context
    if __context is None:
        __context = Context(load_client_config())
    return __context


def get_http_service() -> HttpService:
    global __http_service
    if __http_service is None:
        __http_service = HttpService(timeout=get_context().timeout)
    return __http_service


def get_item_repository() -> ItemRepository:
    global __item_repository
    if __item_repository is None:
        __item_repository = ItemRepository(context=get_context(), http=get_http_service())
    return __item_repository


def get_file_repository() -> FileRepository:
    global __file_repository
    if __file_repository is None:
        __file_repository = FileRepository(context=get_context(), http=get_http_service())
    return __file_repository
