import logging
import mimetypes
import os
from typing import Any, Dict, List, Optional

from directus_commons.constants.app_constants import AppConstants
from directus_commons.constants.app_message import AppMessage
from directus_commons.constants.resource_paths import ResourcePaths
from directus_commons.model.context import Context
from directus_commons.model.query_model import QueryOptions
from directus_commons.services.http_service import HttpService
from directus_commons.utils.errors import ApiRequestError, InvalidArgumentError

logger = logging.getLogger(__name__)


class FileRepository:
    """Call sites for the binary file (asset) endpoints."""

    def __init__(self, context: Context, http: HttpService):
        self.context = context
        self.http = http
        logger.info("Initialized FileRepository")

    def _send(self, method: str, uri: str, **kwargs) -> Any:
        try:
            return self.http.send_request(method, uri, self.context.auth_headers, **kwargs)
        except ApiRequestError as e:
            logger.error(f"Error calling files endpoint: {str(e)}", exc_info=True)
            raise

    def _uri(self, *segments: Any):
        return self.context.builder(ResourcePaths.FILES, *segments)

    @staticmethod
    def guess_mime_type(file_name: str) -> str:
        mime_type, _ = mimetypes.guess_type(file_name)
        return mime_type or AppConstants.OCTET_STREAM

    def list_files(self, options: Optional[QueryOptions] = None) -> List[Dict[str, Any]]:
        return self._send("GET", self._uri().add_query_options(options).get()) or []

    def get_file(self, file_id: str, options: Optional[QueryOptions] = None) -> Optional[Dict[str, Any]]:
        if not file_id:
            raise InvalidArgumentError(AppMessage.FILE_ID_REQUIRED)
        return self._send("GET", self._uri(file_id).add_query_options(options).get())

    def upload_file(self, path: str, title: Optional[str] = None, folder: Optional[str] = None) -> Dict[str, Any]:
        """
        Upload a local file as multipart/form-data.

        Args:
            path (str): local file path
            title (str): optional display title
            folder (str): optional target folder id

        Returns:
            Dict: the created file record

        Raises:
            FileNotFoundError: If the local file does not exist
            ApiRequestError: If the server rejects the upload
        """
        if not os.path.isfile(path):
            raise FileNotFoundError(f"File not found: {path}")

        # form fields must precede the file part
        form: Dict[str, str] = {}
        if title:
            form[AppConstants.TITLE] = title
        if folder:
            form[AppConstants.FOLDER] = folder

        file_name = os.path.basename(path)
        with open(path, "rb") as handle:
            files = {AppConstants.FILE: (file_name, handle, self.guess_mime_type(file_name))}
            return self._send("POST", self._uri().get(), files=files, data=form or None)

    def update_file(self, file_id: str, changes: Dict[str, Any]) -> Dict[str, Any]:
        if not file_id:
            raise InvalidArgumentError(AppMessage.FILE_ID_REQUIRED)
        return self._send("PATCH", self._uri(file_id).get(), json=changes)

    def delete_file(self, file_id: str) -> None:
        if not file_id:
            raise InvalidArgumentError(AppMessage.FILE_ID_REQUIRED)
        self._send("DELETE", self._uri(file_id).get())
