import logging
from typing import Any, Dict, Mapping, Optional

import httpx

from directus_commons.constants.app_constants import AppConstants
from directus_commons.constants.app_message import AppMessage
from directus_commons.utils.errors import ApiRequestError

logger = logging.getLogger(__name__)


class HttpService:
    """Sends one request per call and unwraps the `{"data": ...}` envelope."""

    def __init__(self, timeout: float = AppConstants.DEFAULT_TIMEOUT,
                 transport: Optional[httpx.BaseTransport] = None):
        """
        Args:
            timeout: request timeout in seconds
            transport: optional httpx transport, e.g. httpx.MockTransport in tests
        """
        self.timeout = timeout
        self.transport = transport
        logger.info("Initialized HttpService")

    def send_request(self,
                     method: str,
                     uri: str,
                     headers: Mapping[str, str],
                     json: Any = None,
                     files: Optional[Dict[str, Any]] = None,
                     data: Optional[Dict[str, Any]] = None) -> Any:
        """
        Send a request and return the `data` member of the response body.

        Args:
            method: HTTP method
            uri: fully rendered request URI
            headers: request headers, usually Context.auth_headers
            json: JSON body for create/update calls
            files: multipart file parts, passed to httpx as is
            data: multipart form fields sent alongside `files`

        Returns:
            The unwrapped `data` value, or None when the server sends no content

        Raises:
            ApiRequestError: on an error status or when the request cannot be sent
        """
        logger.debug(f"{method} {uri}")
        try:
            with httpx.Client(timeout=self.timeout, transport=self.transport) as client:
                response = client.request(method, uri, headers=dict(headers), json=json, files=files, data=data)
        except httpx.HTTPError as e:
            logger.error(AppMessage.REQUEST_NOT_SENT.format(method=method, uri=uri, reason=str(e)), exc_info=True)
            raise ApiRequestError(AppMessage.REQUEST_NOT_SENT.format(method=method, uri=uri, reason=str(e))) from e

        if response.status_code >= 400:
            errors = self._read_errors(response)
            message = AppMessage.REQUEST_FAILED.format(method=method, uri=uri, status=response.status_code)
            logger.error(f"{message}: {errors}")
            raise ApiRequestError(message, status_code=response.status_code, errors=errors)

        if response.status_code == 204 or not response.content:
            return None
        try:
            body = response.json()
        except ValueError as e:
            message = AppMessage.RESPONSE_NOT_JSON.format(method=method, uri=uri, status=response.status_code)
            logger.error(message, exc_info=True)
            raise ApiRequestError(message, status_code=response.status_code, errors=[response.text]) from e
        if isinstance(body, dict):
            return body.get(AppConstants.DATA)
        return body

    @staticmethod
    def _read_errors(response: httpx.Response) -> list:
        try:
            body = response.json()
        except ValueError:
            return [response.text] if response.text else []
        if isinstance(body, dict):
            return body.get(AppConstants.ERRORS, [body])
        return [body]
