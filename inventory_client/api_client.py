import logging
from typing import Any, Dict, Optional

import httpx

from inventory_client.config import client_settings

logger = logging.getLogger(__name__)


class ApiError(Exception):
    """Non-success answer from the API; ``message`` is the server text as sent."""

    def __init__(self, status_code: int, message: str):
        super().__init__(message)
        self.status_code = status_code
        self.message = message


def _error_message(response: httpx.Response) -> str:
    try:
        body = response.json()
    except ValueError:
        return response.text or response.reason_phrase
    if isinstance(body, dict) and "detail" in body:
        return str(body["detail"])
    return response.text


class ApiClient:
    def __init__(self,
                 base_url: Optional[str] = None,
                 timeout: Optional[float] = None,
                 http_client: Optional[httpx.Client] = None):
        self._client = http_client or httpx.Client(
            base_url=base_url or client_settings.api_url,
            timeout=timeout or client_settings.timeout,
        )

    def close(self) -> None:
        self._client.close()

    def send_request(self,
                     method: str,
                     endpoint: str,
                     data: Any = None,
                     token: Optional[str] = None,
                     params: Optional[Dict[str, Any]] = None) -> httpx.Response:
        query = {key: value for key, value in (params or {}).items() if value is not None}
        if token:
            query["token"] = token

        try:
            response = self._client.request(method, f"/api/{endpoint.lstrip('/')}", json=data, params=query)
        except httpx.HTTPError as e:
            logger.error(f"Request {method} {endpoint} failed: {e}")
            raise ApiError(0, f"Ошибка подключения: {e}")

        if response.is_error:
            raise ApiError(response.status_code, _error_message(response))
        return response

    def get(self, endpoint: str, token: Optional[str] = None, params: Optional[Dict[str, Any]] = None) -> Any:
        return self._json(self.send_request("GET", endpoint, token=token, params=params))

    def post(self, endpoint: str, data: Any, token: Optional[str] = None) -> Any:
        return self._json(self.send_request("POST", endpoint, data=data, token=token))

    def put(self, endpoint: str, data: Any, token: Optional[str] = None) -> None:
        self.send_request("PUT", endpoint, data=data, token=token)

    def delete(self, endpoint: str, token: Optional[str] = None) -> None:
        self.send_request("DELETE", endpoint, token=token)

    @staticmethod
    def _json(response: httpx.Response) -> Any:
        if response.status_code == 204 or not response.content:
            return None
        return response.json()
