from __future__ import annotations

import logging
from typing import Any, Optional

import requests
from requests.adapters import HTTPAdapter


logger = logging.getLogger(__name__)


class ConfigurationError(Exception):
    pass


class WooCommerceError(Exception):

    def __init__(self, message: str, status_code: Optional[int] = None):
        super().__init__(message)
        self.status_code = status_code


class WooCommerceClient:
    """
    Minimal WooCommerce REST API client.
    Only read access is needed by the storefront, so only GET is exposed.
    """

    def __init__(
        self,
        url: str,
        consumer_key: str,
        consumer_secret: str,
        version: str = "wc/v3",
        timeout: float = 15,
        query_string_auth: bool = False,
        session: Optional[requests.Session] = None,
    ):
        if not url or not consumer_key or not consumer_secret:
            raise ConfigurationError(
                "WooCommerce API credentials are not configured properly."
            )

        self.url = url.rstrip("/")
        self.consumer_key = consumer_key
        self.consumer_secret = consumer_secret
        self.version = version
        self.timeout = timeout
        self.query_string_auth = query_string_auth

        # No retries: a failed fetch needs a new explicit request
        if session is None:
            session = requests.Session()
            adapter = HTTPAdapter(max_retries=0)
            session.mount("http://", adapter)
            session.mount("https://", adapter)

        self._session = session

    def _endpoint_url(self, endpoint: str) -> str:
        return f"{self.url}/wp-json/{self.version}/{endpoint.lstrip('/')}"

    def request(
        self,
        method: str,
        endpoint: str,
        params: Optional[dict[str, Any]] = None,
    ) -> Any:

        params = dict(params or {})
        auth = None

        if self.query_string_auth:
            params["consumer_key"] = self.consumer_key
            params["consumer_secret"] = self.consumer_secret
        else:
            auth = (self.consumer_key, self.consumer_secret)

        headers = {
            "Accept": "application/json",
            "User-Agent": "storefront-catalog/1.0",
        }

        try:
            response = self._session.request(
                method=method.upper(),
                url=self._endpoint_url(endpoint),
                headers=headers,
                params=params,
                auth=auth,
                timeout=self.timeout,
            )
        except requests.RequestException as e:
            logger.exception("WooCommerce connection failed")
            raise WooCommerceError(f"Connection failed: {e}")

        if response.status_code >= 400:
            logger.error(
                "WooCommerce error | %s %s | %s | %s",
                method,
                endpoint,
                response.status_code,
                response.text,
            )
            raise WooCommerceError(
                self._error_message(response),
                status_code=response.status_code,
            )

        try:
            return response.json()
        except ValueError:
            logger.error("Invalid WooCommerce JSON response | %s", endpoint)
            raise WooCommerceError(
                "Invalid WooCommerce response",
                status_code=response.status_code,
            )

    def get(self, endpoint: str, params: Optional[dict[str, Any]] = None) -> Any:
        return self.request("GET", endpoint, params=params)

    @staticmethod
    def _error_message(response: requests.Response) -> str:
        """WooCommerce errors come back as {"code", "message", "data"}."""
        try:
            body = response.json()
        except ValueError:
            body = None

        if isinstance(body, dict) and body.get("message"):
            return f"Error: {body['message']} [{body.get('code', 'unknown')}]"

        return f"HTTP {response.status_code} {response.reason or ''}".strip()
