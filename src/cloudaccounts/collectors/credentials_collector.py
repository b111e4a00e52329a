# src/cloudaccounts/collectors/credentials_collector.py
"""
Collector for the credentials service: the account catalog and the
per-account detail records.
"""

import logging
from typing import Any, List, Optional
from urllib.parse import quote

import httpx
from pydantic import ValidationError

from ..core.config import config
from ..core.exceptions import FetchError
from ..models.account import Account
from ..utils.http_client import get_async_http_client

logger = logging.getLogger(__name__)


class CredentialsCollector:
    """
    Reads accounts from the credentials service.

    Every call issues exactly one request; nothing is cached here. Any
    transport error, non-2xx status or unparseable body is raised as a
    FetchError so callers can decide between propagating and falling back.
    """

    def __init__(self, base_url: Optional[str] = None, token: Optional[str] = None):
        self.base_url = (base_url or config.CREDENTIALS_API_URL).rstrip("/")
        self.token = token if token is not None else config.CREDENTIALS_API_TOKEN

    async def collect(self) -> List[Account]:
        """
        Fetches the full account catalog.

        Returns:
            A list of Account objects in server order.

        Raises:
            FetchError: if the catalog cannot be retrieved.
        """
        url = f"{self.base_url}/credentials"
        try:
            accounts = self._parse_catalog(url, await self._get_json(url))
        except FetchError as e:
            logger.error("Failed to fetch the account catalog: %s", e)
            raise

        logger.info("Fetched %d accounts from the credentials service.", len(accounts))
        return accounts

    async def collect_account(self, account_name: str) -> Account:
        """
        Fetches the detail record (regions and provider attributes) for one account.

        Raises:
            FetchError: if the record cannot be retrieved.
        """
        url = f"{self.base_url}/credentials/{quote(account_name, safe='')}"
        try:
            return self._parse_account(url, account_name, await self._get_json(url))
        except FetchError as e:
            logger.warning("Failed to fetch details for account '%s': %s", account_name, e)
            raise

    def _parse_catalog(self, url: str, payload: Any) -> List[Account]:
        if not isinstance(payload, list):
            raise FetchError(f"Expected a list of accounts from {url}, got {type(payload).__name__}.", url=url)

        try:
            return [Account.model_validate(item) for item in payload]
        except ValidationError as e:
            raise FetchError(f"Malformed account in catalog from {url}: {e}", url=url) from e

    def _parse_account(self, url: str, account_name: str, payload: Any) -> Account:
        if not isinstance(payload, dict):
            raise FetchError(f"Expected an account object from {url}, got {type(payload).__name__}.", url=url)

        # Some credentials services omit the identifying fields on detail records.
        payload.setdefault("name", account_name)
        payload.setdefault("type", "")

        try:
            return Account.model_validate(payload)
        except ValidationError as e:
            raise FetchError(f"Malformed account details from {url}: {e}", url=url) from e

    async def _get_json(self, url: str) -> Any:
        logger.debug("GET %s", url)
        async with get_async_http_client(token=self.token) as client:
            try:
                resp = await client.get(url)
                resp.raise_for_status()
            except httpx.HTTPStatusError as exc:
                raise FetchError(
                    f"Credentials service returned {exc.response.status_code} for {url}",
                    url=url,
                    status_code=exc.response.status_code,
                ) from exc
            except httpx.HTTPError as exc:
                raise FetchError(f"Request to {url} failed: {exc}", url=url) from exc

            try:
                return resp.json()
            except ValueError as exc:
                logger.debug("Raw response content from %s: %s", url, resp.text[:500])
                raise FetchError(f"Credentials service sent a non-JSON response for {url}", url=url) from exc
