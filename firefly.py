"""Async client for the Firefly III insight endpoints."""

import logging
from datetime import date
from typing import List, Literal, Optional, Union

import httpx
from pydantic import BaseModel, Field, ValidationError

logger = logging.getLogger(__name__)

InsightKind = Literal["expense", "income"]

# Error pages can be large HTML documents
MAX_ERROR_BODY = 200


class FireflyError(Exception):
    """Error while talking to the Firefly III API."""

    def __init__(self, message: str, status_code: Optional[int] = None):
        super().__init__(message)
        self.status_code = status_code


class InsightGroupEntry(BaseModel):
    """One category's net movement over a period, as returned by /insight."""

    id: Optional[Union[str, int]] = Field(default=None, description="Category ID")
    name: Optional[str] = Field(default=None, description="Category name")
    difference: Optional[str] = Field(default=None, description="Net amount as a decimal string")
    difference_float: Optional[float] = Field(default=None, description="Net amount")
    currency_id: Optional[Union[str, int]] = Field(default=None, description="Currency ID")
    currency_code: Optional[str] = Field(default=None, description="ISO currency code")


class FireflyClient:
    """Thin wrapper over the Firefly III REST API."""

    def __init__(self, base_url: str, token: str, timeout: float = 30.0):
        """Initialize the client.

        Args:
            base_url: Root URL of the Firefly III instance.
            token: Personal access token.
            timeout: Request timeout in seconds.
        """
        self.base_url = base_url.rstrip("/")
        self.token = token
        self.timeout = timeout

    async def insight_category(
        self, kind: InsightKind, start: date, end: date
    ) -> List[InsightGroupEntry]:
        """Fetch per-category totals for expenses or income.

        Args:
            kind: "expense" or "income".
            start: First day of the range (inclusive).
            end: Last day of the range (inclusive).

        Returns:
            List of entries, one per category and currency.

        Raises:
            FireflyError: If the request fails or the response is malformed.
        """
        url = f"{self.base_url}/api/v1/insight/{kind}/category"
        params = {"start": start.isoformat(), "end": end.isoformat()}
        logger.debug("GET %s %s", url, params)

        async with httpx.AsyncClient() as client:
            try:
                response = await client.get(
                    url,
                    params=params,
                    headers={
                        "Authorization": f"Bearer {self.token}",
                        "Accept": "application/json",
                    },
                    timeout=self.timeout,
                )
            except httpx.HTTPError as e:
                raise FireflyError(f"HTTP error fetching {kind} insight: {e}") from e

        if response.status_code != 200:
            raise FireflyError(
                f"API returned status {response.status_code}: {response.text[:MAX_ERROR_BODY]}",
                status_code=response.status_code,
            )

        try:
            payload = response.json()
        except ValueError as e:
            raise FireflyError(f"Invalid JSON response: {e}") from e

        if not isinstance(payload, list):
            raise FireflyError(f"Unexpected {kind} insight payload: {type(payload).__name__}")

        try:
            entries = [InsightGroupEntry.model_validate(item) for item in payload]
        except ValidationError as e:
            raise FireflyError(f"Malformed {kind} insight entry: {e}") from e

        logger.debug("Fetched %d %s entries", len(entries), kind)
        return entries

    async def insight_expense_category(self, start: date, end: date) -> List[InsightGroupEntry]:
        return await self.insight_category("expense", start, end)

    async def insight_income_category(self, start: date, end: date) -> List[InsightGroupEntry]:
        return await self.insight_category("income", start, end)
