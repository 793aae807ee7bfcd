"""
Replays parsed grocery items into the web form.

Items are submitted one at a time, in list order, with a random pause
between submissions. A failed item is logged and the run moves on.
"""

import asyncio
import logging
import random
from datetime import datetime
from typing import Any, Optional

import httpx

from grocery_list.config import get_settings
from grocery_list.errors import EmptyListError, FormServerUnavailable
from grocery_list.models.grocery import (
    FormSubmission,
    GroceryItem,
    ReplayReport,
    SubmissionResult,
)

logger = logging.getLogger(__name__)

SUBMISSIONS_PATH = "/api/submissions"
HEALTH_PATH = "/health"


class FormClient:
    """Client for the grocery form server."""

    def __init__(
        self,
        base_url: str | None = None,
        timeout: float | None = None,
        transport: httpx.AsyncBaseTransport | None = None,
    ):
        settings = get_settings()
        self.base_url = (base_url or settings.form_base_url).rstrip("/")
        self.timeout = timeout if timeout is not None else settings.request_timeout_s
        self._transport = transport
        self._client: httpx.AsyncClient | None = None

    async def _get_client(self) -> httpx.AsyncClient:
        """Get or create HTTP client."""
        if self._client is None:
            self._client = httpx.AsyncClient(
                base_url=self.base_url,
                timeout=self.timeout,
                transport=self._transport,
            )
        return self._client

    async def close(self):
        """Close the HTTP client."""
        if self._client:
            await self._client.aclose()
            self._client = None

    async def __aenter__(self) -> "FormClient":
        return self

    async def __aexit__(self, *exc_info):
        await self.close()

    async def check_server(self) -> bool:
        """Return True if the form server answers its health check."""
        client = await self._get_client()
        try:
            response = await client.get(HEALTH_PATH)
        except httpx.HTTPError as e:
            logger.debug(f"Health check failed for {self.base_url}: {e}")
            return False
        return response.is_success

    async def submit(self, item: GroceryItem) -> dict[str, Any]:
        """Submit one item to the form."""
        client = await self._get_client()
        payload = FormSubmission.from_item(item).model_dump(exclude_none=True)
        response = await client.post(SUBMISSIONS_PATH, json=payload)
        response.raise_for_status()
        return response.json()


class FormSubmitter:
    """Sequential replay of grocery items into the form."""

    def __init__(
        self,
        client: FormClient,
        delay_min_s: float | None = None,
        delay_max_s: float | None = None,
        rng: Optional[random.Random] = None,
    ):
        settings = get_settings()
        self.client = client
        self.delay_min_s = settings.submit_delay_min_s if delay_min_s is None else delay_min_s
        self.delay_max_s = settings.submit_delay_max_s if delay_max_s is None else delay_max_s
        if self.delay_max_s < self.delay_min_s:
            self.delay_min_s, self.delay_max_s = self.delay_max_s, self.delay_min_s
        self._rng = rng or random.Random()

    def _next_delay(self) -> float:
        return self._rng.uniform(self.delay_min_s, self.delay_max_s)

    async def replay(self, items: list[GroceryItem]) -> ReplayReport:
        """
        Submit every item in order.

        Raises:
            EmptyListError: nothing to submit
            FormServerUnavailable: the form server is not reachable
        """
        if not items:
            raise EmptyListError("No items to submit")

        if not await self.client.check_server():
            raise FormServerUnavailable(self.client.base_url)

        logger.info(f"Submitting {len(items)} items to {self.client.base_url}")
        report = ReplayReport(started_at=datetime.utcnow())

        for index, item in enumerate(items, start=1):
            logger.info(f"Processing item {index}/{len(items)}: {item.item} ({item.quantity})")
            try:
                await self.client.submit(item)
            except (httpx.HTTPError, ValueError) as e:
                logger.error(f"Error submitting item {item.item}: {e}")
                report.results.append(
                    SubmissionResult(index=index, item=item, success=False, error=str(e))
                )
            else:
                logger.info(f"Submitted: {item.category} - {item.item} ({item.quantity})")
                report.results.append(SubmissionResult(index=index, item=item, success=True))

            if index < len(items):
                delay = self._next_delay()
                if delay > 0:
                    await asyncio.sleep(delay)

        report.finished_at = datetime.utcnow()
        logger.info(
            f"Replay finished: {report.submitted_count} submitted, "
            f"{report.failed_count} failed"
        )
        return report


async def replay_items(
    items: list[GroceryItem],
    base_url: str | None = None,
) -> ReplayReport:
    """Replay items into the form server at base_url."""
    async with FormClient(base_url=base_url) as client:
        return await FormSubmitter(client).replay(items)
