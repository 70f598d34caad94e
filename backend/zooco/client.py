"""
HTTP client for the ZOOCO API.

Used by the client-side store when reminders live on a remote server. Every
call is a single request: no retries, no cancellation, and the transport's
timeout is the only deadline. Any network failure or non-2xx status raises
`TransportError`.
"""
from typing import Any, Dict, List, Optional

import httpx
from pydantic import BaseModel
from pydantic_core import to_jsonable_python

from zooco.config import settings
from zooco.core.errors import TransportError
from zooco.core.logging import logger
from zooco.schemas.pet import Pet
from zooco.schemas.reminder import ReminderResponse


def _body(payload: Any) -> Dict[str, Any]:
    # Mappings may carry datetimes and enums; encode them the way pydantic would
    if isinstance(payload, BaseModel):
        return payload.model_dump(mode="json", exclude_unset=True)
    return to_jsonable_python(dict(payload))


class ZoocoClient:
    def __init__(
        self,
        base_url: Optional[str] = None,
        timeout: Optional[float] = None,
        transport: Optional[httpx.AsyncBaseTransport] = None,
    ):
        self.base_url = (base_url or settings.api_base_url).rstrip("/")
        self.timeout = timeout if timeout is not None else settings.api_timeout_seconds
        self._transport = transport

    async def _request(
        self,
        method: str,
        path: str,
        failure: str,
        json: Optional[Dict[str, Any]] = None,
    ) -> Any:
        """
        Send one request and decode the JSON response.

        Args:
            method: HTTP method
            path: Path relative to the API base URL
            failure: Message used when the request fails
            json: Optional request body

        Returns:
            The decoded body, or None for empty responses
        """
        try:
            async with httpx.AsyncClient(
                base_url=self.base_url,
                timeout=self.timeout,
                transport=self._transport,
            ) as client:
                response = await client.request(method, path, json=json)
        except httpx.HTTPError as e:
            logger.error("%s: %s %s raised %s", failure, method, path, e)
            raise TransportError(f"{failure}: {e}") from e

        if response.is_error:
            detail = None
            try:
                detail = response.json().get("error")
            except (ValueError, AttributeError):
                pass
            logger.error("%s: %s %s returned %d", failure, method, path, response.status_code)
            message = f"{failure}: {detail}" if detail else failure
            raise TransportError(message, response.status_code)

        if response.status_code == 204 or not response.content:
            return None
        return response.json()

    # Pets

    async def list_pets(self) -> List[Pet]:
        data = await self._request("GET", "/pets", "Failed to fetch pets")
        return [Pet.model_validate(item) for item in data]

    async def get_pet(self, pet_id: str) -> Pet:
        data = await self._request("GET", f"/pets/{pet_id}", "Failed to fetch pet")
        return Pet.model_validate(data)

    async def create_pet(self, payload: Any) -> Pet:
        data = await self._request("POST", "/pets", "Failed to create pet", _body(payload))
        return Pet.model_validate(data)

    async def update_pet(self, pet_id: str, payload: Any) -> Pet:
        data = await self._request(
            "PATCH", f"/pets/{pet_id}", "Failed to update pet", _body(payload)
        )
        return Pet.model_validate(data)

    async def delete_pet(self, pet_id: str) -> bool:
        await self._request("DELETE", f"/pets/{pet_id}", "Failed to delete pet")
        return True

    # Reminders

    async def list_reminders(self) -> List[ReminderResponse]:
        data = await self._request("GET", "/reminders", "Failed to fetch reminders")
        return [ReminderResponse.model_validate(item) for item in data]

    async def list_reminders_for_pet(self, pet_id: str) -> List[ReminderResponse]:
        data = await self._request(
            "GET", f"/reminders/pet/{pet_id}", "Failed to fetch reminders"
        )
        return [ReminderResponse.model_validate(item) for item in data]

    async def get_reminder(self, reminder_id: str) -> ReminderResponse:
        data = await self._request(
            "GET", f"/reminders/{reminder_id}", "Failed to fetch reminder"
        )
        return ReminderResponse.model_validate(data)

    async def create_reminder(self, payload: Any) -> ReminderResponse:
        data = await self._request(
            "POST", "/reminders", "Failed to create reminder", _body(payload)
        )
        return ReminderResponse.model_validate(data)

    async def update_reminder(self, reminder_id: str, payload: Any) -> ReminderResponse:
        data = await self._request(
            "PATCH", f"/reminders/{reminder_id}", "Failed to update reminder", _body(payload)
        )
        return ReminderResponse.model_validate(data)

    async def delete_reminder(self, reminder_id: str) -> bool:
        await self._request("DELETE", f"/reminders/{reminder_id}", "Failed to delete reminder")
        return True

    async def complete_reminder(self, reminder_id: str) -> ReminderResponse:
        data = await self._request(
            "PATCH", f"/reminders/{reminder_id}/complete", "Failed to complete reminder"
        )
        return ReminderResponse.model_validate(data)

    async def toggle_reminder(self, reminder_id: str) -> ReminderResponse:
        data = await self._request(
            "POST", f"/reminders/{reminder_id}/toggle", "Failed to toggle reminder"
        )
        return ReminderResponse.model_validate(data)
