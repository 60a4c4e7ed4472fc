"""
Session Handle

A per-call pairing of the shared Web API client and a token. Cheap to
create; carries no state of its own.
"""

from dataclasses import dataclass
from typing import Any, Mapping, Optional

from slack_sdk.web.async_client import AsyncWebClient
from slack_sdk.web.async_slack_response import AsyncSlackResponse


@dataclass(frozen=True)
class SessionHandle:
    client: AsyncWebClient
    token: str

    async def api_test(self) -> AsyncSlackResponse:
        """Connectivity probe (api.test)."""
        return await self.client.api_test(token=self.token)

    async def post_message(
        self,
        channel: str,
        content: Mapping[str, Any],
        thread_ts: Optional[str] = None,
    ) -> AsyncSlackResponse:
        """Post rendered content ({"text", "blocks"}) to a channel."""
        return await self.client.chat_postMessage(
            token=self.token,
            channel=channel,
            text=content.get("text"),
            blocks=content.get("blocks"),
            thread_ts=thread_ts,
        )


def open_session(client: AsyncWebClient, token: str) -> SessionHandle:
    return SessionHandle(client=client, token=token)
