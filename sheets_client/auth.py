"""Service account authentication for the Sheets API."""

import asyncio

from google.auth.exceptions import GoogleAuthError
from google.auth.transport.requests import Request
from google.oauth2 import service_account
from loguru import logger

from sheets_client.errors import AuthenticationError

SCOPES = ["https://www.googleapis.com/auth/spreadsheets.readonly"]


class ServiceAccountAuth:
    """Bearer tokens for a single service account, refreshed on expiry."""

    def __init__(
        self,
        client_email: str,
        private_key: str,
        private_key_id: str | None = None,
        project_id: str | None = None,
        token_uri: str = "https://oauth2.googleapis.com/token",
    ):
        info = {
            "type": "service_account",
            "client_email": client_email,
            "private_key": private_key,
            "private_key_id": private_key_id,
            "project_id": project_id,
            "token_uri": token_uri,
        }
        try:
            self._credentials = service_account.Credentials.from_service_account_info(info, scopes=SCOPES)
        except (ValueError, GoogleAuthError) as e:
            raise AuthenticationError(f"Invalid service account credential: {e}") from e

    async def token(self) -> str:
        """Return a valid access token, refreshing it off the event loop if needed."""
        if not self._credentials.valid:
            try:
                await asyncio.to_thread(self._credentials.refresh, Request())
            except GoogleAuthError as e:
                raise AuthenticationError(f"Token refresh failed: {e}") from e
            logger.debug("Service account token refreshed")
        return self._credentials.token
