"""
HTTP client for the PIN verification service.

The service takes ``{"pin": "<pin>"}`` and answers 200 with
``{"currentBalance": <int>}`` when the PIN is valid.
"""

from typing import Optional

import httpx

from atm_terminal.configs import PIN_SERVICE_TIMEOUT, PIN_SERVICE_URL
from atm_terminal.core.exceptions import PinServiceError
from atm_terminal.core.value_objects import PinVerification
from atm_terminal.loggers import logger


class HttpPinVerifier:
    """
    PIN verifier backed by the remote PIN endpoint.

    Any answer other than a 200 carrying a balance counts as a rejection.
    """

    def __init__(
        self,
        url: str = PIN_SERVICE_URL,
        timeout: float = PIN_SERVICE_TIMEOUT,
        client: Optional[httpx.AsyncClient] = None,
    ) -> None:
        """
        Initialize the verifier.

        Args:
            url: PIN endpoint URL.
            timeout: Request timeout in seconds.
            client: Optional shared HTTP client (one is created per request
                otherwise).
        """
        self._url = url
        self._timeout = timeout
        self._client = client

    async def verify(self, pin: str) -> PinVerification:
        """
        Verify a PIN against the remote service.

        Args:
            pin: PIN entered on the keypad.

        Returns:
            Verified result with the balance, or a rejection.
        """
        try:
            response = await self._post(pin)
        except PinServiceError as e:
            logger.error(f"PIN service unavailable: {e.message}")
            return PinVerification.rejected()

        if response.status_code != httpx.codes.OK:
            logger.info(f"PIN service answered {response.status_code}")
            return PinVerification.rejected()

        try:
            balance = int(response.json()["currentBalance"])
        except (ValueError, KeyError, TypeError) as e:
            logger.error(f"Malformed PIN service response: {e}")
            return PinVerification.rejected()

        return PinVerification.verified(balance)

    async def _post(self, pin: str) -> httpx.Response:
        """Send the PIN to the service."""
        headers = {"Content-Type": "application/json;charset=UTF-8"}
        try:
            if self._client is not None:
                return await self._client.post(
                    self._url, json={"pin": pin}, headers=headers, timeout=self._timeout
                )
            async with httpx.AsyncClient() as client:
                return await client.post(
                    self._url, json={"pin": pin}, headers=headers, timeout=self._timeout
                )
        except httpx.HTTPError as e:
            raise PinServiceError(str(e), details={"url": self._url}) from e
