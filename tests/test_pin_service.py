"""
Unit tests for the HTTP PIN verifier.

The PIN endpoint is replaced by an httpx.MockTransport.
"""

import json

import httpx
import pytest

from atm_terminal.core.interfaces import PinVerifier
from atm_terminal.infrastructure.pin_service import HttpPinVerifier


PIN_URL = "https://pin.example/api/pin/"


def pin_endpoint(request: httpx.Request) -> httpx.Response:
    """Answer like the PIN service: 200 with a balance for PIN 1111."""
    body = json.loads(request.content)
    if body["pin"] == "1111":
        return httpx.Response(200, json={"currentBalance": 220})
    return httpx.Response(403, json={"error": "Incorrect PIN"})


class TestHttpPinVerifier:
    """Tests for HttpPinVerifier."""

    def test_satisfies_protocol(self):
        """Test the verifier is a PinVerifier."""
        assert isinstance(HttpPinVerifier(PIN_URL), PinVerifier)

    @pytest.mark.asyncio
    async def test_valid_pin(self):
        """Test a 200 answer returns the balance."""
        async with httpx.AsyncClient(transport=httpx.MockTransport(pin_endpoint)) as client:
            verification = await HttpPinVerifier(PIN_URL, client=client).verify("1111")

        assert verification.ok is True
        assert verification.balance == 220

    @pytest.mark.asyncio
    async def test_invalid_pin(self):
        """Test a non-200 answer is a rejection."""
        async with httpx.AsyncClient(transport=httpx.MockTransport(pin_endpoint)) as client:
            verification = await HttpPinVerifier(PIN_URL, client=client).verify("0000")

        assert verification.ok is False

    @pytest.mark.asyncio
    async def test_request_format(self):
        """Test the PIN is posted as JSON to the configured URL."""
        requests = []

        def handler(request: httpx.Request) -> httpx.Response:
            requests.append(request)
            return httpx.Response(200, json={"currentBalance": 0})

        async with httpx.AsyncClient(transport=httpx.MockTransport(handler)) as client:
            await HttpPinVerifier(PIN_URL, client=client).verify("4321")

        assert len(requests) == 1
        assert requests[0].method == "POST"
        assert str(requests[0].url) == PIN_URL
        assert requests[0].headers["Content-Type"].startswith("application/json")
        assert json.loads(requests[0].content) == {"pin": "4321"}

    @pytest.mark.asyncio
    @pytest.mark.parametrize(
        "response",
        [
            httpx.Response(200, json={}),
            httpx.Response(200, json={"currentBalance": "lots"}),
            httpx.Response(200, text="not json"),
        ],
    )
    async def test_malformed_answer(self, response):
        """Test a 200 without a usable balance is a rejection."""
        async with httpx.AsyncClient(transport=httpx.MockTransport(lambda request: response)) as client:
            verification = await HttpPinVerifier(PIN_URL, client=client).verify("1111")

        assert verification.ok is False

    @pytest.mark.asyncio
    async def test_transport_error(self):
        """Test an unreachable service is a rejection."""

        def handler(request: httpx.Request) -> httpx.Response:
            raise httpx.ConnectError("Connection refused", request=request)

        async with httpx.AsyncClient(transport=httpx.MockTransport(handler)) as client:
            verification = await HttpPinVerifier(PIN_URL, client=client).verify("1111")

        assert verification.ok is False
