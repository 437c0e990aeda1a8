"""
tests/test_api_status.py — Unit tests for fetch_api_status.

HTTP is mocked with respx; no API process is needed.
"""

from __future__ import annotations

import httpx
import pytest
import respx

from swc_web.health import ERROR_STATUS, fetch_api_status

API_URL = "http://api.test"


class TestFetchApiStatus:
    @pytest.mark.asyncio
    async def test_returns_status_field(self):
        with respx.mock() as router:
            route = router.get(f"{API_URL}/health").mock(
                return_value=httpx.Response(200, json={"status": "ok", "version": "0.1.0"})
            )
            status = await fetch_api_status(API_URL)

        assert status == "ok"
        assert route.called

    @pytest.mark.asyncio
    async def test_trailing_slash_is_ignored(self):
        with respx.mock() as router:
            route = router.get(f"{API_URL}/health").mock(
                return_value=httpx.Response(200, json={"status": "ok"})
            )
            await fetch_api_status(f"{API_URL}/")

        assert route.call_count == 1

    @pytest.mark.asyncio
    async def test_server_error_reports_error(self):
        with respx.mock() as router:
            router.get(f"{API_URL}/health").mock(return_value=httpx.Response(500))
            assert await fetch_api_status(API_URL) == ERROR_STATUS

    @pytest.mark.asyncio
    async def test_connection_refused_reports_error(self):
        with respx.mock() as router:
            router.get(f"{API_URL}/health").mock(side_effect=httpx.ConnectError("refused"))
            assert await fetch_api_status(API_URL) == ERROR_STATUS

    @pytest.mark.asyncio
    async def test_timeout_reports_error(self):
        with respx.mock() as router:
            router.get(f"{API_URL}/health").mock(side_effect=httpx.ReadTimeout("slow"))
            assert await fetch_api_status(API_URL, timeout=0.1) == ERROR_STATUS

    @pytest.mark.asyncio
    async def test_non_json_body_reports_error(self):
        with respx.mock() as router:
            router.get(f"{API_URL}/health").mock(
                return_value=httpx.Response(200, text="<html>proxy page</html>")
            )
            assert await fetch_api_status(API_URL) == ERROR_STATUS

    @pytest.mark.asyncio
    async def test_missing_status_reports_error(self):
        with respx.mock() as router:
            router.get(f"{API_URL}/health").mock(
                return_value=httpx.Response(200, json={"healthy": True})
            )
            assert await fetch_api_status(API_URL) == ERROR_STATUS

    @pytest.mark.asyncio
    async def test_list_body_reports_error(self):
        with respx.mock() as router:
            router.get(f"{API_URL}/health").mock(
                return_value=httpx.Response(200, json=["ok"])
            )
            assert await fetch_api_status(API_URL) == ERROR_STATUS

    @pytest.mark.asyncio
    async def test_uses_given_client(self):
        with respx.mock() as router:
            router.get(f"{API_URL}/health").mock(
                return_value=httpx.Response(200, json={"status": "degraded"})
            )
            async with httpx.AsyncClient() as client:
                status = await fetch_api_status(API_URL, client=client)

        assert status == "degraded"
