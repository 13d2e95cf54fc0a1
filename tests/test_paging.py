"""Paging scenarios for bucket and operation-log listings."""

from __future__ import annotations

import math
import re
from datetime import datetime, timedelta, timezone

import httpx
import pytest

from tsplatform import FindOptions, PlatformClient

BASE_URL = "http://localhost:9999"
BUCKET_ID = "0a1b2c3d4e5f6071"
MISSING_ID = "020f755c3c082000"


def _log_entries(count: int) -> list[dict[str, object]]:
    """Oldest first: one "Bucket Created" followed by updates."""
    start = datetime(2026, 2, 6, tzinfo=timezone.utc)
    entries = []
    for i in range(count):
        entries.append(
            {
                "description": "Bucket Created" if i == 0 else "Bucket Updated",
                "time": (start + timedelta(seconds=i)).isoformat(),
                "userID": "user_1",
                "links": {"user": "/api/v2/users/user_1"},
            }
        )
    return entries


def _bucket_payloads(count: int) -> list[dict[str, object]]:
    return [
        {
            "id": f"bucket{i:04d}",
            "name": f"{i}-IT",
            "orgID": "org_123",
            "retentionRules": [],
        }
        for i in range(count)
    ]


def _collection_callback(key: str, records: list[dict[str, object]]):
    """Serve ``records`` (oldest first) honoring limit/offset/descending."""

    def callback(request: httpx.Request) -> httpx.Response:
        params = request.url.params
        ordered = list(records)
        if params.get("descending", "true") == "true":
            ordered.reverse()
        offset = int(params.get("offset", "0"))
        limit = params.get("limit")
        end = offset + int(limit) if limit is not None else None
        return httpx.Response(
            200,
            json={"links": {"self": str(request.url.raw_path, "ascii")}, key: ordered[offset:end]},
        )

    return callback


def _add_logs_endpoint(httpx_mock, entries: list[dict[str, object]]) -> None:
    httpx_mock.add_callback(
        _collection_callback("logs", entries),
        method="GET",
        url=re.compile(rf"{BASE_URL}/api/v2/buckets/{BUCKET_ID}/logs.*"),
        is_reusable=True,
    )


def _client() -> PlatformClient:
    return PlatformClient(url=BASE_URL, token="test-token")


class TestBucketLogsPaging:
    @pytest.mark.asyncio
    async def test_twenty_entries_in_pages_of_five(self, httpx_mock):
        _add_logs_endpoint(httpx_mock, _log_entries(20))

        async with _client() as client:
            options = FindOptions(limit=5, offset=0)
            seen = []
            for expected_offset in (5, 10, 15, 20):
                page = await client.buckets.find_logs(BUCKET_ID, options)
                assert len(page.items) == 5
                next_options = page.next_page()
                assert next_options is not None
                assert next_options.offset == expected_offset
                assert next_options.limit == 5
                seen.extend(page.items)
                options = next_options

            last = await client.buckets.find_logs(BUCKET_ID, options)
            assert last.items == []
            assert last.next_page() is None

        assert len(seen) == 20
        # newest first by default
        assert seen[0].description == "Bucket Updated"
        assert seen[-1].description == "Bucket Created"

        offsets = [int(r.url.params["offset"]) for r in httpx_mock.get_requests()]
        assert offsets == [0, 5, 10, 15, 20]

    @pytest.mark.asyncio
    async def test_ordering(self, httpx_mock):
        _add_logs_endpoint(httpx_mock, _log_entries(20))

        async with _client() as client:
            ascending = await client.buckets.find_logs(BUCKET_ID, FindOptions(descending=False))
            descending = await client.buckets.find_logs(BUCKET_ID)

        assert len(ascending.items) == 20
        assert ascending.items[0].description == "Bucket Created"
        assert ascending.items[19].description == "Bucket Updated"
        assert ascending.items[0].time < ascending.items[19].time

        assert descending.items[0].time == ascending.items[19].time
        assert descending.items[19].description == "Bucket Created"
        assert descending.next_page() is None

        requests = httpx_mock.get_requests()
        assert requests[0].url.params["descending"] == "false"
        assert requests[1].url.params["descending"] == "true"
        assert "limit" not in requests[1].url.params

    @pytest.mark.asyncio
    async def test_repeated_call_is_idempotent(self, httpx_mock):
        _add_logs_endpoint(httpx_mock, _log_entries(20))
        options = FindOptions(limit=7, offset=3)

        async with _client() as client:
            first = await client.buckets.find_logs(BUCKET_ID, options)
            second = await client.buckets.find_logs(BUCKET_ID, options)

        assert first.items == second.items
        assert first.next_page() == second.next_page()
        assert options == FindOptions(limit=7, offset=3)

    @pytest.mark.asyncio
    async def test_nonexistent_bucket_has_empty_log(self, httpx_mock):
        httpx_mock.add_response(
            method="GET",
            url=re.compile(rf"{BASE_URL}/api/v2/buckets/{MISSING_ID}/logs.*"),
            json={"code": "not found", "message": "bucket not found"},
            status_code=404,
            is_reusable=True,
        )

        async with _client() as client:
            with_options = await client.buckets.find_logs(MISSING_ID, FindOptions(limit=5))
            without_options = await client.buckets.find_logs(MISSING_ID)

        assert with_options.items == []
        assert with_options.next_page() is None
        assert without_options.items == []
        assert without_options.next_page() is None

    @pytest.mark.asyncio
    async def test_organization_logs_use_org_path(self, httpx_mock):
        httpx_mock.add_response(
            method="GET",
            url=f"{BASE_URL}/api/v2/orgs/org_123/logs?limit=2&offset=0&descending=true",
            json={"logs": _log_entries(2)},
        )

        async with _client() as client:
            page = await client.organizations.find_logs("org_123", FindOptions(limit=2))

        assert len(page.items) == 2
        assert page.next_page() == FindOptions(limit=2, offset=2)


class TestFindBucketsPaging:
    @pytest.mark.asyncio
    @pytest.mark.parametrize(("total", "page_size"), [(20, 5), (23, 5), (4, 5), (0, 3)])
    async def test_pages_cover_collection(self, httpx_mock, total, page_size):
        records = _bucket_payloads(total)
        httpx_mock.add_callback(
            _collection_callback("buckets", records),
            method="GET",
            url=re.compile(rf"{BASE_URL}/api/v2/buckets.*"),
            is_reusable=True,
        )

        pages = []
        async with _client() as client:
            options = FindOptions(limit=page_size, descending=False)
            while options is not None:
                page = await client.buckets.find_buckets(options)
                pages.append(page)
                options = page.next_page()

        non_empty = [p for p in pages if p.items]
        assert len(non_empty) == math.ceil(total / page_size)
        assert [b.id for p in pages for b in p.items] == [r["id"] for r in records]
        assert pages[-1].next_page() is None
        if total % page_size == 0:
            # exactly-full last page costs one extra round trip
            assert pages[-1].items == []

    @pytest.mark.asyncio
    async def test_iter_buckets(self, httpx_mock):
        records = _bucket_payloads(12)
        httpx_mock.add_callback(
            _collection_callback("buckets", records),
            method="GET",
            url=re.compile(rf"{BASE_URL}/api/v2/buckets.*"),
            is_reusable=True,
        )

        async with _client() as client:
            pages = [page async for page in client.buckets.iter_buckets(FindOptions(limit=5))]

        assert [len(p.items) for p in pages] == [5, 5, 2]
        assert pages[0].items[0].id == "bucket0011"
        assert pages[0].links["self"].startswith("/api/v2/buckets")
