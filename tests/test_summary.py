from __future__ import annotations

import pytest

from tests.conftest import API_HEADERS


@pytest.mark.anyio
async def test_summarize_success(async_client, test_context):
    response = await async_client.post(
        "/api/summarize", json={"text": "  Mitochondria are the powerhouse of the cell.  "}, headers=API_HEADERS
    )
    assert response.status_code == 200
    assert response.json() == {"summary": "Summary: stub"}
    assert test_context.llm.summarize_calls == ["Mitochondria are the powerhouse of the cell."]


@pytest.mark.anyio
async def test_summarize_truncates_long_text(async_client, test_context):
    test_context.settings.summary.max_text_length = 10
    response = await async_client.post("/api/summarize", json={"text": "x" * 50}, headers=API_HEADERS)
    assert response.status_code == 200
    assert test_context.llm.summarize_calls == ["x" * 10]


@pytest.mark.anyio
async def test_summarize_requires_text(async_client, test_context):
    response = await async_client.post("/api/summarize", json={"text": ""}, headers=API_HEADERS)
    assert response.status_code == 400
    assert test_context.llm.summarize_calls == []


@pytest.mark.anyio
async def test_summarize_requires_api_key(async_client, test_context):
    response = await async_client.post("/api/summarize", json={"text": "hello"})
    assert response.status_code == 401
    assert test_context.llm_factory.keys == []


@pytest.mark.anyio
async def test_summarize_llm_failure(async_client, test_context):
    test_context.fail_llm()
    response = await async_client.post("/api/summarize", json={"text": "hello"}, headers=API_HEADERS)
    assert response.status_code == 500
    assert response.json() == {"error": test_context.settings.summary.error_message}


@pytest.mark.anyio
async def test_summarize_closes_llm_client(async_client, test_context):
    response = await async_client.post("/api/summarize", json={"text": "hello"}, headers=API_HEADERS)
    assert response.status_code == 200
    assert test_context.llm.close_count == 1
