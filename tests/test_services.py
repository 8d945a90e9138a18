"""
Integration Tests for Services and Providers
"""

import asyncio

import httpx
import pytest
from unittest.mock import AsyncMock, MagicMock, patch

from github_search.providers import GitHubProvider, get_provider
from github_search.schemas import SearchResult, SearchState
from github_search.services import CacheService, SearchService, SearchSession
from github_search.tools import search_session

from conftest import FakeProvider, result_for


def github_settings(token=None):
    settings = MagicMock()
    settings.github.api_url = "https://api.github.com/"
    settings.github.token = token
    settings.github.timeout_ms = 10000
    settings.github.per_page = 30
    return settings


def cache_settings(enabled=True):
    settings = MagicMock()
    settings.cache.enabled = enabled
    settings.cache.ttl_seconds = 300
    settings.cache.max_entries = 100
    return settings


class TestGitHubProvider:
    """Tests for GitHubProvider."""

    @pytest.mark.asyncio
    async def test_search_parses_items(self):
        """Repository items become a populated SearchResult."""
        seen = {}

        def handler(request: httpx.Request) -> httpx.Response:
            seen["host"] = request.url.host
            seen["path"] = request.url.path
            seen["q"] = request.url.params["q"]
            seen["auth"] = request.headers.get("Authorization")
            return httpx.Response(200, json={
                "total_count": 1,
                "items": [{
                    "full_name": "ReactiveX/rxdart",
                    "html_url": "https://github.com/ReactiveX/rxdart",
                    "owner": {"avatar_url": "https://avatars.githubusercontent.com/u/1"},
                }],
            })

        provider = GitHubProvider(
            github_settings(token="secret"), transport=httpx.MockTransport(handler)
        )

        result = await provider.search("rxdart")

        assert result.is_populated
        assert result.items[0].full_name == "ReactiveX/rxdart"
        assert seen["host"] == "api.github.com"
        assert seen["path"] == "/search/repositories"
        assert seen["q"] == "rxdart"
        assert seen["auth"] == "Bearer secret"

    @pytest.mark.asyncio
    async def test_search_no_items_is_empty(self):
        transport = httpx.MockTransport(
            lambda request: httpx.Response(200, json={"total_count": 0, "items": []})
        )
        provider = GitHubProvider(github_settings(), transport=transport)

        result = await provider.search("zzzzzz")

        assert result.is_empty

    @pytest.mark.asyncio
    async def test_search_http_error_raises(self):
        """Non-2xx responses raise so the pipeline can flag the error."""
        transport = httpx.MockTransport(
            lambda request: httpx.Response(403, json={"message": "rate limited"})
        )
        provider = GitHubProvider(github_settings(), transport=transport)

        with pytest.raises(httpx.HTTPStatusError):
            await provider.search("rxdart")

    def test_get_provider_unknown(self):
        settings = MagicMock()
        settings.pipeline.provider = "gitlab"

        with pytest.raises(ValueError):
            get_provider(settings)


class TestCacheService:
    """Tests for CacheService."""

    def test_cache_set_get(self):
        """Test basic cache operations."""
        with patch("github_search.services.cache_service.get_settings") as mock_settings:
            mock_settings.return_value = cache_settings()

            cache = CacheService()
            cache.set("search:rx", {"value": 123})
            result = cache.get("search:rx")

            assert result == {"value": 123}
            assert cache.get_stats()["size"] == 1

    def test_cache_disabled(self):
        """Test cache when disabled."""
        with patch("github_search.services.cache_service.get_settings") as mock_settings:
            mock_settings.return_value = cache_settings(enabled=False)

            cache = CacheService()
            cache.set("search:rx", {"value": 123})
            result = cache.get("search:rx")

            assert result is None

    def test_delete_and_clear(self):
        cache = CacheService(cache_settings())
        cache.set("search:a", 1)
        cache.set("search:b", 2)

        cache.delete("search:a")
        cache.delete("search:missing")
        assert cache.get("search:a") is None

        cache.clear_all()
        assert cache.get_stats()["size"] == 0


class TestSearchService:
    """Tests for SearchService."""

    @pytest.mark.asyncio
    async def test_empty_term_skips_provider(self):
        provider = MagicMock()
        provider.search = AsyncMock()
        service = SearchService(provider, CacheService(cache_settings()), settings=MagicMock())

        result = await service.search("")

        assert result.is_no_term
        provider.search.assert_not_called()

    @pytest.mark.asyncio
    async def test_result_is_cached(self):
        provider = MagicMock()
        provider.search = AsyncMock(return_value=result_for("rx"))
        service = SearchService(provider, CacheService(cache_settings()), settings=MagicMock())

        first = await service.search("rx")
        second = await service.search("rx")

        assert first == second == result_for("rx")
        provider.search.assert_awaited_once_with("rx")

    @pytest.mark.asyncio
    async def test_failure_is_not_cached(self):
        provider = MagicMock()
        provider.search = AsyncMock(side_effect=[RuntimeError("down"), result_for("rx")])
        service = SearchService(provider, CacheService(cache_settings()), settings=MagicMock())

        with pytest.raises(RuntimeError):
            await service.search("rx")
        result = await service.search("rx")

        assert result == result_for("rx")
        assert provider.search.await_count == 2


class TestSearchSession:
    """Tests for SearchSession."""

    @pytest.mark.asyncio
    async def test_state_before_start_is_initial(self):
        session = SearchSession(FakeProvider(), settings=MagicMock(), debounce_ms=20)

        assert session.state == SearchState.initial()
        assert not session.is_running

    @pytest.mark.asyncio
    async def test_typed_text_settles_to_result(self):
        session = SearchSession(FakeProvider(), settings=MagicMock(), debounce_ms=20)
        session.start()

        session.on_text_changed("py")
        state = await session.settled(1.0)
        await session.close()

        assert state == SearchState.from_result(result_for("py"))
        assert session.state == state

    @pytest.mark.asyncio
    async def test_settled_times_out_with_current_state(self):
        session = SearchSession(FakeProvider(), settings=MagicMock(), debounce_ms=20)
        session.start()

        state = await session.settled(0.05)
        await session.close()

        assert state == SearchState.initial()

    @pytest.mark.asyncio
    async def test_subscriber_sees_current_then_live(self):
        session = SearchSession(FakeProvider(), settings=MagicMock(), debounce_ms=20)
        session.start()
        received = []

        async def listen():
            async for snapshot in session.subscribe():
                received.append(snapshot)

        listener = asyncio.create_task(listen())
        await asyncio.sleep(0)
        session.on_text_changed("py")
        await asyncio.sleep(0.2)
        await session.close()
        await asyncio.wait_for(listener, 1.0)

        assert received == [
            SearchState.initial(),
            SearchState.loading(),
            SearchState.from_result(result_for("py")),
        ]

    @pytest.mark.asyncio
    async def test_settled_waits_for_the_new_search(self):
        """A search still loading from earlier text is not taken as the answer."""
        session = SearchSession(
            FakeProvider(delays={"a": 0.1}), settings=MagicMock(), debounce_ms=250
        )
        session.start()

        session.on_text_changed("a")
        first = await session.settled(0.3)
        session.on_text_changed("ab")
        second = await session.settled(2.0)
        await session.close()

        assert first == SearchState.loading()
        assert second == SearchState.from_result(result_for("ab"))

    @pytest.mark.asyncio
    async def test_close_unstarted_session_ends_subscribers(self):
        session = SearchSession(FakeProvider(), settings=MagicMock(), debounce_ms=20)
        received = []

        async def listen():
            async for snapshot in session.subscribe():
                received.append(snapshot)

        listener = asyncio.create_task(listen())
        await asyncio.sleep(0)
        await session.close()
        await asyncio.wait_for(listener, 0.5)
        late = [snapshot async for snapshot in session.subscribe()]

        assert received == [SearchState.initial()]
        assert late == [SearchState.initial()]

    @pytest.mark.asyncio
    async def test_text_after_close_rejected(self):
        session = SearchSession(FakeProvider(), settings=MagicMock(), debounce_ms=20)
        session.start()
        await session.close()

        with pytest.raises(RuntimeError):
            session.on_text_changed("late")

    @pytest.mark.asyncio
    async def test_provider_failure_surfaces_as_error_state(self):
        session = SearchSession(
            SearchService(
                FakeProvider(failures={"bad"}),
                CacheService(cache_settings()),
                settings=MagicMock(),
            ),
            settings=MagicMock(),
            debounce_ms=20,
        )
        session.start()

        session.on_text_changed("bad")
        state = await session.settled(1.0)
        session.on_text_changed("")
        cleared = await session.settled(1.0)
        await session.close()

        assert state == SearchState.error()
        assert cleared == SearchState.from_result(SearchResult.no_term())


class TestSearchSessionTools:
    """Tests for the search session MCP tools."""

    @pytest.mark.asyncio
    async def test_type_then_read_state(self):
        session = SearchSession(FakeProvider(), settings=MagicMock(), debounce_ms=20)
        session.start()

        with patch("github_search.tools.search_session._session", session):
            typed = await search_session.type_search_text.fn("py", wait_ms=1000)
            current = await search_session.get_search_state.fn()
        await session.close()

        assert typed == SearchState.from_result(result_for("py")).model_dump(mode="json")
        assert current == typed
        assert typed["result"]["items"][0]["full_name"] == "octo/py"

    @pytest.mark.asyncio
    async def test_state_before_typing_is_initial(self):
        session = SearchSession(FakeProvider(), settings=MagicMock(), debounce_ms=20)

        with patch("github_search.tools.search_session._session", session):
            current = await search_session.get_search_state.fn()

        assert current == SearchState.initial().model_dump(mode="json")
        assert current["result"]["kind"] == "no_term"
