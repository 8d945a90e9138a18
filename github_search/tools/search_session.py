"""
MCP Tool - search session

Drive one shared search session: type text, read the current state.
"""

from typing import Optional

from fastmcp import FastMCP

from github_search.services import SearchService, SearchSession

router = FastMCP("search_session")

_session: Optional[SearchSession] = None


def get_session() -> SearchSession:
    """Return the shared session, starting it on first use."""
    global _session
    if _session is None:
        _session = SearchSession(SearchService())
        _session.start()
    return _session


@router.tool()
async def type_search_text(
    text: str,
    wait_ms: int = 1000,
) -> dict:
    """
    Enter text into the GitHub search box.

    The search runs once typing pauses. Repeating the current text does
    not start a new search.

    Args:
        text: Full contents of the search box
        wait_ms: How long to wait for the search to finish (max 10000)

    Returns:
        Search state with result, is_loading and has_error
    """
    session = get_session()
    session.on_text_changed(text)

    state = await session.settled(min(wait_ms, 10000) / 1000)
    return state.model_dump(mode="json")


@router.tool()
async def get_search_state() -> dict:
    """
    Get the latest state of the GitHub search box.

    Returns:
        Search state with result, is_loading and has_error
    """
    return get_session().state.model_dump(mode="json")
