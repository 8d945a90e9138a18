"""
Pipeline Module - Search Snapshot Pipeline

Raw text events flow through:
Distinct → Debounce → Switch-latest search → SearchState snapshots
"""

from github_search.pipeline.operators import debounce, distinct_until_changed
from github_search.pipeline.switch_latest import SearchSwitch
from github_search.pipeline.snapshot_stream import SearchPipeline, build_snapshot_stream

__all__ = [
    "debounce",
    "distinct_until_changed",
    "SearchSwitch",
    "SearchPipeline",
    "build_snapshot_stream",
]
