"""
GitHub Search Stream

Debounced, cancel-on-supersede repository search exposed as a stream of
immutable SearchState snapshots.
"""
