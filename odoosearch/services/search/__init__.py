"""Incremental search control loop."""

from odoosearch.services.search.controller import IncrementalSearchController, SearchState

__all__ = ["IncrementalSearchController", "SearchState"]
