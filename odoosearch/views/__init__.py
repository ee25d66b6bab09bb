"""Browsable record types."""

from odoosearch.views.registry import HELPDESK, PROJECTS, EmptyView, RecordView, get_view, list_views

__all__ = ["EmptyView", "HELPDESK", "PROJECTS", "RecordView", "get_view", "list_views"]
