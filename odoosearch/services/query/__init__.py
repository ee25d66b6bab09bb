"""Record queries built on the generic invoker."""

from odoosearch.services.query.domain import DEFAULT_LIST_LIMIT, SearchQuery, match_all, name_domain
from odoosearch.services.query.query_service import QueryService, normalize_records

__all__ = [
    "DEFAULT_LIST_LIMIT",
    "QueryService",
    "SearchQuery",
    "match_all",
    "name_domain",
    "normalize_records",
]
