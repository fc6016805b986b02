"""In-memory query engine over a generation of CRE transactions."""

from cre_mock.query.enrich import enrich_page, enrich_transaction
from cre_mock.query.facade import PageMetadata, QueryService, TransactionPage, TransactionQuery
from cre_mock.query.filters import FilterOptions, filter_transactions
from cre_mock.query.pagination import paginate, parse_pagination
from cre_mock.query.sorting import SortField, SortOrder, sort_transactions

__all__ = [
    "FilterOptions",
    "PageMetadata",
    "QueryService",
    "SortField",
    "SortOrder",
    "TransactionPage",
    "TransactionQuery",
    "enrich_page",
    "enrich_transaction",
    "filter_transactions",
    "paginate",
    "parse_pagination",
    "sort_transactions",
]
