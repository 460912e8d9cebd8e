from math import ceil

from flask import current_app

SORT_ASC = "asc"
SORT_DESC = "desc"


def paginate(query, params: dict, sort_columns: dict, serialize_items, default_sort="createdAt"):
    """Run ``query`` for one page and wrap it in the paginator payload.

    ``params`` is the output of ``PageQuerySchema``. ``sort_columns`` maps the
    public ``sortBy`` names to model columns; unknown names fall back to
    ``default_sort``. ``serialize_items`` receives the whole page so callers
    can batch per-item lookups.
    """
    column = sort_columns.get(params["sortBy"], sort_columns[default_sort])
    order = column.asc() if params["sortDirection"] == SORT_ASC else column.desc()

    page = params["pageNumber"]
    page_size = min(params["pageSize"], current_app.config["MAX_PAGE_SIZE"])

    total = query.count()
    items = (
        query.order_by(order)
        .offset((page - 1) * page_size)
        .limit(page_size)
        .all()
    )

    return {
        "pagesCount": ceil(total / page_size),
        "page": page,
        "pageSize": page_size,
        "totalCount": total,
        "items": serialize_items(items),
    }
