"""Helpers for reading complete result sets through Protean DAOs."""

PAGE_SIZE = 500


def fetch_all(query, page_size: int = PAGE_SIZE) -> list:
    """Return every record matched by a DAO query.

    Protean querysets apply a default page limit, so whole-table reads
    (catalogue closure, customer history) walk the pages explicitly.
    """
    records = []
    offset = 0
    while True:
        items = query.offset(offset).limit(page_size).all().items
        records.extend(items)
        if len(items) < page_size:
            return records
        offset += page_size
