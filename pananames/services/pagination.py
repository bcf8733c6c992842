"""
Page-walking helper for listing endpoints
"""

from typing import Any, Callable, Iterator, List, Tuple, TypeVar

from pananames.schemas.common import NO_PAGE, ListOptions, Pagination

T = TypeVar("T")
O = TypeVar("O", bound=ListOptions)


def iter_pages(
    fetch: Callable[[O], Tuple[List[T], Pagination]],
    options: O,
    *request_options: Any
) -> Iterator[T]:
    """
    Yield every item of a paged listing, one page request at a time.

    Args:
        fetch: Listing method, e.g. DomainService.get_domains
        options: Listing options; page is advanced in place, starting at 1 when unset
        request_options: Passed through to every fetch call

    Example:
        for domain in iter_pages(domains.get_domains, GetDomainsOptions(limit=30)):
            print(domain.domain, domain.status)
    """
    if options.page < 1:
        options.page = 1

    while True:
        items, pagination = fetch(options, *request_options)
        yield from items or []

        options.page = pagination.next_page()
        if options.page == NO_PAGE:
            return
