from dataclasses import dataclass
from typing import List

WINDOW_RADIUS = 2


@dataclass(frozen=True)
class PaginationState:
    current_page: int = 1
    total_pages: int = 1


@dataclass(frozen=True)
class PageButton:
    label: str
    page: int
    active: bool = False


def page_window(current_page: int, total_pages: int, radius: int = WINDOW_RADIUS) -> range:
    """Page numbers shown around the current page, inclusive on both ends."""
    return range(max(1, current_page - radius), min(total_pages, current_page + radius) + 1)


def pagination_buttons(state: PaginationState) -> List[PageButton]:
    current = state.current_page
    total = state.total_pages

    buttons: List[PageButton] = []

    if current > 1:
        buttons.append(PageButton("« First", 1))
        buttons.append(PageButton("‹ Previous", current - 1))

    for number in page_window(current, total):
        buttons.append(PageButton(str(number), number, active=number == current))

    if current < total:
        buttons.append(PageButton("Next ›", current + 1))
        buttons.append(PageButton("Last »", total))

    return buttons
