from storefront.frontend.pagination import PaginationState, page_window, pagination_buttons
from storefront.utils.validators import clamp, to_int


def _labels(state):
    return [button.label for button in pagination_buttons(state)]


def test_window_in_the_middle():
    state = PaginationState(current_page=5, total_pages=10)

    assert list(page_window(5, 10)) == [3, 4, 5, 6, 7]
    assert _labels(state) == ["« First", "‹ Previous", "3", "4", "5", "6", "7", "Next ›", "Last »"]


def test_first_page_has_no_back_controls():
    labels = _labels(PaginationState(current_page=1, total_pages=2))

    assert labels == ["1", "2", "Next ›", "Last »"]


def test_last_page_has_no_forward_controls():
    labels = _labels(PaginationState(current_page=4, total_pages=4))

    assert labels == ["« First", "‹ Previous", "2", "3", "4"]


def test_single_page_shows_only_itself():
    buttons = pagination_buttons(PaginationState(current_page=1, total_pages=1))

    assert [(b.label, b.page, b.active) for b in buttons] == [("1", 1, True)]


def test_only_current_page_is_active():
    buttons = pagination_buttons(PaginationState(current_page=3, total_pages=6))

    assert [b.page for b in buttons if b.active] == [3]
    assert [b.page for b in buttons if b.label == "Last »"] == [6]
    assert [b.page for b in buttons if b.label == "‹ Previous"] == [2]


def test_to_int_is_lenient():
    assert to_int(None, 12) == 12
    assert to_int("", 12) == 12
    assert to_int(" 7 ") == 7
    assert to_int("3.9") == 3
    assert to_int("abc", 12) == 0
    assert to_int("inf") == 0


def test_clamp():
    assert clamp(0, 1) == 1
    assert clamp(500, 1, 100) == 100
    assert clamp(50, 1, 100) == 50
