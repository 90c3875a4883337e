"""Navigation of the odds comparison page's menus and odds tables."""

from __future__ import annotations

import time
from typing import Any

from .webdriver import NO_SUCH_ELEMENT, XPATH, WebDriverError

TAB = ".list"
TOOLBAR = ".ui-toolbar"
DROPDOWN = "#elmTabUl"
ODDS_CONTENT = "#oddsContent"
ODDS_DELAY = 2.0


def dropdown(client: Any) -> None:
    """Expand the market tab dropdown unless it is already expanded."""
    element = client.wait_for(DROPDOWN)
    if element.attr("expanded") != "true":
        element.click()


def tab(client: Any) -> Any:
    """The element holding the market tabs."""
    return client.wait_for(TAB)


def toolbar(client: Any) -> Any:
    """The first visible toolbar section; raise if none is shown."""
    bar = client.wait_for(TOOLBAR)
    for div in bar.find_all("div"):
        if div.is_displayed():
            return div
    raise WebDriverError(NO_SUCH_ELEMENT, "toolbar div")


def links(element: Any) -> list[tuple[str, Any]]:
    """Every link below ``element`` with its inner HTML ("" if unreadable)."""
    found = []
    for link in element.find_all("a"):
        try:
            name = link.html(True)
        except WebDriverError:
            name = ""
        found.append((name, link))
    return found


def odds_content(client: Any) -> Any:
    """The element holding all odds tables."""
    return client.find(ODDS_CONTENT)


def odds_divs(content: Any, delay: float = ODDS_DELAY) -> list[tuple[str, Any]]:
    """Caption divs of the odds tables with their caption text.

    Waits ``delay`` seconds first for the tables to load; captions that
    cannot be read are left out.
    """
    time.sleep(delay)
    found = []
    for div in content.find_all("div.caption"):
        try:
            name = div.find("span.caption-txt").text()
        except WebDriverError:
            continue
        found.append((name, div))
    return found


def _row_odds(row: Any) -> list[float]:
    odds = []
    for cell in row.find_all(".odd-v"):
        try:
            text = cell.text()
        except WebDriverError:
            continue
        if not text:
            continue
        try:
            odds.append(float(text))
        except ValueError:
            continue
    return odds


def odds_table(div: Any) -> list[tuple[str, list[float]]]:
    """The bookmakers and their odds from the table under a caption div.

    The table is opened by clicking its caption when hidden. Rows that
    cannot be read are left out.
    """
    parent = div.find("..", XPATH)
    bmdiv = parent.find(".bmdiv")
    container = bmdiv.find("..", XPATH)
    if not container.is_displayed():
        div.click()
    book_rows = bmdiv.find("tbody").find_all("tr")
    odd_rows = container.find(".odddiv").find("tbody").find_all("tr")
    table = []
    for book_row, odd_row in zip(book_rows, odd_rows):
        try:
            book = book_row.find("td span.hidden-480").text()
            odds = _row_odds(odd_row)
        except WebDriverError:
            continue
        table.append((book, odds))
    return table