import pytest

from oddscout import bmbets_menu
from oddscout.webdriver import CSS, NO_SUCH_ELEMENT, XPATH, WebDriverError


class FakeElement:
    def __init__(self, text="", html=None, displayed=True, attrs=None,
                 children=None, broken=False):
        self._text = text
        self._html = text if html is None else html
        self.displayed = displayed
        self.attrs = attrs or {}
        self.children = {
            key: value if isinstance(value, list) else [value]
            for key, value in (children or {}).items()
        }
        self.broken = broken
        self.clicks = 0
        self.lookups = []

    def click(self):
        self.clicks += 1

    def attr(self, name):
        return self.attrs.get(name)

    def text(self):
        if self.broken:
            raise WebDriverError("stale element reference")
        return self._text

    def html(self, inner=False):
        if self.broken:
            raise WebDriverError("stale element reference")
        return self._html

    def is_displayed(self):
        return self.displayed

    def find(self, selector, using=CSS):
        self.lookups.append((selector, using))
        found = self.children.get(selector)
        if not found:
            raise WebDriverError(NO_SUCH_ELEMENT, selector)
        return found[0]

    def find_all(self, selector, using=CSS):
        return list(self.children.get(selector, []))


class FakeClient:
    def __init__(self, elements):
        self.elements = elements

    def wait_for(self, selector, timeout=30.0, using=CSS):
        return self.find(selector, using)

    def find(self, selector, using=CSS):
        if selector not in self.elements:
            raise WebDriverError(NO_SUCH_ELEMENT, selector)
        return self.elements[selector]


def test_dropdown_clicks_when_collapsed():
    element = FakeElement(attrs={"expanded": "false"})
    bmbets_menu.dropdown(FakeClient({"#elmTabUl": element}))
    assert element.clicks == 1


def test_dropdown_leaves_expanded_alone():
    element = FakeElement(attrs={"expanded": "true"})
    bmbets_menu.dropdown(FakeClient({"#elmTabUl": element}))
    assert element.clicks == 0


def test_tab_returns_list_element():
    element = FakeElement()
    assert bmbets_menu.tab(FakeClient({".list": element})) is element


def test_toolbar_returns_first_visible_div():
    hidden = FakeElement(displayed=False)
    shown = FakeElement()
    bar = FakeElement(children={"div": [hidden, shown, FakeElement()]})
    assert bmbets_menu.toolbar(FakeClient({".ui-toolbar": bar})) is shown


def test_toolbar_without_visible_div_raises():
    bar = FakeElement(children={"div": [FakeElement(displayed=False)]})
    with pytest.raises(WebDriverError) as info:
        bmbets_menu.toolbar(FakeClient({".ui-toolbar": bar}))
    assert info.value.error == NO_SUCH_ELEMENT


def test_links_use_inner_html_and_blank_on_failure():
    good = FakeElement(html="1x2")
    bad = FakeElement(broken=True)
    names = bmbets_menu.links(FakeElement(children={"a": [good, bad]}))
    assert names == [("1x2", good), ("", bad)]


def test_odds_content_found_by_id():
    content = FakeElement()
    assert bmbets_menu.odds_content(FakeClient({"#oddsContent": content})) is content


def test_odds_divs_skip_unreadable_captions():
    first = FakeElement(children={"span.caption-txt": FakeElement("Total +2.5")})
    missing = FakeElement()
    broken = FakeElement(children={"span.caption-txt": FakeElement(broken=True)})
    content = FakeElement(children={"div.caption": [first, missing, broken]})
    assert bmbets_menu.odds_divs(content, 0) == [("Total +2.5", first)]


def _table(rows, displayed=True):
    book_rows = [
        FakeElement(children={"td span.hidden-480": FakeElement(book)})
        for book, _ in rows
    ]
    odd_rows = [
        FakeElement(children={".odd-v": [FakeElement(t) for t in texts]})
        for _, texts in rows
    ]
    bmdiv = FakeElement(children={"tbody": FakeElement(children={"tr": book_rows})})
    odddiv = FakeElement(children={"tbody": FakeElement(children={"tr": odd_rows})})
    container = FakeElement(displayed=displayed, children={".odddiv": odddiv})
    bmdiv.children[".."] = [container]
    parent = FakeElement(children={".bmdiv": bmdiv})
    return FakeElement(children={"..": parent})


def test_odds_table_reads_books_and_odds():
    div = _table([("BookA", ["1.5", "", "x", "2.5"]), ("BookB", ["3.0"])])
    assert bmbets_menu.odds_table(div) == [("BookA", [1.5, 2.5]), ("BookB", [3.0])]
    assert div.clicks == 0
    assert ("..", XPATH) in div.lookups


def test_odds_table_opens_hidden_table():
    div = _table([("BookA", ["2.0"])], displayed=False)
    assert bmbets_menu.odds_table(div) == [("BookA", [2.0])]
    assert div.clicks == 1


def test_odds_table_skips_row_without_book_name():
    div = _table([("BookA", ["2.0"])])
    container = div.children[".."][0].children[".bmdiv"][0]
    container.children["tbody"][0].children["tr"].insert(0, FakeElement())
    odd_body = container.children[".."][0].children[".odddiv"][0].children["tbody"][0]
    odd_body.children["tr"].insert(0, FakeElement(children={".odd-v": [FakeElement("9")]}))
    assert bmbets_menu.odds_table(div) == [("BookA", [2.0])]