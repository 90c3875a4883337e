from datetime import datetime

from oddscout import bmbets_search
from oddscout.bmbets_search import Hit, find_match, hits
from oddscout.webdriver import ENTER


def _row(day, clock, link):
    return (
        f'<tr><td class="date-col"><div>{day}</div><div>{clock}</div></td>'
        f"<td>{link}</td></tr>"
    )


ARSENAL = '<a href="/football/arsenal-chelsea"><span class="hit">Arsenal</span> - Chelsea</a>'


def test_hit_is_read_from_row():
    html = "<table>" + _row("Mar-05", "20:45", ARSENAL) + "</table>"
    assert hits(html, 2024) == [
        Hit(("Arsenal", "Chelsea"), datetime(2024, 3, 5, 20, 45), "/football/arsenal-chelsea")
    ]


def test_rows_without_enough_date_parts_are_skipped():
    html = (
        '<table><tr><td class="date-col"><div>Mar-05</div></td>'
        f"<td>{ARSENAL}</td></tr></table>"
    )
    assert hits(html, 2024) == []


def test_link_without_two_players_is_skipped():
    link = '<a href="/x"><span class="hit">Arsenal</span></a>'
    html = "<table>" + _row("Mar-05", "20:45", link) + "</table>"
    assert hits(html, 2024) == []


def test_link_without_href_is_skipped():
    link = '<a><span class="hit">A</span> - B</a>'
    html = "<table>" + _row("Mar-05", "20:45", link) + "</table>"
    assert hits(html, 2024) == []


def test_invalid_date_is_skipped():
    html = (
        "<table>"
        + _row("Feb-29", "10:00", ARSENAL)
        + _row("Mar-05", "25:00", ARSENAL)
        + "</table>"
    )
    assert hits(html, 2023) == []


def test_multiple_hits_keep_order():
    other = '<a href="/b"><span class="hit">Lech</span> - Legia</a>'
    html = "<table>" + _row("Mar-05", "20:45", ARSENAL) + _row("Apr-01", "18:00", other) + "</table>"
    found = hits(html, 2024)
    assert [hit.relative_url for hit in found] == ["/football/arsenal-chelsea", "/b"]
    assert found[1].players == ("Lech", "Legia")


def test_default_year_is_current():
    html = "<table>" + _row("Mar-05", "20:45", ARSENAL) + "</table>"
    assert hits(html)[0].date.year == datetime.now().year


class FakeSearch:
    def __init__(self):
        self.keys = []

    def send_keys(self, text):
        self.keys.append(text)


class FakeClient:
    def __init__(self):
        self.visited = []
        self.search = FakeSearch()
        self.selectors = []

    def goto(self, url):
        self.visited.append(url)

    def find(self, selector, using="css selector"):
        self.selectors.append(selector)
        return self.search

    def source(self):
        return "<html>results</html>"


def test_find_match_searches_and_returns_source():
    client = FakeClient()
    assert find_match(client, "Arsenal Chelsea", 0) == "<html>results</html>"
    assert client.visited == [bmbets_search.URL]
    assert client.search.keys == ["Arsenal Chelsea", ENTER]
    assert client.selectors == ['[id="search"]']