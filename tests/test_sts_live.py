from oddscout.sts_live import LivePage, Subpage, TennisPage

HTML = """
<html><body>
<bb-live-league>
  <div class="match-tile-region-info__text"> ATP <span>Madrid</span> </div>
  <bb-live-match-tile><a href="/live/tenis/1">A - B</a></bb-live-match-tile>
  <bb-live-match-tile><a href="/live/tenis/2">C - D</a></bb-live-match-tile>
</bb-live-league>
<bb-live-league>
  <div class="match-tile-region-info__text">WTA Rome</div>
  <bb-live-match-tile><a>no link</a></bb-live-match-tile>
</bb-live-league>
<bb-live-league>
  <bb-live-match-tile><a href="/live/tenis/3">E - F</a></bb-live-match-tile>
</bb-live-league>
<bb-live-league>
  <div class="match-tile-region-info__text">Challenger</div>
  <bb-live-match-tile><a href="/live/tenis/4">G - H</a></bb-live-match-tile>
</bb-live-league>
</body></html>
"""


def test_live_page_name_and_url():
    assert LivePage().name() == "sts.live"
    assert LivePage().url() == "https://www.sts.pl/live"


def test_tennis_page_name_and_url():
    page = TennisPage()
    assert page.name() == "sts.live.tennis"
    assert page.url() == LivePage().url() + "/tenis"


def test_subpages_take_first_link_and_tournament():
    found = TennisPage().subpages(HTML)
    assert found == [
        Subpage("/live/tenis/1", "ATP Madrid"),
        Subpage("/live/tenis/4", "Challenger"),
    ]


def test_subpages_of_empty_page():
    assert TennisPage().subpages("<html></html>") == []