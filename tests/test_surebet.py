from oddscout.surebet import ValuePage


class FakeClient:
    def __init__(self, html):
        self.html = html
        self.visited = []

    def goto(self, url):
        self.visited.append(url)

    def source(self):
        return self.html


def test_url():
    assert ValuePage().url() == "https://en.surebet.com/valuebets"


def test_download_visits_page_and_returns_source():
    client = FakeClient("<html><body>bets</body></html>")
    assert ValuePage().download(client) == "<html><body>bets</body></html>"
    assert client.visited == [ValuePage().url()]