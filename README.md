# oddscout

Tools for collecting bookmaker odds through a browser driven over the
WebDriver protocol, turning Polish football market names into structured
events, comparing single offers with the averaged prices of many bookmakers,
and broadcasting lines of text to WebSocket clients.

## Installation

```
pip install .
```

For the test suite:

```
pip install ".[test]"
pytest
```

## Requirements at run time

The browsing commands talk to a WebDriver server (for example geckodriver)
listening on `localhost:4444` unless `--port` says otherwise. Start it
yourself before running them; the package never launches it.

## Commands

### `oddscout-bmbets`

Options: `--source` (default `maybe_safe`), `--target` (default `safe`),
`--port` (default `4444`).

Reads every file in the source directory as a saved match, keeps only the
"total goals" markets it recognises, and prints `no matches` if none are
left. For each remaining match it shows the date and the two sides and asks:

- `search:` type a search phrase, or `skip` to move on to the next match;
- `choose:` pick a listed hit by its number, or `-` to search again.
  Anything else that is not a number prints `no hits` and asks for a new
  search; a number past the end of the list asks again.

For the chosen hit it opens the match page, selects the market's tab and
toolbar button, averages each bookmaker's prices for the offer's line, turns
them into implied chances and keeps an offer when its odd times that chance
is above 0.97. A match with at least one kept offer is written to the target
directory under a name derived from its address.

### `oddscout-sts`

Option: `--port`. Opens the live tennis listing, scrolls until no new leagues
appear, prints the first match link of every league with the league's name,
then the elapsed time.

### `oddscout-surebet`

Option: `--port`. Opens the value-bets page, prints its HTML source and the
elapsed time.

### `oddscout-serve`

Options: `--host` (default `0.0.0.0`), `--port` (default `8080`). Starts a
WebSocket server. Every non-empty line read from standard input is sent to
all connected clients; messages from clients are printed. A client that
falls more than 100 messages behind is disconnected.

## Library use

The parsing pieces work on plain strings and HTML and need no browser:

```python
from oddscout.event import eat_match, match_contents
from oddscout.fortuna_football import translate_match

with open("maybe_safe/example", encoding="utf-8") as fh:
    match = eat_match(fh.read())

football = translate_match(match, lambda event: event)
if football is not None:
    print(match_contents(football))
```

- `oddscout.event` — `Event`, `Match`, the saved text format
  (`eat_match`, `match_contents`), `sanitize`, and `safe_match_filter`,
  which keeps only odds between 3.1 and 3.3.
- `oddscout.football` — `Football` markets built from a `Kind` and its
  arguments (`Part`, `Player`).
- `oddscout.fortuna_football.parse_football` — recognises a market name and
  returns the market with the unconsumed rest; raises `ParseError` otherwise.
- `oddscout.bmbets_football.chances` — converts decimal odds into normalised
  probabilities; `parse_tab`, `parse_toolbar` and `eat_variant` read the
  comparison site's labels.
- `oddscout.probability` — Kullback-Leibler and Jensen-Shannon divergences.
- `oddscout.dates` — the day-month and full date formats used by the pages.

Browser-driven pages share a small synchronous WebDriver client:

```python
from oddscout.webdriver import Client, localhost
from oddscout.fortuna_prematch import FootballPage

with Client(localhost(4444), {}) as client:
    page = FootballPage()
    html = page.download(client)

for subpage, date in page.subpages(html):
    print(subpage.url(), date)
```

`oddscout.downloads.run(client, page)` downloads a page and keeps a copy as
`downloads/<name>.html`.

## What it does not do

- It does not start or manage a WebDriver server or a browser.
- The live overview pages (`oddscout.fortuna_live`, `oddscout.sts_live`) are
  only downloaded and searched for match links; no odds are read from them.
- There is no command for the pre-match football listing; it is available
  only through `oddscout.fortuna_prematch` in your own code.