"""A small synchronous W3C WebDriver client."""

from __future__ import annotations

import time
from typing import Any

import requests

CSS = "css selector"
XPATH = "xpath"

ENTER = "\ue007"
TAB = "\ue004"
ESC = "\ue00c"

ELEMENT_KEY = "element-6066-11e4-a52f-4f50ae0e55f4"
NO_SUCH_ELEMENT = "no such element"
TIMEOUT = "timeout"

WAIT_TIMEOUT = 30.0
POLL_INTERVAL = 0.25
COOKIE_TIMEOUT = 2.0


class WebDriverError(Exception):
    """An error reported by the WebDriver server or while waiting on it."""

    def __init__(self, error: str, message: str = "") -> None:
        super().__init__(f"{error}: {message}" if message else error)
        self.error = error
        self.message = message


def localhost(port: int) -> str:
    """Address of a WebDriver server on this machine."""
    return f"http://localhost:{port}"


class Element:
    """A reference to an element in the browser's current page."""

    def __init__(self, client: Client, element_id: str) -> None:
        self.client = client
        self.element_id = element_id

    def __repr__(self) -> str:
        return f"Element({self.element_id!r})"

    def _path(self, suffix: str) -> str:
        return f"/element/{self.element_id}{suffix}"

    def click(self) -> None:
        self.client._command("POST", self._path("/click"), {})

    def send_keys(self, text: str) -> None:
        self.client._command("POST", self._path("/value"), {"text": text})

    def attr(self, name: str) -> str | None:
        return self.client._command("GET", self._path(f"/attribute/{name}"))

    def text(self) -> str:
        return self.client._command("GET", self._path("/text"))

    def html(self, inner: bool = False) -> str:
        prop = "innerHTML" if inner else "outerHTML"
        return self.client._command("GET", self._path(f"/property/{prop}"))

    def is_displayed(self) -> bool:
        return bool(self.client._command("GET", self._path("/displayed")))

    def find(self, selector: str, using: str = CSS) -> Element:
        value = self.client._command(
            "POST", self._path("/element"), {"using": using, "value": selector}
        )
        return self.client._element(value)

    def find_all(self, selector: str, using: str = CSS) -> list[Element]:
        values = self.client._command(
            "POST", self._path("/elements"), {"using": using, "value": selector}
        )
        return [self.client._element(value) for value in values]


class Client:
    """A browser session on a WebDriver server."""

    def __init__(self, url: str, capabilities: dict[str, Any] | None = None) -> None:
        self._base = url.rstrip("/")
        self._http = requests.Session()
        payload = {"capabilities": {"alwaysMatch": dict(capabilities or {})}}
        value = self._send("POST", "/session", payload)
        self.session_id: str = value["sessionId"]

    def _send(self, method: str, path: str, payload: Any = None) -> Any:
        response = self._http.request(method, self._base + path, json=payload)
        try:
            body = response.json()
        except ValueError:
            raise WebDriverError("unknown error", response.text) from None
        value = body.get("value") if isinstance(body, dict) else None
        if isinstance(value, dict) and "error" in value:
            raise WebDriverError(value["error"], value.get("message", ""))
        if not response.ok:
            raise WebDriverError("unknown error", f"HTTP {response.status_code}")
        return value

    def _command(self, method: str, path: str, payload: Any = None) -> Any:
        return self._send(method, f"/session/{self.session_id}{path}", payload)

    def _element(self, value: Any) -> Element:
        if not isinstance(value, dict) or ELEMENT_KEY not in value:
            raise WebDriverError("unknown error", f"not an element: {value!r}")
        return Element(self, value[ELEMENT_KEY])

    def goto(self, url: str) -> None:
        self._command("POST", "/url", {"url": url})

    def source(self) -> str:
        return self._command("GET", "/source")

    def find(self, selector: str, using: str = CSS) -> Element:
        value = self._command("POST", "/element", {"using": using, "value": selector})
        return self._element(value)

    def find_all(self, selector: str, using: str = CSS) -> list[Element]:
        values = self._command(
            "POST", "/elements", {"using": using, "value": selector}
        )
        return [self._element(value) for value in values]

    def wait_for(self, selector: str, timeout: float = WAIT_TIMEOUT) -> Element:
        """Poll until the CSS-selected element exists; raise a timeout error otherwise."""
        deadline = time.monotonic() + timeout
        while True:
            try:
                return self.find(selector)
            except WebDriverError as error:
                if error.error != NO_SUCH_ELEMENT:
                    raise
            remaining = deadline - time.monotonic()
            if remaining <= 0:
                raise WebDriverError(TIMEOUT, f"waiting for {selector}")
            time.sleep(min(POLL_INTERVAL, remaining))

    def execute(self, script: str, args: list[Any] | None = None) -> Any:
        return self._command(
            "POST", "/execute/sync", {"script": script, "args": list(args or [])}
        )

    def close(self) -> None:
        self._command("DELETE", "")
        self._http.close()

    def __enter__(self) -> Client:
        return self

    def __exit__(self, *args: Any) -> None:
        self.close()


def try_accepting_cookie(client: Client, selector: str) -> bool:
    """Click the cookie consent button if it shows up shortly; report whether it did."""
    try:
        button = client.wait_for(selector, COOKIE_TIMEOUT)
    except WebDriverError as error:
        if error.error == TIMEOUT:
            return False
        raise
    button.click()
    return True