"""File server hit counter.

Counts every request served from the static file root. The counter lives
for the process lifetime and is owned by the web server instance that
creates it.
"""

from __future__ import annotations

from threading import Lock

from starlette.types import ASGIApp, Receive, Scope, Send

COUNTED_METHODS = frozenset({"GET", "HEAD"})

ADMIN_METRICS_TEMPLATE = """<html>
  <body>
    <h1>Welcome, Chirpy Admin</h1>
    <p>Chirpy has been visited {hits} times!</p>
  </body>
</html>"""


class HitCounter:
    """Thread-safe non-negative integer counter."""

    def __init__(self) -> None:
        self._value = 0
        self._lock = Lock()

    def increment(self) -> None:
        with self._lock:
            self._value += 1

    def read(self) -> int:
        with self._lock:
            return self._value

    def reset(self) -> None:
        with self._lock:
            self._value = 0


def render_plain_metrics(hits: int) -> str:
    """Plain-text metrics line, e.g. ``Hits: 3``."""
    return f"Hits: {hits}"


def render_admin_metrics(hits: int) -> str:
    """HTML page for the admin metrics view."""
    return ADMIN_METRICS_TEMPLATE.format(hits=hits)


class HitCounterMiddleware:
    """ASGI middleware counting one hit per GET or HEAD request to the wrapped app.

    Other methods pass through uncounted; the wrapped app answers them with 405.
    """

    def __init__(self, app: ASGIApp, counter: HitCounter) -> None:
        self.app = app
        self.counter = counter

    async def __call__(self, scope: Scope, receive: Receive, send: Send) -> None:
        if scope["type"] == "http" and scope.get("method") in COUNTED_METHODS:
            self.counter.increment()
        await self.app(scope, receive, send)
