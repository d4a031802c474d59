"""
================================================================================
Demo Form Server
================================================================================

Serves the bundled contact form through Playwright request routing so the
suite can run without the externally hosted target.

    GET  {base_url}/              -> static/contact_form.html
    POST {base_url}/api/contact   -> JSON acknowledgement, payload recorded

No socket is opened: every request to base_url is fulfilled in-process by
`DemoFormServer.handle`.

Author: Automation Team
License: MIT
================================================================================
"""

from __future__ import annotations

import json
from pathlib import Path
from typing import Any, Dict, List, Optional
from urllib.parse import urlparse

from loguru import logger
from playwright.async_api import BrowserContext, Route


FORM_HTML_PATH = Path(__file__).parent / "static" / "contact_form.html"

SUBMIT_PATH = "/api/contact"

SUCCESS_TEXT = (
    "Thank you for your message. Your message has been sent successfully. "
    "We will get back to you soon."
)

# Server-side counterpart of the page's own required-field checks
REQUIRED_FIELDS = ("name", "country")


class DemoFormServer:
    """
    In-process stand-in for the form's web server.

    Usage:
        demo = DemoFormServer()
        context = await browser.new_context()
        await demo.install(context, "http://form.local")
        page = await context.new_page()
        await page.goto("http://form.local/")
        ...
        assert demo.last_submission["name"] == "John Doe"
    """

    def __init__(self, html_path: Path = FORM_HTML_PATH):
        self.html_path = Path(html_path)
        self._html: Optional[str] = None
        self.submissions: List[Dict[str, Any]] = []

    @property
    def html(self) -> str:
        """Form markup, read from disk on first use."""
        if self._html is None:
            self._html = self.html_path.read_text(encoding="utf-8")
        return self._html

    @property
    def last_submission(self) -> Optional[Dict[str, Any]]:
        return self.submissions[-1] if self.submissions else None

    async def install(self, context: BrowserContext, base_url: str) -> None:
        """Route every request under base_url to this server."""
        pattern = f"{base_url.rstrip('/')}/**"
        await context.route(pattern, self.handle)
        logger.debug(f"Demo form routed on {pattern}")

    async def handle(self, route: Route) -> None:
        """Fulfill one intercepted request."""
        request = route.request
        path = urlparse(request.url).path or "/"

        if request.method == "POST" and path == SUBMIT_PATH:
            await self._handle_submission(route)
            return

        if request.method == "GET" and path in ("/", "/index.html"):
            await route.fulfill(
                status=200,
                content_type="text/html; charset=utf-8",
                body=self.html,
            )
            return

        logger.debug(f"Demo form: no route for {request.method} {path}")
        await route.fulfill(status=404, content_type="text/plain", body="Not Found")

    async def _handle_submission(self, route: Route) -> None:
        payload = route.request.post_data_json or {}
        missing = [f for f in REQUIRED_FIELDS if not str(payload.get(f) or "").strip()]

        if missing:
            logger.info(f"Demo form rejected submission, missing: {missing}")
            await route.fulfill(
                status=422,
                content_type="application/json",
                body=json.dumps({"error": f"Missing required fields: {', '.join(missing)}"}),
            )
            return

        self.submissions.append(payload)
        logger.info(f"Demo form accepted submission #{len(self.submissions)}")
        await route.fulfill(
            status=200,
            content_type="application/json",
            body=json.dumps({"status": "ok", "message": SUCCESS_TEXT}),
        )

    def reset(self) -> None:
        self.submissions.clear()


__all__ = [
    "DemoFormServer",
    "FORM_HTML_PATH",
    "SUBMIT_PATH",
    "SUCCESS_TEXT",
]
