"""Render the inbox page from projected view models."""

from __future__ import annotations

import logging
from pathlib import Path

from jinja2 import Environment, FileSystemLoader, select_autoescape
from markupsafe import Markup

from inbox.domain.entities import InboxPage

logger = logging.getLogger(__name__)

_TEMPLATE_DIR = Path(__file__).resolve().parent / "templates"
PAGE_TEMPLATE = "notifications.html.jinja"


class InboxRenderer:
    """Jinja2 renderer for the notifications page.

    ``head_pre`` and ``body_pre`` are trusted HTML supplied by the embedding
    application and are inserted without escaping.
    """

    def __init__(self, *, base_uri: str = "", head_pre: str = "", body_pre: str = "") -> None:
        self.base_uri = base_uri.rstrip("/")
        self.head_pre = Markup(head_pre)
        self.body_pre = Markup(body_pre)
        self._env = Environment(
            loader=FileSystemLoader(str(_TEMPLATE_DIR)),
            autoescape=select_autoescape(["html", "jinja"]),
            trim_blocks=True,
            lstrip_blocks=True,
        )

    def render_page(self, page: InboxPage) -> str:
        template = self._env.get_template(PAGE_TEMPLATE)
        html = template.render(
            page=page,
            base_uri=self.base_uri,
            head_pre=self.head_pre,
            body_pre=self.body_pre,
        )
        logger.debug("Rendered inbox page with %s groups", len(page.groups))
        return html


__all__ = ["InboxRenderer", "PAGE_TEMPLATE"]
