"""Request handlers: pages rendered from templates and the posts JSON API."""

from __future__ import annotations

import json
import sys
from dataclasses import asdict, dataclass
from typing import Any, Optional

from jinja2 import Environment, TemplateError

from auteur.models import CreatePost, Field, FormType, Header, PageData, Post
from auteur.store import MemoryPostStore, StoreError

__all__ = [
    "AppState",
    "Reply",
    "ApiResponse",
    "IndexPageData",
    "hello_json_api_handler",
    "serve_index_page_handler",
    "serve_mario_index_page_handler",
    "serve_admin_page_id_handler",
    "create_post_handler",
    "get_posts_handler",
]

_HTML = "text/html; charset=utf-8"
_TEXT = "text/plain; charset=utf-8"
_JSON = "application/json"


@dataclass
class AppState:
    """What every handler shares: the templates and the document store."""

    templates: Environment
    db: MemoryPostStore


@dataclass(frozen=True)
class Reply:
    """A handler's answer: status code, body text and content type."""

    status: int
    body: str
    content_type: str = _TEXT


def _json_reply(status: int, value: Any) -> Reply:
    return Reply(status, json.dumps(value), _JSON)


@dataclass
class ApiResponse:
    """The body of the hello API call."""

    message: str
    status_code: int
    data: Optional[str] = None

    def to_dict(self) -> dict[str, Any]:
        return asdict(self)


@dataclass
class IndexPageData:
    """What the index pages are rendered with."""

    title: str
    heading: str
    message: str
    show_extra_info: bool

    def to_dict(self) -> dict[str, Any]:
        return asdict(self)


def _render(state: AppState, template_name: str, page: dict[str, Any]) -> Reply:
    try:
        html = state.templates.get_template(template_name).render(page=page)
    except TemplateError as err:
        print(f"Template rendering error: {err!r}", file=sys.stderr)
        return Reply(500, f"Failed to render template: {err}", _TEXT)
    return Reply(200, html, _HTML)


def hello_json_api_handler() -> Reply:
    """Answer with a fixed example JSON message."""
    response = ApiResponse(
        message="hello_JSON from api_handler",
        status_code=200,
        data="this is some example data",
    )
    return _json_reply(200, response.to_dict())


def serve_index_page_handler(state: AppState) -> Reply:
    """Render the site's index page."""
    page = IndexPageData(
        title="Auteur.Engineer (from index_handler)",
        heading="Welcome to Auteur.Engineer",
        message="This is a message for Autuer from the index_handler",
        show_extra_info=True,
    )
    return _render(state, "index.html", page.to_dict())


def serve_mario_index_page_handler(state: AppState) -> Reply:
    """Render the Mario page."""
    page = IndexPageData(
        title="Mario Page",
        heading="Welcome to Auteur.Engineer",
        message="Click on the Mario Coin Box",
        show_extra_info=True,
    )
    return _render(state, "mario/index.html", page.to_dict())


def serve_admin_page_id_handler(state: AppState) -> Reply:
    """Render the admin edit form for a post."""
    page = PageData(
        form_name=Post.name(),
        title=Field(
            label="Page B",
            hint="Enter the title of your post",
            form_type=FormType.INPUT_AREA,
        ),
        blocks=[
            Header(
                content=Field(
                    label="Content",
                    hint="Enter the content of your post",
                    form_type=FormType.INPUT_TEXT,
                )
            )
        ],
    )
    return _render(state, "admin/posts/[id].html", page.to_dict())


def create_post_handler(state: AppState, payload: CreatePost) -> Reply:
    """Store a new post and answer with it as read back, or with the error."""
    try:
        created = state.db.insert("posts", payload.to_dict())
        posts = [Post.from_dict(record) for record in created]
    except (StoreError, ValueError) as err:
        return _json_reply(500, {"error": str(err)})
    return _json_reply(201, posts[-1].to_dict())


def get_posts_handler(state: AppState) -> Reply:
    """Answer with every stored post, or with the error."""
    try:
        posts = [Post.from_dict(record) for record in state.db.select("posts")]
    except (StoreError, ValueError) as err:
        print(Post.name())
        return _json_reply(500, {"error": str(err)})
    print(Post.name())
    return _json_reply(200, [post.to_dict() for post in posts])