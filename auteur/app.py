"""The web application: routes, static files and the command that serves it."""

from __future__ import annotations

import argparse
import json
import os
import sys
from pathlib import Path
from typing import Optional, Sequence

from flask import Flask, Response, request, send_from_directory
from jinja2 import Environment, FileSystemLoader, TemplateError, select_autoescape

from auteur import handlers
from auteur.handlers import AppState, Reply
from auteur.models import CreatePost
from auteur.store import MemoryPostStore

__all__ = ["create_app", "main"]


def _response(reply: Reply) -> Response:
    return Response(reply.body, status=reply.status, content_type=reply.content_type)


def _read_create_post() -> "CreatePost | Response":
    if not request.is_json:
        return Response(
            "Expected request with `Content-Type: application/json`",
            status=415,
            content_type="text/plain; charset=utf-8",
        )
    try:
        data = json.loads(request.get_data(as_text=True))
    except ValueError as err:
        return Response(
            f"Failed to parse the request body as JSON: {err}",
            status=400,
            content_type="text/plain; charset=utf-8",
        )
    try:
        return CreatePost.from_dict(data)
    except ValueError as err:
        return Response(
            f"Failed to deserialize the JSON body into the target type: {err}",
            status=422,
            content_type="text/plain; charset=utf-8",
        )


def create_app(state: AppState, public_dir: "str | os.PathLike[str]") -> Flask:
    """Build the application; unrouted GET paths are served from ``public_dir``."""
    app = Flask(__name__, static_folder=None)
    public = str(Path(public_dir).resolve())

    @app.get("/admin/posts/1234")
    def admin_post():
        return _response(handlers.serve_admin_page_id_handler(state))

    @app.get("/")
    def index():
        return _response(handlers.serve_index_page_handler(state))

    @app.get("/mario")
    def mario():
        return _response(handlers.serve_mario_index_page_handler(state))

    @app.get("/api/hello")
    def hello():
        return _response(handlers.hello_json_api_handler())

    @app.post("/api/posts")
    def create_post():
        payload = _read_create_post()
        if isinstance(payload, Response):
            return payload
        return _response(handlers.create_post_handler(state, payload))

    @app.get("/api/posts")
    def get_posts():
        return _response(handlers.get_posts_handler(state))

    @app.get("/<path:filename>")
    def public_file(filename: str):
        return send_from_directory(public, filename)

    return app


def _load_templates(template_dir: str) -> Environment:
    env = Environment(
        loader=FileSystemLoader(template_dir),
        autoescape=select_autoescape(["html"]),
    )
    for name in env.list_templates(filter_func=lambda n: n.endswith(".html")):
        env.get_template(name)
    return env


def main(argv: Optional[Sequence[str]] = None) -> int:
    """Load the templates, set up the store and serve the site."""
    parser = argparse.ArgumentParser(prog="auteur", description="Serve the site.")
    parser.add_argument("--templates", default="website/templates")
    parser.add_argument("--public", default="website/public")
    parser.add_argument("--host", default="127.0.0.1")
    parser.add_argument("--port", type=int, default=3000)
    args = parser.parse_args(argv)

    try:
        templates = _load_templates(args.templates)
    except TemplateError as err:
        print(f"FATAL: Parsing error(s) on template initialization: {err}", file=sys.stderr)
        return 1
    print("Templates loaded successfully.")

    state = AppState(templates=templates, db=MemoryPostStore())
    print("AppState created successfully.")
    public_dir = Path(args.public)
    print(f"Public Dir: {public_dir}")
    app = create_app(state, public_dir)
    print("Router configured.")

    print(f"Server listening on http://{args.host}:{args.port}")
    try:
        app.run(host=args.host, port=args.port)
    except OSError as err:
        print(
            f"FATAL: Could not bind to address {args.host}:{args.port}: {err!r}",
            file=sys.stderr,
        )
        return 1
    return 0