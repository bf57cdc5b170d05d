# auteur

A small website and content-model toolkit built on Flask and Jinja2.

## Modules

- `auteur.schema`: the abstract `Schema` base class and the `plat_schema`
  class decorator. A decorated class gets a `name()` class method that returns
  the class name. The class is also registered as a `Schema`.
- `auteur.models`: the content models. They are `Post`, `Field`, `FormType`,
  `Header`, `Footer`, `CreatePost`, `PageData` and `Reference`.
  - Each model has `to_dict()`. Every model except `PageData` also has
    `from_dict()`.
  - `from_dict()` raises `ValueError` on missing fields or fields of the wrong
    type.
  - `block_to_dict` and `block_from_dict` convert a `Header` or `Footer` block
    to and from its tagged form, `{"Header": {...}}` or `{"Footer": {...}}`.
- `auteur.store`: `MemoryPostStore`, an in-memory, thread-safe record store.
  - `insert(table, content)` takes one mapping or a list of mappings. It gives
    each record an id of the form `table:key` and returns copies of the created
    records.
  - `select(table)` returns copies of every record in the table, oldest first.
  - Both methods raise `StoreError` for an invalid table name, invalid content,
    or a duplicate id.
- `auteur.handlers`: the request handlers. Each one returns a `Reply`, which
  holds a status, a body and a content type. Handlers that need the templates
  or the store take an `AppState(templates, db)`. The handlers are:
  - `hello_json_api_handler`
  - `serve_index_page_handler`
  - `serve_mario_index_page_handler`
  - `serve_admin_page_id_handler`
  - `create_post_handler`
  - `get_posts_handler`
- `auteur.app`: `create_app(state, public_dir)` builds the Flask application.
  `main()` loads the templates and serves the site.

## Installing

```
pip install .
```

To run the tests as well:

```
pip install .[test]
pytest
```

## Running the site

```
auteur
```

The command accepts these options:

- `--templates DIR`: the Jinja2 template directory. Default: `website/templates`.
- `--public DIR`: the static file directory. Default: `website/public`.
- `--host HOST`: the address to listen on. Default: `127.0.0.1`.
- `--port PORT`: the port to listen on. Default: `3000`.

At startup every `.html` template is parsed. If a template fails to parse, the
command prints an error and exits with status 1. The site is served with
Flask's built-in server.

You supply the template directory yourself. It must contain these templates:

- `index.html`
- `mario/index.html`
- `admin/posts/[id].html`

Each template is rendered with a single variable, `page`, which holds a plain
dict. If rendering fails, the route answers 500 with the error text.

| Method | Path                | What it does                                  |
|--------|---------------------|-----------------------------------------------|
| GET    | `/`                 | Renders `index.html`                          |
| GET    | `/mario`            | Renders `mario/index.html`                    |
| GET    | `/admin/posts/1234` | Renders `admin/posts/[id].html`               |
| GET    | `/api/hello`        | Returns a sample JSON response                |
| POST   | `/api/posts`        | Stores `{"title": "..."}` in the `posts` table|
| GET    | `/api/posts`        | Lists the stored posts as JSON                |

Any other GET path is served as a file from the public directory.

`POST /api/posts` answers with these statuses:

- 415 if the request is not JSON.
- 400 if the body is malformed.
- 422 if `title` is missing or is not a string.

After a post is stored, the handler reads each record back as a `Post`. A
`Post` has a `Field` title and a `blocks` list. A record holding only a string
title therefore does not read back. The record is still stored, but the
request answers 500 with `{"error": "..."}`. Once such a record is in the
store, `GET /api/posts` answers 500 in the same way.

## Using the models

```python
from auteur.models import Field, FormType, Header, Post, block_to_dict

title = Field(label="Title", hint="Enter the title", form_type=FormType.INPUT_TEXT)
post = Post(title=title, blocks=[Header(content=title)])

Post.name()                     # "Post"
post.to_dict()                  # {"id": None, "title": {...}, "blocks": [{"Header": {...}}]}
block_to_dict(post.blocks[0])   # {"Header": {"content": {...}}}
Post.from_dict(post.to_dict()) == post   # True
```

`FormType` values are written as `"InputArea"`, `"InputText"` and
`"InputDate"`. A `Reference` is written as
`{"_type": "reference", "_ref": "<id>"}`.

## Declaring your own schema types

```python
from auteur.schema import Schema, plat_schema

@plat_schema
class Article:
    pass

Article.name()                  # "Article"
issubclass(Article, Schema)     # True
```

## What it does not do

- Posts are kept only in memory, in `MemoryPostStore`. There is no database
  connection, and everything stored is lost when the server stops.
- No templates or static files ship with the package.