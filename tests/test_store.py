import pytest

from auteur.store import MemoryPostStore, StoreError


@pytest.fixture
def store():
    return MemoryPostStore()


def test_insert_assigns_table_prefixed_id(store):
    created = store.insert("posts", {"title": "Hello"})
    assert len(created) == 1
    assert created[0]["id"].startswith("posts:")
    assert created[0]["title"] == "Hello"


def test_select_returns_inserted_records_in_order(store):
    first = store.insert("posts", {"title": "a"})[0]
    second = store.insert("posts", {"title": "b"})[0]
    assert store.select("posts") == [first, second]


def test_select_unknown_table_is_empty(store):
    assert store.select("nothing") == []


def test_insert_list_creates_each(store):
    created = store.insert("posts", [{"title": "a"}, {"title": "b"}])
    assert [r["title"] for r in created] == ["a", "b"]
    assert len({r["id"] for r in created}) == 2
    assert store.select("posts") == created


def test_given_id_is_prefixed(store):
    created = store.insert("posts", {"id": "one", "title": "a"})
    assert created[0]["id"] == "posts:one"
    again = store.insert("posts", {"id": "posts:two"})
    assert again[0]["id"] == "posts:two"


def test_duplicate_id_is_refused_and_nothing_stored(store):
    store.insert("posts", {"id": "one"})
    with pytest.raises(StoreError):
        store.insert("posts", [{"id": "two"}, {"id": "one"}])
    assert [r["id"] for r in store.select("posts")] == ["posts:one"]


def test_bad_content_is_refused(store):
    with pytest.raises(StoreError):
        store.insert("posts", "text")
    with pytest.raises(StoreError):
        store.insert("posts", [1, 2])


def test_bad_table_is_refused(store):
    with pytest.raises(StoreError):
        store.insert("", {"title": "a"})
    with pytest.raises(StoreError):
        store.select("a:b")


def test_records_are_copies(store):
    created = store.insert("posts", {"title": "a", "tags": ["x"]})
    created[0]["tags"].append("y")
    selected = store.select("posts")
    selected[0]["title"] = "changed"
    assert store.select("posts")[0]["title"] == "a"
    assert store.select("posts")[0]["tags"] == ["x"]