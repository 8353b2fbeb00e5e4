import json
from urllib.parse import parse_qs

import pytest

from directus_commons.model.query_model import QueryOptions
from directus_commons.repositories.item_repository import ItemRepository
from directus_commons.utils.errors import ApiRequestError, InvalidArgumentError
from directus_commons.utils.filter_expression import FilterExpression


@pytest.fixture
def repo(context, http):
    return ItemRepository(context, http)


def test_list_items_with_options(repo, transport):
    transport.reply(200, {"data": [{"id": 1, "title": "Hello"}]})
    options = QueryOptions(
        fields=["id", "title"],
        filter=FilterExpression().equals("status", "published"),
        sort=["-date_created"],
        limit=10,
    )
    items = repo.list_items("articles", options)

    assert items == [{"id": 1, "title": "Hello"}]
    request = transport.last
    assert request.method == "GET"
    assert request.url.path == "/items/articles"
    query = parse_qs(request.url.query.decode())
    assert query["fields"] == ["id,title"]
    assert json.loads(query["filter"][0]) == {"status": {"_eq": "published"}}
    assert query["sort"] == ["-date_created"]
    assert query["limit"] == ["10"]
    assert request.headers["Authorization"] == "Bearer secret"

def test_list_items_empty_data(repo, transport):
    transport.reply(200, {"data": None})
    assert repo.list_items("articles") == []

def test_get_item(repo, transport):
    transport.reply(200, {"data": {"id": 15}})
    assert repo.get_item("articles", 15) == {"id": 15}
    assert str(transport.last.url) == "https://cms.test/items/articles/15"

def test_create_item(repo, transport):
    transport.reply(200, {"data": {"id": 3, "title": "New"}})
    assert repo.create_item("articles", {"title": "New"}) == {"id": 3, "title": "New"}
    assert transport.last.method == "POST"
    assert transport.last_json() == {"title": "New"}

def test_create_items_skips_empty_batch(repo, transport):
    assert repo.create_items("articles", []) == []
    assert transport.requests == []

def test_update_item(repo, transport):
    transport.reply(200, {"data": {"id": 3, "title": "Changed"}})
    repo.update_item("articles", 3, {"title": "Changed"})
    assert transport.last.method == "PATCH"
    assert transport.last.url.path == "/items/articles/3"

def test_update_items_by_keys(repo, transport):
    transport.reply(200, {"data": []})
    repo.update_items("articles", [1, 2], {"status": "archived"})
    assert transport.last_json() == {"keys": [1, 2], "data": {"status": "archived"}}

def test_delete_item(repo, transport):
    transport.reply(204)
    assert repo.delete_item("articles", 3) is None
    assert transport.last.method == "DELETE"
    assert transport.last.url.path == "/items/articles/3"

def test_delete_items(repo, transport):
    transport.reply(204)
    repo.delete_items("articles", ["a", "b"])
    assert transport.last_json() == ["a", "b"]

def test_singleton_addressed_without_id(repo, transport):
    transport.reply(200, {"data": {"site_name": "Demo"}})
    assert repo.get_singleton("settings_page") == {"site_name": "Demo"}
    assert transport.last.url.path == "/items/settings_page"
    transport.reply(200, {"data": {"site_name": "Other"}})
    repo.update_singleton("settings_page", {"site_name": "Other"})
    assert transport.last.method == "PATCH"

@pytest.mark.parametrize("collection,item_id", [("", 1), ("articles", ""), ("articles", None)])
def test_required_arguments(repo, collection, item_id):
    with pytest.raises(InvalidArgumentError):
        repo.get_item(collection, item_id)

def test_server_error_propagates(repo, transport):
    transport.reply(404, {"errors": [{"message": "Not found"}]})
    with pytest.raises(ApiRequestError) as excinfo:
        repo.get_item("articles", 99)
    assert excinfo.value.status_code == 404

def test_item_id_cannot_escape_collection(repo, transport):
    transport.reply(200, {"data": {"id": 1}})
    repo.get_item("articles", "../users/1")
    assert transport.last.url.raw_path == b"/items/articles/..%2Fusers%2F1"
