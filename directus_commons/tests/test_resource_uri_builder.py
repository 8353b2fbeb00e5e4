import json
from urllib.parse import parse_qs, quote, urlsplit

import pytest

from directus_commons.model.query_model import QueryOptions
from directus_commons.model.resource_model import ResourceDescriptor
from directus_commons.utils.filter_expression import FilterExpression
from directus_commons.utils.resource_uri_builder import ResourceURIBuilder

BASE = "https://cms.test"


@pytest.fixture
def builder():
    return ResourceURIBuilder(BASE, "items/articles")


def query_of(uri: str) -> str:
    return urlsplit(uri).query

# ----------------------------
# Multi-parameter rendering
# ----------------------------

def test_limit_then_sort_joined_with_single_ampersand(builder):
    uri = builder.add_limit(10).add_sort(["-date"]).get()
    assert uri == "https://cms.test/items/articles?limit=10&sort=-date"
    assert "limit=10sort" not in uri
    assert uri.count("&") == 1

def test_all_helpers_together(builder):
    uri = (builder.add_fields(["id", "title", "author.name"])
           .add_search("hello")
           .add_sort(["-date", "title"])
           .add_limit(5)
           .add_offset("10")
           .add_page(2)
           .add_version("draft")
           .get())
    assert query_of(uri) == "fields=id,title,author.name&search=hello&sort=-date,title&limit=5&offset=10&page=2&version=draft"

# ----------------------------
# Empty arguments are no-ops
# ----------------------------

def test_empty_arguments_add_nothing(builder):
    builder.add_fields([]).add_fields(None).add_filter(None).add_search("").add_sort([]) \
        .add_version(None).add_meta("").add_deep({})
    assert builder.query_params == []
    assert builder.get() == "https://cms.test/items/articles"

# ----------------------------
# Numeric validation
# ----------------------------

@pytest.mark.parametrize("value", ["abc", "-5", -5, "1.5", 2.0, None, True, ""])
def test_invalid_limit_is_ignored(builder, value):
    builder.add_limit(value).add_offset(value)
    assert builder.query_params == []

@pytest.mark.parametrize("value,expected", [("0", "limit=0"), (0, "limit=0"), ("25", "limit=25"), (" 7 ", "limit=7")])
def test_valid_limit(builder, value, expected):
    builder.add_limit(value)
    assert builder.query_params == [expected]

@pytest.mark.parametrize("value", [0, "0", "-1", "x"])
def test_page_must_be_positive(builder, value):
    builder.add_page(value)
    assert builder.query_params == []

def test_page_accepts_digit_string(builder):
    assert query_of(builder.add_page("3").get()) == "page=3"

# ----------------------------
# Filter, deep, meta
# ----------------------------

def test_filter_is_escaped_json(builder):
    expr = FilterExpression().equals("status", "published")
    uri = builder.add_filter(expr).add_limit(1).get()
    assert query_of(uri) == "filter=" + quote('{"status":{"_eq":"published"}}', safe=",-_.~:*$!()") + "&limit=1"
    parsed = parse_qs(query_of(uri))
    assert json.loads(parsed["filter"][0]) == {"status": {"_eq": "published"}}

def test_search_term_is_escaped(builder):
    uri = builder.add_search("a&b=c").get()
    assert parse_qs(query_of(uri)) == {"search": ["a&b=c"]}

def test_deep_and_meta(builder):
    uri = builder.add_meta("total_count").add_deep({"translations": {"_limit": 1}}).get()
    parsed = parse_qs(query_of(uri))
    assert parsed["meta"] == ["total_count"]
    assert json.loads(parsed["deep"][0]) == {"translations": {"_limit": 1}}

def test_query_options_applied_in_order(builder):
    options = QueryOptions(
        fields=["id"],
        filter=FilterExpression().is_empty("tags"),
        sort=["-id"],
        limit=3,
        page=1,
    )
    uri = builder.add_query_options(options).get()
    assert [p.split("=")[0] for p in query_of(uri).split("&")] == ["fields", "filter", "sort", "limit", "page"]

def test_query_options_none_is_noop(builder):
    assert builder.add_query_options(None).get() == "https://cms.test/items/articles"

# ----------------------------
# Resource descriptor constructor
# ----------------------------

def test_from_resource_implemented_does_not_warn():
    messages = []
    uri = ResourceURIBuilder.from_resource(BASE, ResourceDescriptor(path="files"), "abc", warn=messages.append).get()
    assert uri == "https://cms.test/files/abc"
    assert messages == []

def test_from_resource_not_implemented_warns_once_and_proceeds():
    messages = []
    descriptor = ResourceDescriptor(path="relations", implemented=False)
    builder = ResourceURIBuilder.from_resource(BASE, descriptor, warn=messages.append)
    assert builder.add_limit(1).get() == "https://cms.test/relations?limit=1"
    assert len(messages) == 1
    assert "relations" in messages[0]

def test_from_resource_default_sink_is_logger(caplog):
    descriptor = ResourceDescriptor(path="presets", implemented=False)
    with caplog.at_level("WARNING"):
        ResourceURIBuilder.from_resource(BASE, descriptor)
    assert "presets" in caplog.text

@pytest.mark.parametrize("value", ["١٠", "²", "٣"])
def test_non_ascii_digits_ignored(builder, value):
    builder.add_limit(value).add_offset(value).add_page(value)
    assert builder.query_params == []
