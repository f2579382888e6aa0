import pytest

from shapekit.errors import PathTemplateError
from shapekit.paths import PathPart, interpolate, param_names, parse_path


def test_single_param():
    assert param_names(parse_path("/:foo")) == ["foo"]


def test_nested_params():
    assert param_names(parse_path("/:foo/test/:bar/:zoo")) == ["foo", "bar", "zoo"]


def test_param_and_wildcard():
    parts = parse_path("/:foo/*")
    assert parts == [
        PathPart("separator", "/"),
        PathPart("param", "foo"),
        PathPart("separator", "/"),
        PathPart("param", "*"),
    ]
    assert param_names(parts) == ["foo", "wildcard"]


def test_wildcards_are_numbered():
    assert param_names(parse_path("/*/x/*/*")) == ["wildcard", "wildcard2", "wildcard3"]


def test_param_name_stops_at_non_word_char():
    assert parse_path("/:id.json") == [
        PathPart("separator", "/"),
        PathPart("param", "id"),
        PathPart("string", ".json"),
    ]


def test_backslash_copies_two_characters():
    assert parse_path("/a\\:b") == [PathPart("separator", "/"), PathPart("string", "a\\:b")]


def test_empty_param_name():
    with pytest.raises(PathTemplateError, match="Empty param name"):
        parse_path("/:/x")


@pytest.mark.parametrize("template", ["/:id?", "/a+"])
def test_quantifiers_unsupported(template):
    with pytest.raises(PathTemplateError, match="is not supported"):
        parse_path(template)


def test_interpolate():
    assert interpolate(parse_path("/users/:id/files/*")) == "/users/${id}/files/${wildcard}"
    assert interpolate(parse_path("/a`b")) == "/a\\`b"


def test_param_names_are_ascii_word_characters():
    assert parse_path("/:id²") == [
        PathPart("separator", "/"),
        PathPart("param", "id"),
        PathPart("string", "²"),
    ]
    with pytest.raises(PathTemplateError, match="Empty param name"):
        parse_path("/:é")
