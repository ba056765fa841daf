# Copyright 2026 Wiremap Contributors
# SPDX-License-Identifier: Apache-2.0

"""Tests for identifier casing and spelling rules."""

import pytest

from wiremap.rendering import naming


class TestCasing:
    @pytest.mark.parametrize(
        ("name", "expected"),
        [
            ("page_size", ["page", "size"]),
            ("pageSize", ["page", "Size"]),
            ("HTTPServer", ["HTTP", "Server"]),
            ("widget-part.id", ["widget", "part", "id"]),
            ("", []),
        ],
    )
    def test_words(self, name: str, expected: list[str]) -> None:
        assert naming.words(name) == expected

    @pytest.mark.parametrize(
        ("name", "expected"),
        [
            ("page_size", "pageSize"),
            ("PageSize", "pageSize"),
            ("created-at", "createdAt"),
            ("ID", "id"),
            ("id", "id"),
        ],
    )
    def test_camel(self, name: str, expected: str) -> None:
        assert naming.camel(name) == expected

    @pytest.mark.parametrize(
        ("name", "expected"),
        [
            ("widget_part", "WidgetPart"),
            ("widget", "Widget"),
            ("createWidget", "CreateWidget"),
            ("HTTPServer", "HttpServer"),
        ],
    )
    def test_pascal(self, name: str, expected: str) -> None:
        assert naming.pascal(name) == expected

    def test_title(self) -> None:
        assert naming.title("widget_service") == "Widget Service"


class TestLiterals:
    def test_quote_escapes(self) -> None:
        assert naming.quote("it's") == "'it\\'s'"
        assert naming.quote("a\\b") == "'a\\\\b'"
        assert naming.quote("a\nb") == "'a\\nb'"

    @pytest.mark.parametrize(
        ("value", "expected"),
        [(None, "null"), (True, "true"), (False, "false"), ("x", "'x'"), (3, "3"), (2.5, "2.5")],
    )
    def test_literal(self, value: object, expected: str) -> None:
        assert naming.literal(value) == expected


class TestMemberAccess:
    def test_identifier_key_is_bare(self) -> None:
        assert naming.member_key("created_at") == "created_at"

    def test_non_identifier_key_is_quoted(self) -> None:
        assert naming.member_key("created-at") == "'created-at'"

    def test_accessor(self) -> None:
        assert naming.accessor("id") == ".id"
        assert naming.accessor("x-id") == "['x-id']"

    @pytest.mark.parametrize(("name", "expected"), [("class", "_class"), ("3d", "_3d"), ("body", "body")])
    def test_local_name(self, name: str, expected: str) -> None:
        assert naming.local_name(name) == expected


class TestDeclarationNames:
    def test_type_and_dto_names(self) -> None:
        assert naming.type_name("widget_part") == "WidgetPart"
        assert naming.dto_name("widget_part") == "WidgetPartDto"

    def test_interface_name(self) -> None:
        assert naming.interface_name("widget", "service") == "WidgetService"
        assert naming.interface_name("widget", "api") == "WidgetApi"

    def test_method_names(self) -> None:
        assert naming.method_name("get_widget") == "getWidget"
        assert naming.params_type_name("getWidget") == "GetWidgetParams"
        assert naming.handler_name("getWidget") == "handleGetWidget"
        assert naming.request_handler_type_name("getWidget") == "GetWidgetRequestHandler"

    def test_type_guard_name(self) -> None:
        assert naming.type_guard_name("square") == "isSquare"
        assert naming.type_guard_name("big_circle") == "isBigCircle"
