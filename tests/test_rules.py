"""Behavior of the four rule evaluators."""

import pytest

from semantic_key_lint.models import RuleContext, Violation
from semantic_key_lint.resolver import parse_local_schema_ref, resolve_local_schema
from semantic_key_lint.rules import (
    check_deep_property_keys,
    check_path_param_key,
    check_request_body_additional_properties,
    check_schema_declaration_key,
)


class TestPathParamKey:
    def param(self, **overrides):
        param = {"name": "orderKey", "in": "path"}
        param.update(overrides)
        return param

    def test_missing_schema(self):
        violations = check_path_param_key(self.param(), {}, RuleContext())
        assert len(violations) == 1
        assert "orderKey" in violations[0].message
        assert "via $ref or inline semantic marker" in violations[0].message

    def test_ref_schema_passes(self):
        param = self.param(schema={"$ref": "#/components/schemas/OrderKey"})
        assert check_path_param_key(param) == []

    @pytest.mark.parametrize("marker", ["x-semantic-type", "x-semantic-key"])
    def test_inline_string_with_marker_passes(self, marker):
        param = self.param(schema={"type": "string", marker: "OrderKey"})
        assert check_path_param_key(param) == []

    def test_inline_string_without_marker(self):
        param = self.param(schema={"type": "string"})
        violations = check_path_param_key(param, {}, RuleContext())
        assert len(violations) == 1
        message = violations[0].message
        assert "orderKey" in message
        assert "$ref" in message
        assert "type: string" in message
        assert "x-semantic-type" in message

    @pytest.mark.parametrize("schema", [
        {"type": "integer", "x-semantic-type": "OrderKey"},
        {},
        "string",
    ])
    def test_inline_non_string_or_malformed(self, schema):
        assert len(check_path_param_key(self.param(schema=schema))) == 1

    @pytest.mark.parametrize("param", [
        {"name": "orderKey", "in": "query"},
        {"name": "orderId", "in": "path"},
        {"name": "", "in": "path"},
        {"in": "path"},
        {"name": 12, "in": "path"},
        {"$ref": "#/components/parameters/OrderKey"},
        None,
        "orderKey",
    ])
    def test_not_applicable(self, param):
        assert check_path_param_key(param) == []

    @pytest.mark.parametrize("exceptions", ["orderKey otherKey", ["orderKey"], {"orderKey": True}])
    def test_excepted_name(self, exceptions):
        assert check_path_param_key(self.param(), {"exceptions": exceptions}) == []

    def test_suffix_only_match_applies_to_uppercase_names(self):
        assert len(check_path_param_key(self.param(name="OrderKey"))) == 1

    def test_empty_ref_is_judged_inline(self):
        marked = self.param(schema={"$ref": "", "type": "string", "x-semantic-type": "OrderKey"})
        assert check_path_param_key(marked) == []

        unmarked = self.param(schema={"$ref": "", "type": "string"})
        violations = check_path_param_key(unmarked)
        assert len(violations) == 1
        assert "inline with type: string" in violations[0].message

    @pytest.mark.parametrize("schema", [False, 0, ""])
    def test_falsy_schema_counts_as_missing(self, schema):
        violations = check_path_param_key(self.param(schema=schema))
        assert len(violations) == 1
        assert "via $ref or inline semantic marker" in violations[0].message

    @pytest.mark.parametrize("options", [["orderKey"], "orderKey", 3])
    def test_non_mapping_options_mean_no_exceptions(self, options):
        assert len(check_path_param_key(self.param(), options, RuleContext())) == 1


class TestDeepPropertyKeys:
    def test_nested_scenario(self):
        node = {
            "properties": {
                "userKey": {"type": "string"},
                "info": {"type": "object", "properties": {"sessionKey": {"type": "string"}}},
            }
        }
        violations = check_deep_property_keys(node, {}, RuleContext(path=[]))
        assert [v.path for v in violations] == [
            ("properties", "userKey"),
            ("properties", "info", "properties", "sessionKey"),
        ]
        assert violations[0].message == (
            "Property 'userKey' must use $ref to a semantic key schema "
            "(x-semantic-type or x-semantic-key), not an inline primitive string."
        )

    def test_context_path_prefixes_violation_paths(self):
        node = {"properties": {"userKey": {"type": "string"}}}
        context = RuleContext(path=["components", "schemas", "User"])
        violations = check_deep_property_keys(node, None, context)
        assert violations == [Violation(
            violations[0].message,
            path=("components", "schemas", "User", "properties", "userKey"),
        )]
        assert violations[0].pointer == "/components/schemas/User/properties/userKey"

    def test_exceptions_in_any_shape(self):
        node = {"properties": {"userKey": {"type": "string"}, "fooKey": {"type": "string"}}}
        for exceptions in ("userKey fooKey", ["userKey", "fooKey"], {"userKey": 1, "fooKey": "yes"}):
            assert check_deep_property_keys(node, {"exceptions": exceptions}) == []

    def test_no_findings_is_an_empty_list(self):
        node = {"properties": {"userKey": {"$ref": "#/components/schemas/UserKey"}}}
        assert check_deep_property_keys(node, {}, RuleContext()) == []

    def test_malformed_target(self):
        assert check_deep_property_keys(None) == []
        assert check_deep_property_keys(["userKey"]) == []

    @pytest.mark.parametrize("options", [["userKey"], "userKey"])
    def test_non_mapping_options_mean_no_exceptions(self, options):
        node = {"properties": {"userKey": {"type": "string"}}}
        assert len(check_deep_property_keys(node, options, RuleContext())) == 1
        assert check_deep_property_keys({"properties": {}}, options, RuleContext()) == []


class TestSchemaDeclarationKey:
    def run(self, target, name, options=None, prefix=("components", "schemas")):
        return check_schema_declaration_key(target, options, RuleContext(path=prefix + (name,)))

    def test_missing_marker(self):
        violations = self.run({"type": "string"}, "AccountKey")
        assert violations == [Violation(
            "Schema 'AccountKey' must declare x-semantic-type (or transitional x-semantic-key).",
            path=("components", "schemas", "AccountKey"),
        )]

    def test_legacy_alias_accepted(self):
        assert self.run({"x-semantic-key": True}, "AccountKey") == []

    def test_preferred_marker_accepted(self):
        assert self.run({"type": "string", "x-semantic-type": "AccountKey"}, "AccountKey") == []

    def test_non_key_names_ignored(self):
        assert self.run({"type": "string"}, "Account") == []

    @pytest.mark.parametrize("path", [
        (),
        ("AccountKey",),
        ("schemas", "AccountKey"),
        ("components", "parameters", "AccountKey"),
        ("components", "schemas", "Account", "properties", "AccountKey"),
    ])
    def test_path_shape_not_applicable(self, path):
        context = RuleContext(path=path)
        assert check_schema_declaration_key({"type": "string"}, {}, context) == []

    def test_schemas_anywhere_at_depth_three(self):
        context = RuleContext(path=("x-registry", "schemas", "AccountKey"))
        assert len(check_schema_declaration_key({}, {}, context)) == 1

    def test_exceptions(self):
        assert self.run({}, "AccountKey", {"exceptions": {"AccountKey": True}}) == []
        assert len(self.run({}, "AccountKey", {"exceptions": {"AccountKey": False}})) == 1

    @pytest.mark.parametrize("options", [["AccountKey"], "AccountKey"])
    def test_non_mapping_options_mean_no_exceptions(self, options):
        assert len(self.run({}, "AccountKey", options)) == 1

    def test_non_mapping_target(self):
        assert self.run(None, "AccountKey") == []
        assert self.run(True, "AccountKey") == []

    def test_missing_context(self):
        assert check_schema_declaration_key({}, {}) == []


class TestRequestBodyAdditionalProperties:
    def document(self, **schemas):
        return {"components": {"schemas": schemas}}

    def run(self, target, document, resolved=None):
        context = RuleContext(path=("paths",), document=document, resolved=resolved)
        return check_request_body_additional_properties(target, {}, context)

    def test_missing_target(self):
        violations = self.run({"$ref": "#/components/schemas/Order"}, self.document())
        assert [v.message for v in violations] == [
            "Referenced schema 'Order' not found under components.schemas."
        ]

    def test_missing_additional_properties(self):
        document = self.document(Order={"type": "object"})
        violations = self.run({"$ref": "#/components/schemas/Order"}, document)
        assert len(violations) == 1
        assert "'Order'" in violations[0].message
        assert "additionalProperties" in violations[0].message

    @pytest.mark.parametrize("value", [False, True, {}, {"type": "string"}, None])
    def test_any_declared_value_passes(self, value):
        document = self.document(Order={"type": "object", "additionalProperties": value})
        assert self.run({"$ref": "#/components/schemas/Order"}, document) == []

    def test_composition_of_target_not_followed(self):
        document = self.document(
            Order={"allOf": [{"additionalProperties": False}]},
        )
        assert len(self.run({"$ref": "#/components/schemas/Order"}, document)) == 1

    @pytest.mark.parametrize("target", [
        {"$ref": "common.yaml#/components/schemas/Order"},
        {"$ref": "https://example.com/api.yaml#/components/schemas/Order"},
        {"$ref": "#/components/responses/Order"},
        {"$ref": "#/components/schemas/"},
        {"$ref": ""},
        {"$ref": 12},
        {"type": "object"},
        None,
    ])
    def test_not_applicable(self, target):
        assert self.run(target, self.document()) == []

    def test_resolved_view_preferred(self):
        document = self.document(Order={"type": "object"})
        resolved = self.document(Order={"type": "object", "additionalProperties": False})
        assert self.run({"$ref": "#/components/schemas/Order"}, document, resolved) == []

    def test_empty_resolved_view_falls_back_to_document(self):
        document = self.document(Order={"additionalProperties": False})
        assert self.run({"$ref": "#/components/schemas/Order"}, document, {}) == []

    def test_no_document_reports_not_found(self):
        violations = check_request_body_additional_properties(
            {"$ref": "#/components/schemas/Order"}, {}, RuleContext()
        )
        assert len(violations) == 1
        assert "not found" in violations[0].message


class TestResolver:
    def test_parse_local_ref(self):
        assert parse_local_schema_ref("#/components/schemas/Order") == "Order"
        assert parse_local_schema_ref("#/components/schemas/a/b") == "a/b"
        assert parse_local_schema_ref("other.yaml#/components/schemas/Order") is None
        assert parse_local_schema_ref(None) is None

    def test_resolve_skips_malformed_documents(self):
        assert resolve_local_schema("Order", None) is None
        assert resolve_local_schema("Order", {"components": []}) is None
        assert resolve_local_schema("Order", {"components": {"schemas": None}}) is None
        assert resolve_local_schema("Order", {"components": {"schemas": {"Order": "x"}}}) is None
        assert resolve_local_schema("Order", {"components": {"schemas": {"Order": {}}}}) == {}
