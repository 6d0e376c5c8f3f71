"""
Tests validate_block — id, type fermé, props ouvert.
"""
import sys, os
sys.path.insert(0, os.path.join(os.path.dirname(__file__), ".."))

import logging

import pytest

from template_schema import BLOCK_TYPES, Block, Failure, ViolationCode, validate_block
from template_schema import config


# ── Blocs valides ─────────────────────────────────────────────────────────

class TestValidBlock:
    def test_props_default_to_empty_dict(self):
        block = validate_block({"id": "h1", "type": "header"})
        assert isinstance(block, Block)
        assert block.props == {}

    @pytest.mark.parametrize("block_type", BLOCK_TYPES)
    def test_every_known_type_accepted(self, block_type):
        block = validate_block({"id": "b", "type": block_type})
        assert block.type == block_type

    def test_props_passthrough(self):
        props = {"text": "Bonjour {{firstName}}", "style": {"color": "#333"}, "items": [1, 2]}
        block = validate_block({"id": "t1", "type": "text", "props": props})
        assert block.props == props

    def test_id_kept_as_given(self):
        # Trim uniquement pour le contrôle de vacuité
        block = validate_block({"id": " hero ", "type": "image"})
        assert block.id == " hero "

    def test_unknown_keys_dropped(self):
        block = validate_block({"id": "d", "type": "divider", "color": "red"})
        assert block.to_payload() == {"id": "d", "type": "divider", "props": {}}

    def test_props_detached_from_input(self):
        raw = {"id": "c", "type": "columns", "props": {"columns": [{"blocks": ["a"]}], "pair": ("x", "y")}}
        block = validate_block(raw)
        raw["props"]["columns"][0]["blocks"].append("b")
        raw["props"]["columns"].append({})
        assert block.props == {"columns": [{"blocks": ["a"]}], "pair": ["x", "y"]}

    def test_props_shared_reference_kept(self):
        shared = {"color": "#333"}
        block = validate_block({"id": "t", "type": "text", "props": {"a": shared, "b": shared}})
        assert block.props["a"] is block.props["b"]
        assert block.props["a"] is not shared

    def test_revalidate_normalized_block(self):
        block = validate_block({"id": "s", "type": "spacer"})
        assert validate_block(block) == block
        assert validate_block(block.to_payload()) == block


# ── Violations ────────────────────────────────────────────────────────────

class TestInvalidBlock:
    @pytest.mark.parametrize("bad_type", ["hero", "Header", "TEXT", "", 3, None])
    def test_type_outside_set(self, bad_type):
        result = validate_block({"id": "x", "type": bad_type})
        assert isinstance(result, Failure)
        assert len(result) == 1
        v = result.violations[0]
        assert v.path == ["type"]
        assert v.code == ViolationCode.INVALID_ENUM
        assert v.message == "not one of the allowed values"
        assert v.expected == list(BLOCK_TYPES)

    def test_missing_type(self):
        result = validate_block({"id": "x"})
        assert result.violations[0].code == ViolationCode.MISSING_FIELD
        assert result.violations[0].message == "required"

    @pytest.mark.parametrize("bad_id", ["", "   ", "\t\n"])
    def test_blank_id(self, bad_id):
        result = validate_block({"id": bad_id, "type": "text"})
        assert result.locations == ["id"]
        assert result.violations[0].code == ViolationCode.MISSING_FIELD

    def test_non_string_id(self):
        result = validate_block({"id": 42, "type": "text"})
        assert result.violations[0].code == ViolationCode.INVALID_TYPE
        assert result.violations[0].message == "must be a string"

    @pytest.mark.parametrize("bad_props", [[], ["a"], "props", 1, None])
    def test_props_must_be_object(self, bad_props):
        result = validate_block({"id": "b", "type": "button", "props": bad_props})
        assert result.locations == ["props"]
        assert result.violations[0].code == ViolationCode.INVALID_TYPE
        assert result.violations[0].message == "must be an object"

    def test_all_field_violations_reported(self):
        result = validate_block({"props": []})
        assert result.locations == ["id", "type", "props"]

    @pytest.mark.parametrize("value", ["header", 12, None, ["id", "type"]])
    def test_non_object_input(self, value):
        result = validate_block(value)
        assert result.locations == ["$"]
        assert result.violations[0].message == "must be an object"

    def test_rejection_logged(self, caplog):
        with caplog.at_level(logging.INFO, logger="template_schema"):
            validate_block({"id": "", "type": "nope"})
        assert "Bloc rejeté : 2 violation(s) (id, type)" in caplog.text

    def test_rejection_log_truncated(self, caplog, monkeypatch):
        monkeypatch.setattr(config, "LOG_MAX_VIOLATIONS", 1)
        with caplog.at_level(logging.INFO, logger="template_schema"):
            validate_block({})
        assert "(id, …)" in caplog.text
