"""Tests validate_edit_result — blocs modifiés + listes d'ids."""
import sys, os
sys.path.insert(0, os.path.join(os.path.dirname(__file__), ".."))

from template_schema import EditResult, Failure, ViolationCode, validate_edit_result


def make_edit(**overrides):
    data = {
        "updatedBlocks": [
            {"id": "btn-1", "type": "button", "props": {"label": "Voir ma commande", "href": "{{orderUrl}}"}},
        ],
        "summary": "Bouton principal reformulé",
    }
    data.update(overrides)
    return data


# ── Valeurs par défaut ────────────────────────────────────────────────────

def test_id_sets_default_to_empty():
    result = validate_edit_result(make_edit())
    assert isinstance(result, EditResult)
    assert result.changed_block_ids == []
    assert result.added_block_ids == []
    assert result.removed_block_ids == []


def test_wire_names():
    result = validate_edit_result(make_edit(changedBlockIds=["btn-1"]))
    payload = result.to_payload()
    assert payload["updatedBlocks"][0]["id"] == "btn-1"
    assert payload["changedBlockIds"] == ["btn-1"]
    assert set(payload) == {"updatedBlocks", "changedBlockIds", "addedBlockIds", "removedBlockIds", "summary"}


def test_idempotent():
    result = validate_edit_result(make_edit(addedBlockIds=["img-2"], removedBlockIds=["spacer-1"]))
    assert validate_edit_result(result) == result
    assert validate_edit_result(result.to_payload()) == result


# ── Pas de recoupement ids / blocs ────────────────────────────────────────

def test_changed_id_absent_from_updated_blocks_accepted():
    result = validate_edit_result(make_edit(changedBlockIds=["ghost"]))
    assert result.changed_block_ids == ["ghost"]
    assert [b.id for b in result.updated_blocks] == ["btn-1"]


def test_removed_id_present_in_updated_blocks_accepted():
    result = validate_edit_result(make_edit(removedBlockIds=["btn-1"]))
    assert result.removed_block_ids == ["btn-1"]


def test_empty_string_ids_accepted():
    result = validate_edit_result(make_edit(addedBlockIds=["", "new"]))
    assert result.added_block_ids == ["", "new"]


# ── Violations ────────────────────────────────────────────────────────────

def test_empty_updated_blocks():
    result = validate_edit_result(make_edit(updatedBlocks=[]))
    assert isinstance(result, Failure)
    assert result.locations == ["updatedBlocks"]
    assert result.violations[0].code == ViolationCode.EMPTY_COLLECTION


def test_missing_summary_and_blocks():
    result = validate_edit_result({})
    assert result.locations == ["updatedBlocks", "summary"]
    assert all(v.code == ViolationCode.MISSING_FIELD for v in result.violations)


def test_empty_summary():
    result = validate_edit_result(make_edit(summary=""))
    assert result.locations == ["summary"]


def test_invalid_block_inside_update():
    blocks = make_edit()["updatedBlocks"] + [{"id": "c1", "type": "columns", "props": "2"}]
    result = validate_edit_result(make_edit(updatedBlocks=blocks))
    assert result.locations == ["updatedBlocks[1].props"]


def test_id_sets_shape():
    result = validate_edit_result(make_edit(changedBlockIds="btn-1", addedBlockIds=[7]))
    assert result.locations == ["changedBlockIds", "addedBlockIds[0]"]
    assert result.violations[0].message == "must be an array"
    assert result.violations[1].message == "must be a string"
