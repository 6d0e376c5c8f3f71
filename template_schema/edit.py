"""
Sortie d'édition — blocs modifiés + partition changed/added/removed.

Les listes d'ids ne sont PAS recoupées avec updatedBlocks : un appelant qui a
besoin de cette cohérence doit l'ajouter par-dessus.
"""
import logging
from typing import Any, List, Optional, Union

from pydantic import Field

from .blocks import Block, ContentModel, check_blocks
from .checks import INVALID, Path, check_object, check_string, check_string_list, reject
from .violations import Failure, Violation

log = logging.getLogger(__name__)


class EditResult(ContentModel):
    updated_blocks: List[Block] = Field(
        ..., alias="updatedBlocks", min_length=1,
        description="Full post-edit state of every block touched by the edit",
    )
    changed_block_ids: List[str] = Field(
        default_factory=list, alias="changedBlockIds",
        description="Ids of existing blocks whose content changed",
    )
    added_block_ids: List[str] = Field(
        default_factory=list, alias="addedBlockIds",
        description="Ids of blocks created by the edit",
    )
    removed_block_ids: List[str] = Field(
        default_factory=list, alias="removedBlockIds",
        description="Ids of blocks deleted by the edit",
    )
    summary: str = Field(..., min_length=1, description="One-sentence description of the change")


def check_edit_result(value: Any, path: Path, errors: List[Violation]) -> Optional[EditResult]:
    data = check_object(value, path, errors)
    if data is None:
        return None

    fields = {
        "updatedBlocks":   check_blocks(data, "updatedBlocks", path, errors),
        "changedBlockIds": check_string_list(data, "changedBlockIds", path, errors),
        "addedBlockIds":   check_string_list(data, "addedBlockIds", path, errors),
        "removedBlockIds": check_string_list(data, "removedBlockIds", path, errors),
        "summary":         check_string(data, "summary", path, errors),
    }
    if any(v is INVALID or v is None for v in fields.values()):
        return None
    return EditResult(**fields)


def validate_edit_result(value: Any) -> Union[EditResult, Failure]:
    errors: List[Violation] = []
    result = check_edit_result(value, (), errors)
    if errors:
        return reject("Edition", errors)
    log.debug(
        "Edition acceptée : %d bloc(s), +%d ~%d -%d",
        len(result.updated_blocks), len(result.added_block_ids),
        len(result.changed_block_ids), len(result.removed_block_ids),
    )
    return result
