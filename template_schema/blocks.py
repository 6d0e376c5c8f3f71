"""
Blocs — unité de contenu typée d'un template email.

Types fermés : header, text, button, image, divider, footer, spacer, columns.
`props` reste un dict ouvert (payload de rendu, non validé ici).
"""
import logging
from typing import Any, Dict, List, Literal, Optional, Union, get_args

from pydantic import BaseModel, ConfigDict, Field

from .checks import INVALID, Path, check_array, check_enum, check_mapping, check_object, check_string, reject
from .violations import Failure, Violation

log = logging.getLogger(__name__)

BlockType = Literal["header", "text", "button", "image", "divider", "footer", "spacer", "columns"]
BLOCK_TYPES = get_args(BlockType)


class ContentModel(BaseModel):
    """Base des valeurs normalisées (noms Python snake_case, alias wire camelCase)."""
    model_config = ConfigDict(populate_by_name=True)

    def to_payload(self) -> dict:
        """Forme wire, prête à persister ou à renvoyer."""
        return self.model_dump(by_alias=True)


class Block(ContentModel):
    id: str = Field(..., min_length=1, description="Block identifier, unique within the template")
    type: BlockType = Field(..., description="Block kind, drives rendering")
    props: Dict[str, Any] = Field(
        default_factory=dict,
        description="Rendering payload (text, url, colors…); shape depends on the block type",
    )


def check_block(value: Any, path: Path, errors: List[Violation]) -> Optional[Block]:
    """Contrôle un bloc ; toutes ses violations sont ajoutées à errors."""
    data = check_object(value, path, errors)
    if data is None:
        return None

    block_id   = check_string(data, "id", path, errors, strip=True)
    block_type = check_enum(data, "type", BLOCK_TYPES, path, errors)
    props      = check_mapping(data, "props", path, errors)

    if any(v is INVALID for v in (block_id, block_type, props)):
        return None
    return Block(id=block_id, type=block_type, props=props)


def check_blocks(data, key: str, path: Path, errors: List[Violation]) -> Optional[List[Block]]:
    """Liste non vide de blocs ; chaque bloc invalide est rapporté, dans l'ordre."""
    items = check_array(data, key, path, errors, min_items=1)
    if items is INVALID:
        return None
    blocks = [check_block(item, (*path, key, i), errors) for i, item in enumerate(items)]
    if any(b is None for b in blocks):
        return None
    return blocks


def validate_block(value: Any) -> Union[Block, Failure]:
    errors: List[Violation] = []
    block = check_block(value, (), errors)
    if errors:
        return reject("Bloc", errors)
    log.debug("Bloc %s accepté (%s)", block.id, block.type)
    return block
