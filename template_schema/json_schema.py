"""
JSON Schema des réponses attendues, pour le mode "structured output" des
fournisseurs IA. Un seul modèle par entité : les descriptions sont portées
par les Field() des modèles pydantic.
"""
from typing import List

from pydantic import TypeAdapter

from .blocks import Block
from .edit import EditResult
from .generation import Template

_SCHEMA_TARGETS: dict = {
    "block":            Block,
    "template":         Template,
    "generation_suite": List[Template],
    "edit":             EditResult,
}

SCHEMA_KINDS = tuple(_SCHEMA_TARGETS)


def response_json_schema(kind: str) -> dict:
    """Schéma (noms wire camelCase) ; un nouveau dict à chaque appel."""
    target = _SCHEMA_TARGETS.get(kind)
    if target is None:
        raise ValueError(f"Schéma inconnu : {kind!r}. Registry : {list(_SCHEMA_TARGETS)}")
    return TypeAdapter(target).json_schema(by_alias=True)
