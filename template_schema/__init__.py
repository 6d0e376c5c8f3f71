"""
Template Schema — validation et normalisation des réponses IA
(génération et édition de templates email).

Usage (génération) :
    >>> from template_schema import validate_template, Failure
    >>> result = validate_template({"name": "Bienvenue", "category": "onboarding",
    ...                             "blocks": [{"id": "h1", "type": "header"}]})
    >>> result.type, result.blocks[0].props
    ('transactional', {})

Usage (texte brut du fournisseur) :
    >>> from template_schema import validate_ai_response
    >>> result = validate_ai_response(raw_text, "edit")
    >>> if isinstance(result, Failure):
    ...     body = ApiResponse.rejected(result)   # → 422

Les validateurs ne lèvent jamais pour une entrée malformée : ils renvoient
un Failure listant toutes les violations (chemin + message).
"""
from .violations import (
    Violation,
    ViolationCode,
    Failure,
    TemplateValidationError,
    format_path,
    is_failure,
    unwrap,
)
from .blocks import Block, BlockType, BLOCK_TYPES, validate_block
from .generation import (
    Template,
    TemplateType,
    TEMPLATE_TYPES,
    SuiteReport,
    validate_template,
    validate_generation_suite,
    partition_generation_suite,
)
from .edit import EditResult, validate_edit_result
from .ai_payload import parse_ai_json, strip_code_fence, validate_ai_response
from .json_schema import SCHEMA_KINDS, response_json_schema
from .envelope import ApiResponse
from .config import configure_logging

__version__ = "0.1.0"

__all__ = [
    # échecs
    "Violation", "ViolationCode", "Failure", "TemplateValidationError",
    "format_path", "is_failure", "unwrap",
    # blocs
    "Block", "BlockType", "BLOCK_TYPES", "validate_block",
    # génération
    "Template", "TemplateType", "TEMPLATE_TYPES", "SuiteReport",
    "validate_template", "validate_generation_suite", "partition_generation_suite",
    # édition
    "EditResult", "validate_edit_result",
    # réponses IA
    "parse_ai_json", "strip_code_fence", "validate_ai_response",
    "SCHEMA_KINDS", "response_json_schema",
    "ApiResponse",
    "configure_logging",
]
