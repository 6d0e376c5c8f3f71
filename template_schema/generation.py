"""
Sortie de génération — Template complet, et suite de templates.

Un template avec un seul bloc invalide est rejeté en entier ; toutes les
violations (y compris celles de plusieurs blocs) sont rapportées ensemble.
"""
import logging
from typing import Any, Dict, List, Literal, Optional, Union, get_args

from pydantic import BaseModel, Field

from .blocks import Block, ContentModel, check_blocks
from .checks import INVALID, Path, check_enum, check_object, check_string, check_string_list, reject
from .violations import MSG_ARRAY, Failure, Violation, ViolationCode

log = logging.getLogger(__name__)

TemplateType = Literal["transactional", "marketing"]
TEMPLATE_TYPES = get_args(TemplateType)
DEFAULT_TEMPLATE_TYPE: TemplateType = "transactional"


class Template(ContentModel):
    name: str = Field(..., min_length=1, description="Human-readable template name")
    category: str = Field(..., min_length=1, description="Template category (welcome, invoice, newsletter…)")
    type: TemplateType = Field(default=DEFAULT_TEMPLATE_TYPE, description="Email kind")
    blocks: List[Block] = Field(..., min_length=1, description="Ordered content blocks, top to bottom")
    variables: List[str] = Field(
        default_factory=list,
        description="Placeholder names referenced by the blocks, e.g. firstName",
    )


class SuiteReport(BaseModel):
    """Résultat élément par élément d'une suite (politique d'acceptation laissée à l'appelant)."""
    accepted: Dict[int, Template] = Field(default_factory=dict)
    rejected: Dict[int, Failure] = Field(default_factory=dict)

    @property
    def all_valid(self) -> bool:
        return not self.rejected


def check_template(value: Any, path: Path, errors: List[Violation]) -> Optional[Template]:
    data = check_object(value, path, errors)
    if data is None:
        return None

    fields = {
        "name":      check_string(data, "name", path, errors),
        "category":  check_string(data, "category", path, errors),
        "type":      check_enum(data, "type", TEMPLATE_TYPES, path, errors, default=DEFAULT_TEMPLATE_TYPE),
        "blocks":    check_blocks(data, "blocks", path, errors),
        "variables": check_string_list(data, "variables", path, errors),
    }
    if any(v is INVALID or v is None for v in fields.values()):
        return None
    return Template(**fields)


def validate_template(value: Any) -> Union[Template, Failure]:
    errors: List[Violation] = []
    template = check_template(value, (), errors)
    if errors:
        return reject("Template", errors)
    log.debug("Template %r accepté (%d blocs)", template.name, len(template.blocks))
    return template


def _suite_items(value: Any, errors: List[Violation]) -> Optional[list]:
    if not isinstance(value, (list, tuple)):
        errors.append(Violation(path=[], message=MSG_ARRAY, code=ViolationCode.INVALID_TYPE))
        return None
    return list(value)


def validate_generation_suite(value: Any) -> Union[List[Template], Failure]:
    """
    Valide chaque template indépendamment et rapporte toutes les violations,
    préfixées par l'index de l'élément. Une suite vide est valide.
    """
    errors: List[Violation] = []
    items = _suite_items(value, errors)
    if items is None:
        return reject("Suite", errors)

    templates = [check_template(item, (i,), errors) for i, item in enumerate(items)]
    if errors:
        return reject("Suite", errors)
    log.debug("Suite acceptée (%d templates)", len(templates))
    return templates


def partition_generation_suite(value: Any) -> Union[SuiteReport, Failure]:
    """
    Variante pour les appelants qui acceptent une suite partielle :
    chaque élément garde ses propres chemins (sans préfixe d'index).
    """
    errors: List[Violation] = []
    items = _suite_items(value, errors)
    if items is None:
        return reject("Suite", errors)

    report = SuiteReport()
    for i, item in enumerate(items):
        result = validate_template(item)
        if isinstance(result, Failure):
            report.rejected[i] = result
        else:
            report.accepted[i] = result
    return report
