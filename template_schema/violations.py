"""
Violations — contrat d'échec de la validation.

Une validation ratée ne lève jamais d'exception : elle renvoie un `Failure`
qui liste toutes les violations (chemin + message), dans l'ordre de l'entrée.
"""
from enum import Enum
from typing import Any, List, Optional, Union

from pydantic import BaseModel, Field

PathSegment = Union[str, int]

# Messages exposés tels quels aux appelants
MSG_REQUIRED = "required"
MSG_NOT_ALLOWED = "not one of the allowed values"
MSG_OBJECT = "must be an object"
MSG_STRING = "must be a string"
MSG_ARRAY = "must be an array"
MSG_NON_EMPTY = "must contain at least one element"
MSG_JSON = "must be valid JSON"


class ViolationCode(str, Enum):
    MISSING_FIELD = "missing_field"
    INVALID_TYPE = "invalid_type"
    INVALID_ENUM = "invalid_enum"
    EMPTY_COLLECTION = "empty_collection"


def format_path(path: List[PathSegment]) -> str:
    """["blocks", 0, "id"] → "blocks[0].id" ; chemin vide → "$"."""
    out = ""
    for seg in path:
        if isinstance(seg, int):
            out += f"[{seg}]"
        else:
            out += f".{seg}" if out else seg
    return out or "$"


class Violation(BaseModel):
    """Une violation localisée."""
    path: List[PathSegment] = Field(default_factory=list)
    message: str
    code: ViolationCode
    expected: Optional[List[str]] = None

    @property
    def location(self) -> str:
        return format_path(self.path)


class Failure(BaseModel):
    """Échec structuré : toutes les violations d'un appel, jamais vide."""
    violations: List[Violation] = Field(min_length=1)

    @property
    def locations(self) -> List[str]:
        return [v.location for v in self.violations]

    def to_payload(self) -> List[dict]:
        """Forme sérialisable pour une réponse 422."""
        return [
            {"path": v.location, "message": v.message, "code": v.code.value}
            for v in self.violations
        ]

    def raise_error(self):
        raise TemplateValidationError(self)

    def __len__(self) -> int:
        return len(self.violations)


class TemplateValidationError(ValueError):
    """Levée uniquement par unwrap() / Failure.raise_error(), jamais par les validateurs."""

    def __init__(self, failure: Failure):
        self.failure = failure
        summary = ", ".join(f"{v.location}: {v.message}" for v in failure.violations)
        super().__init__(f"{len(failure)} violation(s): {summary}")


def is_failure(result: Any) -> bool:
    return isinstance(result, Failure)


def unwrap(result: Any) -> Any:
    """Renvoie la valeur normalisée, ou lève TemplateValidationError."""
    if isinstance(result, Failure):
        result.raise_error()
    return result
