"""
Fonctions de contrôle élémentaires.

Chaque check lit un champ d'un mapping, ajoute ses violations à la liste
partagée `errors` (collecte exhaustive, pas de fail-fast) et renvoie la
valeur normalisée, ou INVALID si le champ est rejeté.
"""
import logging
from collections.abc import Mapping
from typing import Any, List, Optional, Sequence, Tuple

from pydantic import BaseModel

from . import config
from .violations import (
    MSG_ARRAY, MSG_NON_EMPTY, MSG_NOT_ALLOWED, MSG_OBJECT, MSG_REQUIRED, MSG_STRING,
    Failure, PathSegment, Violation, ViolationCode,
)

log = logging.getLogger(__name__)

Path = Tuple[PathSegment, ...]

MISSING = object()  # clé absente
INVALID = object()  # champ rejeté


def _add(errors: List[Violation], path: Path, message: str, code: ViolationCode, expected=None):
    errors.append(Violation(path=list(path), message=message, code=code, expected=expected))


def _is_array(value: Any) -> bool:
    return isinstance(value, (list, tuple))


# ── Objets ────────────────────────────────────────────────────────────────

def check_object(value: Any, path: Path, errors: List[Violation]) -> Optional[Mapping]:
    """Un modèle déjà normalisé est re-sérialisé (noms wire) avant contrôle."""
    if isinstance(value, BaseModel):
        value = value.model_dump(by_alias=True)
    if not isinstance(value, Mapping):
        _add(errors, path, MSG_OBJECT, ViolationCode.INVALID_TYPE)
        return None
    return value


# ── Champs scalaires ──────────────────────────────────────────────────────

def check_string(data: Mapping, key: str, path: Path, errors: List[Violation],
                 strip: bool = False) -> Any:
    """Chaîne obligatoire non vide (après trim si strip=True). La valeur n'est pas modifiée."""
    value = data.get(key, MISSING)
    if value is MISSING:
        _add(errors, (*path, key), MSG_REQUIRED, ViolationCode.MISSING_FIELD)
        return INVALID
    if not isinstance(value, str):
        _add(errors, (*path, key), MSG_STRING, ViolationCode.INVALID_TYPE)
        return INVALID
    if not (value.strip() if strip else value):
        _add(errors, (*path, key), MSG_REQUIRED, ViolationCode.MISSING_FIELD)
        return INVALID
    return value


def check_enum(data: Mapping, key: str, allowed: Sequence[str], path: Path,
               errors: List[Violation], default: Any = MISSING) -> Any:
    """Correspondance exacte, sensible à la casse."""
    value = data.get(key, MISSING)
    if value is MISSING:
        if default is not MISSING:
            return default
        _add(errors, (*path, key), MSG_REQUIRED, ViolationCode.MISSING_FIELD)
        return INVALID
    if not isinstance(value, str) or value not in allowed:
        _add(errors, (*path, key), MSG_NOT_ALLOWED, ViolationCode.INVALID_ENUM, expected=list(allowed))
        return INVALID
    return value


# ── Collections ───────────────────────────────────────────────────────────

def copy_payload(value: Mapping) -> dict:
    """
    Copie profonde des conteneurs dict/list (tuples → listes), sans récursion :
    la profondeur d'un payload IA n'est pas bornée. Les scalaires sont partagés.
    """
    out: dict = {}
    seen = {id(value): out}
    stack = [(value, out)]
    while stack:
        src, dst = stack.pop()
        items = src.items() if isinstance(src, Mapping) else enumerate(src)
        for k, v in items:
            if isinstance(v, Mapping) or _is_array(v):
                child = seen.get(id(v))
                if child is None:
                    child = {} if isinstance(v, Mapping) else []
                    seen[id(v)] = child
                    stack.append((v, child))
            else:
                child = v
            if isinstance(dst, dict):
                dst[k] = child
            else:
                dst.append(child)
    return out


def check_mapping(data: Mapping, key: str, path: Path, errors: List[Violation]) -> Any:
    """Mapping optionnel à clés str, {} par défaut. Les valeurs ne sont pas inspectées."""
    value = data.get(key, MISSING)
    if value is MISSING:
        return {}
    if not isinstance(value, Mapping) or not all(isinstance(k, str) for k in value):
        _add(errors, (*path, key), MSG_OBJECT, ViolationCode.INVALID_TYPE)
        return INVALID
    return copy_payload(value)


def check_string_list(data: Mapping, key: str, path: Path, errors: List[Violation]) -> Any:
    """Liste de chaînes optionnelle, [] par défaut. Les chaînes vides sont acceptées."""
    value = data.get(key, MISSING)
    if value is MISSING:
        return []
    if not _is_array(value):
        _add(errors, (*path, key), MSG_ARRAY, ViolationCode.INVALID_TYPE)
        return INVALID
    ok = True
    for i, item in enumerate(value):
        if not isinstance(item, str):
            _add(errors, (*path, key, i), MSG_STRING, ViolationCode.INVALID_TYPE)
            ok = False
    return list(value) if ok else INVALID


def check_array(data: Mapping, key: str, path: Path, errors: List[Violation],
                min_items: int = 0) -> Any:
    value = data.get(key, MISSING)
    if value is MISSING:
        _add(errors, (*path, key), MSG_REQUIRED, ViolationCode.MISSING_FIELD)
        return INVALID
    if not _is_array(value):
        _add(errors, (*path, key), MSG_ARRAY, ViolationCode.INVALID_TYPE)
        return INVALID
    if len(value) < min_items:
        _add(errors, (*path, key), MSG_NON_EMPTY, ViolationCode.EMPTY_COLLECTION)
        return INVALID
    return list(value)


# ── Résultat ──────────────────────────────────────────────────────────────

def reject(label: str, errors: List[Violation]) -> Failure:
    locs = [v.location for v in errors]
    shown = ", ".join(locs[:config.LOG_MAX_VIOLATIONS])
    if len(locs) > config.LOG_MAX_VIOLATIONS:
        shown += ", …"
    log.info("%s rejeté : %d violation(s) (%s)", label, len(errors), shown)
    return Failure(violations=errors)
