"""
Réponse brute d'un fournisseur IA → valeur JSON → validateur.

Les modèles renvoient souvent le JSON dans un bloc ```json … ``` ; le fence
est retiré avant décodage. Un texte indécodable devient un Failure, comme
n'importe quelle autre sortie malformée.
"""
import json
import logging
import re
from typing import Any, Callable, Dict

from .blocks import validate_block
from .edit import validate_edit_result
from .generation import validate_generation_suite, validate_template
from .violations import MSG_JSON, Failure, Violation, ViolationCode

log = logging.getLogger(__name__)

_FENCE = re.compile(r"^```[\w-]*[ \t]*\n?(.*?)\n?[ \t]*```$", re.DOTALL)

_VALIDATORS: Dict[str, Callable[[Any], Any]] = {
    "block":            validate_block,
    "template":         validate_template,
    "generation_suite": validate_generation_suite,
    "edit":             validate_edit_result,
}


def strip_code_fence(text: str) -> str:
    text = text.strip()
    m = _FENCE.match(text)
    return m.group(1).strip() if m else text


def parse_ai_json(text):
    """Décode le texte IA ; renvoie la valeur JSON ou un Failure."""
    if isinstance(text, bytes):
        try:
            text = text.decode("utf-8")
        except UnicodeDecodeError as e:
            log.warning("Réponse IA non UTF-8 : %s", e)
            return _invalid_json()
    if not isinstance(text, str):
        raise TypeError(f"Texte attendu, reçu {type(text).__name__}")

    try:
        return json.loads(strip_code_fence(text))
    except (json.JSONDecodeError, RecursionError) as e:
        log.warning("Réponse IA non JSON : %s", e)
        return _invalid_json()


def _invalid_json() -> Failure:
    return Failure(violations=[Violation(path=[], message=MSG_JSON, code=ViolationCode.INVALID_TYPE)])


def validate_ai_response(text, kind: str):
    """
    Pipeline complet : texte IA → JSON → validateur du schéma `kind`.
    Usage : validate_ai_response(raw, "template") → Template | Failure
    """
    validator = _VALIDATORS.get(kind)
    if validator is None:
        raise ValueError(f"Schéma inconnu : {kind!r}. Registry : {list(_VALIDATORS)}")
    value = parse_ai_json(text)
    if isinstance(value, Failure):
        return value
    return validator(value)
