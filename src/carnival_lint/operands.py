'''
clasificación de operandos según las clases de una ranura
'''

from __future__ import annotations
import re
from typing import Iterable

from .isa import OperandKind, Slot
from .regs import is_reg_shape

NUMBER_RE = re.compile(r"\d+", re.ASCII)
LABEL_RE  = re.compile(r"(\.|[A-Za-z_])[\w.]*", re.ASCII)
STRING_RE = re.compile(r"'.*'")

def matches(kind: OperandKind, token: str) -> bool:
    """Indica si el token encaja en la clase dada.

    Para registros solo se mira la forma; el rango 0..15 lo revisa aparte
    el barrido de registros del validador.
    """
    if kind is OperandKind.REGISTER:
        return is_reg_shape(token)
    if kind is OperandKind.NUMBER:
        return NUMBER_RE.fullmatch(token) is not None
    if kind is OperandKind.LABEL:
        return LABEL_RE.fullmatch(token) is not None
    if kind is OperandKind.STRING:
        return STRING_RE.fullmatch(token) is not None
    return False

def accepts(slot: Slot, token: str) -> bool:
    return any(matches(kind, token) for kind in slot)

# Orden fijo para que los mensajes sean deterministas
_KIND_ORDER = list(OperandKind)

def describe(slot: Iterable[OperandKind]) -> str:
    """'Register or Number' para una ranura {REGISTER, NUMBER}."""
    kinds = sorted(slot, key=_KIND_ORDER.index)
    return " or ".join(k.value for k in kinds)
