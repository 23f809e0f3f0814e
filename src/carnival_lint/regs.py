'''
forma y rango de los registros r0..r15
'''

from __future__ import annotations
import re

NUM_REGS = 16

# Forma léxica de un operando registro: r/R seguido de 1 o 2 dígitos
REGISTER_RE = re.compile(r"[rR]\d{1,2}", re.ASCII)
# Igual, pero como palabra completa en cualquier parte del texto
REGISTER_SCAN_RE = re.compile(r"\b(r\d{1,2})\b", re.ASCII | re.IGNORECASE)

def is_reg_shape(token: str) -> bool:
    """Indica si el token tiene forma de registro (no comprueba el rango)."""
    return REGISTER_RE.fullmatch(token) is not None

def reg_num(token: str) -> int:
    """Devuelve el número del registro o lanza ValueError."""
    if not is_reg_shape(token):
        raise ValueError(f"Not a register: {token}")
    return int(token[1:])

def in_range(num: int) -> bool:
    return 0 <= num < NUM_REGS

def is_valid_reg(token: str) -> bool:
    """Forma de registro y número en [0, 15]."""
    return is_reg_shape(token) and in_range(reg_num(token))
