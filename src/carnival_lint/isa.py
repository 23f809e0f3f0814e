'''
tabla fija de instrucciones Carnival (mnemónico -> ranuras de operandos)
'''

from __future__ import annotations
from enum import Enum
from types import MappingProxyType
from typing import Dict, FrozenSet, List, Mapping, Optional, Tuple

class OperandKind(Enum):
    """Clases de operando que acepta una ranura."""
    REGISTER = "Register"
    NUMBER = "Number"
    LABEL = "Label"
    STRING = "String"

# Una ranura es el conjunto de clases aceptadas en esa posición
Slot = FrozenSet[OperandKind]
Signature = Tuple[Slot, ...]

REG = OperandKind.REGISTER
NUM = OperandKind.NUMBER
LBL = OperandKind.LABEL
STR = OperandKind.STRING

_TABLE: Dict[str, Signature] = {}

def _add(name: str, *slots: Tuple[OperandKind, ...]):
    _TABLE[name] = tuple(frozenset(s) for s in slots)

# Movimiento de datos
_add("MOV", (REG, NUM), (REG,))
_add("LOD", (NUM,), (REG,))
_add("STR", (REG, NUM), (NUM,))
_add("PSH", (REG, NUM))
_add("POP", (REG,))

# Aritmética y lógica: origen, origen, destino
_add("ADD", (REG, NUM), (REG, NUM), (REG,))
_add("SUB", (REG, NUM), (REG, NUM), (REG,))
_add("MOD", (REG, NUM), (REG, NUM), (REG,))
_add("XOR", (REG, NUM), (REG, NUM), (REG,))
_add("AND", (REG, NUM), (REG, NUM), (REG,))
_add("NOT", (REG, NUM), (REG,))
_add("OR",  (REG, NUM), (REG, NUM), (REG,))

# Control de flujo
_add("JMP", (NUM, LBL))
_add("CAL", (NUM, LBL))
_add("RET")
_add("BRZ", (REG, NUM), (NUM, LBL))
_add("BNZ", (REG, NUM), (NUM, LBL))

# E/S
_add("IN",  (NUM,), (REG,))
_add("OUT", (NUM,), (REG, NUM, STR))
_add("GIP", (REG,))

_add("HLT")

# Saltos comparativos: a, b, destino
_add("BRG", (REG, NUM), (REG, NUM), (LBL, NUM))
_add("BNG", (REG, NUM), (REG, NUM), (LBL, NUM))
_add("BRL", (REG, NUM), (REG, NUM), (LBL, NUM))
_add("BNL", (REG, NUM), (REG, NUM), (LBL, NUM))

# Vista de solo lectura; se construye una vez al importar
CATALOG: Mapping[str, Signature] = MappingProxyType(_TABLE)
del _add, _TABLE

def lookup(mnemonic: str) -> Optional[Signature]:
    """Firma de la instrucción, o None si el mnemónico no existe."""
    return CATALOG.get(mnemonic.upper())

def mnemonics() -> List[str]:
    return list(CATALOG)
