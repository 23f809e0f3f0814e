'''
correcciones rápidas para las claves meta ausentes
'''

from __future__ import annotations
from dataclasses import dataclass, field
from typing import Iterable, List, Optional

from .diagnostics import Diagnostic
from .lexer import LineIndex

META_DEFAULTS = {
    "meta.name": "Program",
    "meta.version": "0.1",
    "meta.author": "Me",
}

_MISSING_PREFIX = "missing_"

@dataclass(frozen=True)
class TextEdit:
    """Inserción de texto en (line, col), base 0."""
    line: int
    col: int
    new_text: str

@dataclass(frozen=True)
class CodeAction:
    title: str
    edit: TextEdit
    kind: str = "quickfix"
    diagnostics: List[Diagnostic] = field(default_factory=list)

def missing_key(diag: Diagnostic) -> Optional[str]:
    """Clave meta que falta según el código del diagnóstico, o None."""
    code = diag.code
    if not code or not code.startswith(_MISSING_PREFIX + "meta"):
        return None
    key = code[len(_MISSING_PREFIX):]
    return key if key in META_DEFAULTS else None

def fix_for(diag: Diagnostic) -> Optional[CodeAction]:
    key = missing_key(diag)
    if key is None:
        return None
    edit = TextEdit(0, 0, f"{key} '{META_DEFAULTS[key]}'\n")
    return CodeAction(title=f"Insert {key}", edit=edit, diagnostics=[diag])

def code_actions(diags: Iterable[Diagnostic]) -> List[CodeAction]:
    """Una acción por cada diagnóstico de clave meta ausente."""
    out = []
    for d in diags:
        action = fix_for(d)
        if action is not None:
            out.append(action)
    return out

def apply_edits(text: str, edits: Iterable[TextEdit]) -> str:
    """Aplica inserciones sobre el texto original.

    Las posiciones se refieren al texto sin modificar; inserciones en el
    mismo punto quedan en el orden recibido.
    """
    index = LineIndex(text)
    located = []
    for n, e in enumerate(edits):
        line = min(e.line, len(index.starts) - 1)
        located.append((index.starts[line] + e.col, n, e.new_text))
    # de atrás hacia delante para no desplazar offsets pendientes
    for offset, _, new_text in sorted(located, key=lambda x: (x[0], x[1]), reverse=True):
        text = text[:offset] + new_text + text[offset:]
    return text
