'''
clase Diagnostic y helpers (posición, severidad, código estable)
'''

from __future__ import annotations
from dataclasses import dataclass
from typing import Optional, Literal

# Severidades que entiende el editor
Severity = Literal["error", "info"]

_SEV_TO_LABEL = {
    "error": "ERROR",
    "info": "INFO",
}

@dataclass(frozen=True)
class Diagnostic:
    """Hallazgo del validador sobre un documento Carnival.

    Las posiciones son base 0 (convención del editor): `line`/`col` marcan el
    inicio del rango y `end_line`/`end_col` el final (exclusivo). `code` es un
    identificador estable que usan las correcciones rápidas (p.ej.
    'missing_meta.name').
    """
    severity: Severity
    message: str
    line: int = 0
    col: int = 0
    end_line: int = 0
    end_col: int = 0
    code: Optional[str] = None
    hint: Optional[str] = None
    file: Optional[str] = None

    def __str__(self) -> str:
        loc = ""
        if self.file is not None:
            loc += f"{self.file}:"
        # se muestran en base 1 para humanos
        loc += f"{self.line + 1}:{self.col + 1}: "
        sev = _SEV_TO_LABEL.get(self.severity, str(self.severity).upper())
        core = f"{sev}: {self.message}"
        if self.hint:
            core += f"  (hint: {self.hint})"
        return loc + core

def error(message: str, *, line: int = 0, col: int = 0, end_line: int | None = None,
          end_col: int | None = None, code: str | None = None,
          hint: str | None = None, file: str | None = None) -> Diagnostic:
    """Crea un diagnóstico de tipo error."""
    return Diagnostic("error", message, line, col,
                      line if end_line is None else end_line,
                      col if end_col is None else end_col,
                      code, hint, file)

def info(message: str, *, line: int = 0, col: int = 0, end_line: int | None = None,
         end_col: int | None = None, code: str | None = None,
         hint: str | None = None, file: str | None = None) -> Diagnostic:
    """Crea un diagnóstico informativo."""
    return Diagnostic("info", message, line, col,
                      line if end_line is None else end_line,
                      col if end_col is None else end_col,
                      code, hint, file)
