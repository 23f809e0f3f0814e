# src/carnival_lint/validator.py
from __future__ import annotations
import logging
from typing import List, Optional

from .diagnostics import Diagnostic, error, info
from .isa import lookup
from .lexer import LineIndex, is_comment, is_directive, split_lines, tokenize
from .operands import accepts, describe
from .regs import REGISTER_SCAN_RE, is_valid_reg

logger = logging.getLogger(__name__)

META_KEYS = ("meta.name", "meta.version", "meta.author")

def missing_code(key: str) -> str:
    return f"missing_{key}"

def check_meta(text: str, *, filename: Optional[str] = None) -> List[Diagnostic]:
    """Claves meta obligatorias ausentes (búsqueda de subcadena en todo el texto)."""
    diags: List[Diagnostic] = []
    for key in META_KEYS:
        if key not in text:
            diags.append(info(f"Missing key: {key}", code=missing_code(key), file=filename))
    return diags

def check_registers(text: str, *, filename: Optional[str] = None) -> List[Diagnostic]:
    """Registros fuera de r0..r15 en cualquier parte del texto (comentarios incluidos)."""
    diags: List[Diagnostic] = []
    index = None
    for m in REGISTER_SCAN_RE.finditer(text):
        tok = m.group(1)
        if is_valid_reg(tok):
            continue
        if index is None:
            index = LineIndex(text)
        line, col = index.position(m.start(1))
        end_line, end_col = index.position(m.end(1))
        diags.append(error(f"Invalid register: {tok}", line=line, col=col,
                           end_line=end_line, end_col=end_col, file=filename))
    return diags

def check_lines(text: str, *, filename: Optional[str] = None) -> List[Diagnostic]:
    """Valida cada línea contra la tabla de instrucciones.

    Por línea: mnemónico desconocido, o bien número de operandos incorrecto,
    o bien operandos de clase incorrecta (nunca dos de estas a la vez).
    """
    diags: List[Diagnostic] = []
    for lineno, raw in enumerate(split_lines(text)):
        core = raw.strip()
        if not core:
            continue
        lead = len(raw) - len(raw.lstrip())
        tokens = tokenize(core)
        if not tokens:
            continue

        first = tokens[0]
        mnemonic = first.text.upper()
        operands = tokens[1:]
        sig = lookup(mnemonic)

        if sig is None:
            if is_comment(first.text) or is_directive(first.text) or first.text in META_KEYS:
                continue
            diags.append(error(f"Invalid instruction: {mnemonic}", line=lineno,
                               col=lead + first.start, end_col=lead + first.end,
                               file=filename))
            continue

        span = dict(line=lineno, col=lead, end_col=lead + len(core), file=filename)
        if len(operands) != len(sig):
            diags.append(error(
                f"Instruction {mnemonic} expects {len(sig)} argument(s), got {len(operands)}",
                **span))
            continue

        for i, (slot, tok) in enumerate(zip(sig, operands), start=1):
            if not accepts(slot, tok.text):
                diags.append(error(
                    f"Invalid argument '{tok.text}' for {mnemonic} (operand {i}). "
                    f"Expected: {describe(slot)}",
                    **span))
    return diags

def validate(text: str, *, filename: Optional[str] = None) -> List[Diagnostic]:
    """Lista completa y determinista de hallazgos para un documento.

    Orden: claves meta, luego registros fuera de rango, luego líneas.
    """
    diags = check_meta(text, filename=filename)
    diags += check_registers(text, filename=filename)
    diags += check_lines(text, filename=filename)
    logger.debug("validate %s: %d diagnostic(s)", filename or "<text>", len(diags))
    return diags
