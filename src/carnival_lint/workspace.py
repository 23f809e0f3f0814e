'''
documentos abiertos y colección de diagnósticos por documento
'''

from __future__ import annotations
import logging
from dataclasses import dataclass
from pathlib import PurePath
from typing import Dict, List, Optional

from .completion import CompletionItem, completions
from .diagnostics import Diagnostic
from .quickfix import CodeAction, code_actions
from .validator import validate

logger = logging.getLogger(__name__)

LANGUAGE_ID = "carnival"
FILE_EXTENSIONS = (".cnvl",)

def language_for(path: str) -> Optional[str]:
    """Identificador de lenguaje a partir de la extensión del archivo."""
    if PurePath(path).suffix.lower() in FILE_EXTENSIONS:
        return LANGUAGE_ID
    return None

class DiagnosticCollection:
    """Diagnósticos por documento; `set` reemplaza, nunca mezcla."""

    def __init__(self):
        self._by_uri: Dict[str, List[Diagnostic]] = {}

    def set(self, uri: str, diags: List[Diagnostic]) -> None:
        self._by_uri[uri] = list(diags)

    def get(self, uri: str) -> List[Diagnostic]:
        return list(self._by_uri.get(uri, []))

    def __contains__(self, uri: str) -> bool:
        return uri in self._by_uri

    def __len__(self) -> int:
        return len(self._by_uri)

@dataclass
class Document:
    uri: str
    text: str
    language_id: str = LANGUAGE_ID

class Workspace:
    """Puntos de entrada que llama el editor: abrir, guardar y cambiar.

    Cada llamada valida el texto completo y sustituye los diagnósticos del
    documento. Los documentos de otro lenguaje se ignoran.
    """

    def __init__(self):
        self.documents: Dict[str, Document] = {}
        self.collection = DiagnosticCollection()

    def _update(self, doc: Document) -> Optional[List[Diagnostic]]:
        if doc.language_id != LANGUAGE_ID:
            logger.debug("ignoring %s (language %s)", doc.uri, doc.language_id)
            return None
        diags = validate(doc.text)
        self.collection.set(doc.uri, diags)
        return diags

    def did_open(self, uri: str, text: str, language_id: str = LANGUAGE_ID) -> Optional[List[Diagnostic]]:
        doc = Document(uri, text, language_id)
        self.documents[uri] = doc
        return self._update(doc)

    def did_save(self, uri: str, text: Optional[str] = None) -> Optional[List[Diagnostic]]:
        doc = self.documents.get(uri)
        if doc is None:
            if text is None:
                return None
            doc = self.documents[uri] = Document(uri, text, language_for(uri) or "")
        elif text is not None:
            doc.text = text
        return self._update(doc)

    def did_change(self, uri: str, text: str) -> Optional[List[Diagnostic]]:
        doc = self.documents.get(uri)
        if doc is None:
            doc = self.documents[uri] = Document(uri, text, language_for(uri) or "")
        else:
            doc.text = text
        return self._update(doc)

    def did_close(self, uri: str) -> None:
        self.documents.pop(uri, None)

    def diagnostics(self, uri: str) -> List[Diagnostic]:
        return self.collection.get(uri)

    def code_actions(self, uri: str, diags: List[Diagnostic]) -> List[CodeAction]:
        if uri not in self.documents:
            return []
        return code_actions(diags)

    def completions(self, uri: str, line: int = 0, col: int = 0) -> List[CompletionItem]:
        # la lista es la misma en cualquier posición; el filtrado lo hace el editor
        return completions()
