from __future__ import annotations
from dataclasses import dataclass
from typing import List

from .isa import mnemonics

DETAIL = "Carnival instruction"

@dataclass(frozen=True)
class CompletionItem:
    label: str
    insert_text: str
    kind: str = "keyword"
    detail: str = DETAIL

def completions() -> List[CompletionItem]:
    """Todas las instrucciones en minúsculas; no depende del cursor."""
    return [CompletionItem(label=m.lower(), insert_text=m.lower()) for m in mnemonics()]
