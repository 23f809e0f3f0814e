from carnival_lint.completion import completions
from carnival_lint.isa import CATALOG

def test_all_instructions_lower_case():
    items = completions()
    assert len(items) == len(CATALOG)
    assert [i.label for i in items] == [m.lower() for m in CATALOG]
    assert all(i.insert_text == i.label for i in items)

def test_item_kind_and_detail():
    item = next(i for i in completions() if i.label == "mov")
    assert item.kind == "keyword"
    assert item.detail == "Carnival instruction"
