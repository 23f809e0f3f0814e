import pytest
from carnival_lint.validator import validate, check_meta, check_registers, check_lines, META_KEYS

META = "meta.name 'Program'\nmeta.version '0.1'\nmeta.author 'Me'\n"

def _lines(src):
    return check_lines(src)

# --- claves meta ---
def test_all_meta_missing_in_order():
    diags = validate("")
    assert [d.severity for d in diags] == ["info"] * 3
    assert [d.code for d in diags] == ["missing_meta.name", "missing_meta.version", "missing_meta.author"]
    assert [d.message for d in diags] == [f"Missing key: {k}" for k in META_KEYS]
    assert all((d.line, d.col, d.end_line, d.end_col) == (0, 0, 0, 0) for d in diags)

def test_meta_found_inside_comment():
    src = "# meta.name meta.version meta.author\n"
    assert check_meta(src) == []
    assert validate(src) == []

def test_only_missing_keys_reported():
    diags = check_meta("meta.name 'x'\nmeta.author 'y'\n")
    assert [d.code for d in diags] == ["missing_meta.version"]

# --- barrido de registros ---
@pytest.mark.parametrize("src, token, line, col", [
    ("MOV r16 r1", "r16", 0, 4),
    ("# uses R99 here", "R99", 0, 7),
    ("HLT\n  PSH r42", "r42", 1, 6),
    ("x\r\n# r77", "r77", 1, 2),
])
def test_out_of_range_register_spans_token(src, token, line, col):
    diags = check_registers(src)
    assert len(diags) == 1
    d = diags[0]
    assert d.severity == "error"
    assert d.message == f"Invalid register: {token}"
    assert (d.line, d.col, d.end_line, d.end_col) == (line, col, line, col + len(token))

@pytest.mark.parametrize("src", [
    "MOV r0 r15",
    "# r15 is the last one",
    "xr16 r16x r100 r1_6",
    "",
])
def test_no_register_findings(src):
    assert check_registers(src) == []

# --- líneas ---
@pytest.mark.parametrize("line", [
    "MOV 5 r1",
    "mov r1 r2",
    "ADD r1 2 r3",
    "OUT 1 'hello world'",
    "OUT 1 r4",
    "JMP .loop",
    "CAL _start",
    "BRG r1 10 done.2",
    "RET",
    "HLT",
    ".loop",
    "# comment",
    "   ",
    "meta.name 'Program'",
])
def test_valid_lines(line):
    assert _lines(line) == []

def test_arity_mismatch():
    diags = _lines("MOV 5")
    assert len(diags) == 1
    assert diags[0].severity == "error"
    assert "expects 2 argument(s), got 1" in diags[0].message
    assert (diags[0].col, diags[0].end_col) == (0, 5)

def test_arity_excludes_type_errors():
    diags = _lines("ADD x y z w")
    assert len(diags) == 1
    assert diags[0].message == "Instruction ADD expects 3 argument(s), got 4"

def test_zero_operand_instruction_with_operand():
    diags = _lines("RET r1")
    assert [d.message for d in diags] == ["Instruction RET expects 0 argument(s), got 1"]

def test_number_rejected_in_register_slot():
    diags = _lines("ADD r1 r2 99")
    assert len(diags) == 1
    msg = diags[0].message
    assert "'99'" in msg and "operand 3" in msg and "Expected: Register" in msg

def test_mov_destination_must_be_register():
    diags = _lines("MOV r1 5")
    assert len(diags) == 1
    assert diags[0].message == "Invalid argument '5' for MOV (operand 2). Expected: Register"

def test_each_slot_reported():
    diags = _lines("ADD x y 5")
    assert [d.message.split(" (")[1][:9] for d in diags] == ["operand 1", "operand 2", "operand 3"]
    assert "Expected: Register or Number" in diags[0].message

def test_register_operand_is_shape_only():
    # r99 tiene forma de registro: solo el barrido de registros lo marca
    assert _lines("MOV r99 r1") == []
    diags = _lines("MOV r100 r1")
    assert len(diags) == 1 and "'r100'" in diags[0].message

def test_unknown_instruction():
    diags = _lines("FOO r1")
    assert len(diags) == 1
    d = diags[0]
    assert d.message == "Invalid instruction: FOO"
    assert (d.line, d.col, d.end_col) == (0, 0, 3)

def test_unknown_instruction_uppercased_and_indented():
    diags = _lines("\n    foo r1")
    assert diags[0].message == "Invalid instruction: FOO"
    assert (diags[0].line, diags[0].col, diags[0].end_col) == (1, 4, 7)

def test_line_span_covers_trimmed_line():
    diags = _lines("  ADD r1 r2 99  ")
    assert (diags[0].col, diags[0].end_col) == (2, 14)

def test_crlf_lines():
    diags = _lines("FOO\r\nBAR")
    assert [(d.line, d.col, d.end_col) for d in diags] == [(0, 0, 3), (1, 0, 3)]

# --- documento completo ---
def test_findings_order():
    diags = validate("FOO\nMOV r20 r1\n")
    assert [d.severity for d in diags] == ["info", "info", "info", "error", "error"]
    assert diags[3].message == "Invalid register: r20"
    assert diags[4].message == "Invalid instruction: FOO"

def test_clean_program():
    src = META + """
# cuenta hasta 10
.loop
    ADD r1 1 r1
    BRL r1 10 .loop
    OUT 1 'done'
    HLT
"""
    assert validate(src) == []

def test_idempotent():
    src = "MOV 5\nFOO\nADD r1 r2 99\n# r31\n"
    assert validate(src) == validate(src)

def test_filename_propagated():
    diags = validate("FOO", filename="prog.cnvl")
    assert all(d.file == "prog.cnvl" for d in diags)

@pytest.mark.parametrize("src", ["'", "''", "' unterminated", "\x00\x01", "\t\n\r\n", "r", "MOV ' '"])
def test_never_raises(src):
    validate(src)
