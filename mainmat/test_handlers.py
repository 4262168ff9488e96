# test_handlers.py

import pytest

from mainmat import matrix
from mainmat.errors import (
    ExtraneousTextError, IllegalCommaError, MissingArgumentError, MissingCommaError,
    NotANumberError, StopRequested, UndefinedCommandError, UndefinedMatrixError,
    UnnecessaryCommaError,
)
from mainmat.handlers import (
    CommandInterpreter, expect_comma, read_register, read_values,
)
from mainmat.matrix import Matrix
from mainmat.tables import CommandType

SEQUENCE = ", ".join(str(v) for v in range(1, 17))


@pytest.fixture
def interpreter():
    return CommandInterpreter()


@pytest.fixture
def loaded(interpreter):
    interpreter.execute(f"read_mat MAT_A, {SEQUENCE}")
    interpreter.execute("read_mat MAT_B, 2, 0, 0, 0, 0, 2, 0, 0, 0, 0, 2, 0, 0, 0, 0, 2")
    return interpreter


def snapshot(interpreter):
    return {name: interpreter.registers[name] for name in interpreter.registers}

# ---------------------------
# Grammar fragments
# ---------------------------

def test_expect_comma_skips_surrounding_whitespace():
    text = "MAT_A  ,   MAT_B"
    assert text[expect_comma(text, 5):] == "MAT_B"

def test_expect_comma_missing():
    with pytest.raises(MissingCommaError):
        expect_comma("MAT_A MAT_B", 5)

def test_expect_comma_doubled():
    with pytest.raises(UnnecessaryCommaError):
        expect_comma("MAT_A, , MAT_B", 5)

def test_read_register_returns_position_after_name():
    name, pos = read_register("MAT_C  , x", 0)
    assert name == "MAT_C"
    assert pos == 7

def test_read_register_at_end_is_missing_argument():
    with pytest.raises(MissingArgumentError):
        read_register("print_mat ", 10)

def test_read_values_list():
    assert read_values("1, -2.5,3e2", 0) == [1.0, -2.5, 300.0]

# ---------------------------
# Classification
# ---------------------------

def test_classify_returns_operand_position(interpreter):
    command, pos = interpreter.classify("  trans_mat   MAT_A, MAT_B")
    assert command is CommandType.TRANS_MAT
    assert pos == 14

def test_classify_blank_line(interpreter):
    assert interpreter.classify("   \t") == (None, 4)

def test_execute_blank_line_does_nothing(interpreter):
    assert interpreter.execute("  ") is None

def test_undefined_command(interpreter):
    with pytest.raises(UndefinedCommandError) as e:
        interpreter.execute("print_matrix MAT_A")
    assert str(e.value) == "Undefined command name"

# ---------------------------
# stop / print_mat
# ---------------------------

def test_stop(interpreter):
    with pytest.raises(StopRequested):
        interpreter.execute("stop")

def test_stop_with_surrounding_whitespace(interpreter):
    with pytest.raises(StopRequested):
        interpreter.execute("   stop  \t")

@pytest.mark.parametrize("line", ["stop extra", "stop x", "stop MAT_A"])
def test_stop_with_extra_text(interpreter, line):
    with pytest.raises(ExtraneousTextError):
        interpreter.execute(line)

def test_stop_with_comma(interpreter):
    with pytest.raises(IllegalCommaError):
        interpreter.execute("stop ,")

def test_print_mat(loaded):
    assert loaded.execute("print_mat MAT_A") == matrix.render(matrix.load(range(1, 17)))

def test_print_mat_undefined_register(interpreter):
    with pytest.raises(UndefinedMatrixError) as e:
        interpreter.execute("print_mat MAT_Z")
    assert str(e.value) == "Undefined matrix name"

def test_print_mat_without_register(interpreter):
    with pytest.raises(MissingArgumentError):
        interpreter.execute("print_mat")

def test_print_mat_extra_text(interpreter):
    with pytest.raises(ExtraneousTextError):
        interpreter.execute("print_mat MAT_A MAT_B")

def test_illegal_comma_before_first_operand(interpreter):
    with pytest.raises(IllegalCommaError):
        interpreter.execute("print_mat , MAT_A")

def test_register_name_followed_by_other_character(interpreter):
    # The register window is fixed width: MAT_AB reads as MAT_A followed by 'B'.
    with pytest.raises(ExtraneousTextError):
        interpreter.execute("print_mat MAT_AB")
    with pytest.raises(MissingCommaError):
        interpreter.execute("trans_mat MAT_AB, MAT_C")
    interpreter.execute("trans_mat MAT_A,MAT_B")

# ---------------------------
# read_mat
# ---------------------------

def test_read_mat(loaded):
    assert loaded.registers["MAT_A"] == matrix.load([float(v) for v in range(1, 17)])

def test_read_mat_pads_and_replaces_previous_contents(loaded):
    loaded.execute("read_mat MAT_A, 7, 8")
    assert loaded.registers["MAT_A"] == matrix.load([7.0, 8.0])

def test_read_mat_drops_values_past_sixteen(loaded):
    loaded.execute(f"read_mat MAT_C, {SEQUENCE}, 17, 18.5")
    assert loaded.registers["MAT_C"] == loaded.registers["MAT_A"]

def test_read_mat_flexible_spacing(interpreter):
    interpreter.execute("read_mat MAT_D ,1 ,\t-2.5,  +3")
    assert interpreter.registers["MAT_D"].cells[:4] == (1.0, -2.5, 3.0, 0.0)

@pytest.mark.parametrize("line,fault", [
    ("read_mat MAT_A", MissingArgumentError),
    ("read_mat MAT_A,", MissingArgumentError),
    ("read_mat MAT_A, ", MissingArgumentError),
    ("read_mat MAT_A 1, 2", MissingCommaError),
    ("read_mat MAT_A,, 1", UnnecessaryCommaError),
    ("read_mat MAT_A, 1,, 2", UnnecessaryCommaError),
    ("read_mat MAT_A, 1 2 3", MissingCommaError),
    ("read_mat MAT_A, 1, 2,", ExtraneousTextError),
    ("read_mat MAT_A, 1, 2 x", ExtraneousTextError),
    ("read_mat MAT_A, 1, abc", NotANumberError),
    ("read_mat MAT_A, 1, 2x", ExtraneousTextError),
    ("read_mat MAT_A, 1, 2xy", MissingCommaError),
    ("read_mat , MAT_A, 1", IllegalCommaError),
    ("read_mat MAT_G, 1", UndefinedMatrixError),
])
def test_read_mat_faults_leave_register_untouched(loaded, line, fault):
    before = snapshot(loaded)
    with pytest.raises(fault):
        loaded.execute(line)
    assert snapshot(loaded) == before

def test_read_mat_not_a_number_message(interpreter):
    with pytest.raises(NotANumberError) as e:
        interpreter.execute("read_mat MAT_A, one")
    assert str(e.value) == "Argument is not a real number"

def test_read_mat_checks_values_past_sixteen(loaded):
    with pytest.raises(NotANumberError):
        loaded.execute(f"read_mat MAT_A, {SEQUENCE}, oops")
    assert loaded.registers["MAT_A"] == matrix.load([float(v) for v in range(1, 17)])

# ---------------------------
# add_mat / sub_mat / mul_mat
# ---------------------------

def test_add_mat_of_fresh_registers_is_zero(interpreter):
    interpreter.execute("add_mat MAT_A, MAT_B, MAT_C")
    assert interpreter.registers["MAT_C"] == Matrix.zeros()

def test_add_then_sub_restores(loaded):
    loaded.execute("add_mat MAT_A, MAT_B, MAT_C")
    loaded.execute("sub_mat MAT_C, MAT_B, MAT_C")
    assert loaded.registers["MAT_C"] == loaded.registers["MAT_A"]

def test_mul_mat(loaded):
    loaded.execute("mul_mat MAT_A, MAT_B, MAT_C")
    assert loaded.registers["MAT_C"] == matrix.mul_scalar(loaded.registers["MAT_A"], 2.0)

def test_mul_mat_in_place_square(loaded):
    expected = matrix.mul(loaded.registers["MAT_A"], loaded.registers["MAT_A"])
    loaded.execute("mul_mat MAT_A, MAT_A, MAT_A")
    assert loaded.registers["MAT_A"] == expected
    assert loaded.registers["MAT_A"].get(3, 3) == 600.0

@pytest.mark.parametrize("line,fault", [
    ("add_mat MAT_A MAT_B, MAT_C", MissingCommaError),
    ("add_mat MAT_A, MAT_B MAT_C", MissingCommaError),
    ("add_mat MAT_A,, MAT_B, MAT_C", UnnecessaryCommaError),
    ("sub_mat MAT_A, MAT_B,, MAT_C", UnnecessaryCommaError),
    ("sub_mat MAT_A, MAT_B", MissingCommaError),
    ("sub_mat MAT_A, MAT_B,", MissingArgumentError),
    ("mul_mat MAT_A,", MissingArgumentError),
    ("mul_mat MAT_A, MAT_X, MAT_C", UndefinedMatrixError),
    ("mul_mat MAT_A, MAT_B, MAT_X", UndefinedMatrixError),
    ("mul_mat MAT_A, MAT_B, MAT_C, MAT_D", ExtraneousTextError),
    ("mul_mat MAT_A, MAT_B, MAT_C x", ExtraneousTextError),
])
def test_binary_op_faults_leave_registers_untouched(loaded, line, fault):
    before = snapshot(loaded)
    with pytest.raises(fault):
        loaded.execute(line)
    assert snapshot(loaded) == before

# ---------------------------
# mul_scalar / trans_mat
# ---------------------------

def test_mul_scalar_by_one_copies(loaded):
    loaded.execute("mul_scalar MAT_A, 1.0, MAT_D")
    assert loaded.registers["MAT_D"] == loaded.registers["MAT_A"]

def test_mul_scalar_in_place(loaded):
    loaded.execute("mul_scalar MAT_A , -0.5 , MAT_A")
    assert loaded.registers["MAT_A"].cells[:2] == (-0.5, -1.0)

@pytest.mark.parametrize("line,fault", [
    ("mul_scalar MAT_A 2, MAT_B", MissingCommaError),
    ("mul_scalar MAT_A, 2 MAT_B", MissingCommaError),
    ("mul_scalar MAT_A,, 2, MAT_B", UnnecessaryCommaError),
    ("mul_scalar MAT_A, 2,, MAT_B", UnnecessaryCommaError),
    ("mul_scalar MAT_A, x, MAT_B", NotANumberError),
    ("mul_scalar MAT_A, MAT_B, MAT_C", NotANumberError),
    ("mul_scalar MAT_A, 2,", MissingArgumentError),
    ("mul_scalar MAT_A, 2, MAT_Q", UndefinedMatrixError),
    ("mul_scalar MAT_A, 2, MAT_B, 3", ExtraneousTextError),
])
def test_mul_scalar_faults(loaded, line, fault):
    before = snapshot(loaded)
    with pytest.raises(fault):
        loaded.execute(line)
    assert snapshot(loaded) == before

def test_mul_scalar_not_a_number_message(interpreter):
    with pytest.raises(NotANumberError) as e:
        interpreter.execute("mul_scalar MAT_A, two, MAT_B")
    assert str(e.value) == "Argument is not a scalar"

def test_trans_mat_twice_is_identity(loaded):
    loaded.execute("trans_mat MAT_A, MAT_C")
    assert loaded.registers["MAT_C"] != loaded.registers["MAT_A"]
    loaded.execute("trans_mat MAT_C, MAT_C")
    assert loaded.registers["MAT_C"] == loaded.registers["MAT_A"]

def test_trans_mat_in_place(loaded):
    loaded.execute("trans_mat MAT_A, MAT_A")
    assert loaded.registers["MAT_A"].rows()[0] == (1.0, 5.0, 9.0, 13.0)

@pytest.mark.parametrize("line,fault", [
    ("trans_mat MAT_A MAT_B", MissingCommaError),
    ("trans_mat MAT_A", MissingCommaError),
    ("trans_mat MAT_A,, MAT_B", UnnecessaryCommaError),
    ("trans_mat MAT_A,", MissingArgumentError),
    ("trans_mat MAT_A, MAT_b", UndefinedMatrixError),
    ("trans_mat MAT_A, MAT_B extra", ExtraneousTextError),
])
def test_trans_mat_faults(loaded, line, fault):
    before = snapshot(loaded)
    with pytest.raises(fault):
        loaded.execute(line)
    assert snapshot(loaded) == before
