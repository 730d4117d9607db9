import pytest

from drills.units import convert_block, main, rule

RULE = "-" * 64

# value, Fahrenheit in Celsius, Celsius in Fahrenheit
TEMPERATURES = [
    (8, "-13.333333333333334", "46.4"),
    (16, "-8.88888888888889", "60.8"),
    (32, "0", "89.6"),
]
# value, feet in metres, metres in feet
LENGTHS = [(8, "2.44", "26.25"), (16, "4.88", "52.50"), (32, "9.75", "104.99")]
# value, kilograms in pounds, pounds in kilograms
WEIGHTS = [(8, "17.64", "3.63"), (16, "35.28", "7.26"), (32, "70.56", "14.51")]
# value, picoseconds in nanoseconds, nanoseconds in picoseconds
TIMES = [(8, "0.01", "8000.00"), (16, "0.02", "16000.00"), (32, "0.03", "32000.00")]


def _line(value, index):
    return convert_block(value).splitlines()[index].split(", ")


def test_rule_is_documented_separator():
    assert rule() == RULE


@pytest.mark.parametrize("value, celsius, fahrenheit", TEMPERATURES)
def test_temperature_line(value, celsius, fahrenheit):
    left, right = _line(value, 0)
    assert left == f"{value}°F = {celsius}°C"
    assert right == f"{value}°C = {fahrenheit}°F"


@pytest.mark.parametrize("value, metres, feet", LENGTHS)
def test_length_line(value, metres, feet):
    left, right = _line(value, 1)
    assert left == f"{value}.00 ft. = {metres} M"
    assert right == f"{value}.00 M = {feet} ft."


@pytest.mark.parametrize("value, pounds, kilograms", WEIGHTS)
def test_weight_line(value, pounds, kilograms):
    left, right = _line(value, 2)
    assert left == f"{value}.00 Kg = {pounds} lb."
    assert right == f"{value}.00 lb. = {kilograms} Kg"


@pytest.mark.parametrize("value, nanoseconds, picoseconds", TIMES)
def test_time_line(value, nanoseconds, picoseconds):
    left, right = _line(value, 3)
    assert left == f"{value}.00 ps = {nanoseconds} ns"
    assert right == f"{value}.00 ns = {picoseconds} ps"


def test_convert_block_has_four_terminated_lines():
    block = convert_block(2.5)
    assert block.endswith("\n")
    assert len(block.splitlines()) == 4


def test_weight_result_is_cut_to_24_characters():
    weight_line = convert_block(1e30).splitlines()[2]
    tail = weight_line.split(" = ")[-1]
    assert len(tail) == 24
    assert not tail.endswith("Kg")


def test_main_prints_blocks_between_rules(capsys):
    assert main(["8", "16", "32"]) == 0
    out = capsys.readouterr().out
    lines = out.splitlines()
    assert len(lines) == 16
    assert [lines[i] for i in (0, 5, 10, 15)] == [RULE] * 4
    assert lines[1].startswith("8°F = ")
    assert lines[6].startswith("16°F = ")
    assert lines[11].startswith("32°F = ")
    assert out.endswith(f"{RULE}\n")


def test_main_without_arguments_prints_nothing(capsys):
    assert main([]) == 0
    assert capsys.readouterr().out == ""


def test_main_stops_at_invalid_number(capsys):
    assert main(["8", "x"]) == 1
    captured = capsys.readouterr()
    lines = captured.out.splitlines()
    assert len(lines) == 5
    assert lines[0] == RULE
    assert lines[1].startswith("8°F = ")
    assert captured.err.startswith("cf: ")
    assert '"x"' in captured.err