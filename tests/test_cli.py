import random

import pytest

from pushswap.cli import main, run
from pushswap.parsing import InputError
from pushswap.stack import Machine, Operation


def replay(values, names):
    machine = Machine(values)
    for name in names:
        getattr(machine, name)()
    return machine


def test_no_arguments_prints_nothing(capsys):
    assert main([]) == 0
    captured = capsys.readouterr()
    assert captured.out == ""
    assert captured.err == ""


def test_two_values_in_one_argument(capsys):
    assert main(["2 1"]) == 0
    assert capsys.readouterr().out == "sa\n"


def test_sorted_input_prints_nothing(capsys):
    assert main(["1", "2", "3"]) == 0
    assert capsys.readouterr().out == ""


@pytest.mark.parametrize(
    "args",
    [
        [""],
        ["abc"],
        ["1", "1"],
        ["3 003"],
        ["2147483648"],
        ["-2147483649"],
        ["1", "+"],
        ["1-2"],
        ["   "],
        ["1", ""],
    ],
)
def test_invalid_input_reports_error(args, capsys):
    assert main(args) == 1
    captured = capsys.readouterr()
    assert captured.err == "Error\n"
    assert captured.out == ""


def test_output_sorts_the_input(capsys):
    values = random.Random(7).sample(range(-500, 500), 40)
    assert main([str(value) for value in values]) == 0
    names = capsys.readouterr().out.split()
    machine = replay(values, names)
    assert machine.a.values() == sorted(values)
    assert not machine.b


def test_run_returns_operations():
    operations = run(["3", "1", "2"])
    assert all(isinstance(op, Operation) for op in operations)
    machine = replay([3, 1, 2], [op.value for op in operations])
    assert machine.a.values() == [1, 2, 3]


def test_run_accepts_int_limits():
    operations = run(["2147483647 -2147483648"])
    assert operations == [Operation.SA]


def test_run_rejects_duplicates():
    with pytest.raises(InputError):
        run(["5", "+5"])


def test_run_rejects_too_many_arguments():
    with pytest.raises(InputError):
        run([str(value) for value in range(1025)])