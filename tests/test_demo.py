import io
import re

import pytest

from bintree.demo import main, run_demo


def _output(number: int) -> str:
    buffer = io.StringIO()
    run_demo(number, buffer)
    return buffer.getvalue()


def _results(text: str) -> dict[int, str]:
    pattern = re.compile(r"^.* (-?\d+)(?: a \w+| full)?: (\S+)$")
    found = {}
    for line in text.splitlines():
        match = pattern.match(line)
        if match and not line.startswith(" ") and "(" not in line.split(":")[0]:
            found[int(match.group(1))] = match.group(2)
    return found


@pytest.mark.parametrize("number", range(19))
def test_every_demo_draws_root_first(number):
    assert "(098)" in _output(number).splitlines()[0]


def test_create_demo_draws_seven_nodes():
    text = _output(0)
    assert text.count("(") == 7
    assert len(text.splitlines()) == 3


def test_insert_demos_print_two_trees_separated():
    for number in (1, 2):
        first, second = _output(number).split("\n\n")
        assert first.count("(") == 3
        assert second.count("(") == 5


def test_delete_demo_only_draws():
    assert _output(3) == "".join(_output(4).splitlines(keepends=True)[:-3])


def test_is_leaf_and_is_root():
    leaf = _results(_output(4))
    assert leaf[98] == "0" and leaf[402] == "1"
    root = _results(_output(5))
    assert root[98] == "1" and root[402] == "0"


def _numbers(number: int) -> list[int]:
    return [int(line) for line in _output(number).splitlines() if re.fullmatch(r"-?\d+", line)]


def test_traversals():
    pre, ino, post = _numbers(6), _numbers(7), _numbers(8)
    assert sorted(pre) == sorted(ino) == sorted(post)
    assert len(pre) == 7
    assert pre[0] == 98
    assert post[-1] == 98
    assert ino == sorted(ino)


def test_measurements_of_leaf():
    assert _results(_output(9))[54] == "0"
    assert _results(_output(11))[54] == "1"
    assert _results(_output(12))[54] == "1"
    assert _results(_output(13))[54] == "0"


def test_depth_of_root_is_zero():
    assert _results(_output(10))[98] == "0"


def test_size_matches_drawing():
    text = _output(11)
    tree_part = "".join(text.splitlines(keepends=True)[:-3])
    assert _results(text)[98] == str(tree_part.count("("))


def test_measure_demos_share_the_tree():
    drawings = {"".join(_output(n).splitlines(keepends=True)[:-3]) for n in range(9, 14)}
    assert len(drawings) == 1


def test_balance_has_explicit_sign():
    lines = [line for line in _output(14).splitlines() if line.startswith("Balance")]
    assert len(lines) == 3
    assert all(re.search(r": [+-]\d+$", line) for line in lines)


def test_is_full():
    full = _results(_output(15))
    assert full[12] == "1"
    assert full[98] == "0"


def test_is_perfect_sequence():
    values = re.findall(r"Perfect: (\d)", _output(16))
    assert values[0] == "1"
    assert values[1:] == ["0", "0"]


def test_sibling_of_root_is_none():
    assert "Sibling of 98: (nil)" in _output(17).splitlines()


def test_uncle_lines():
    lines = _output(18).splitlines()
    assert "Uncle of 12: (nil)" in lines
    assert "Uncle of 54: 128" in lines


def test_run_demo_rejects_unknown_number():
    with pytest.raises(ValueError):
        run_demo(19, io.StringIO())


def test_main_matches_run_demo(capsys):
    assert main(["7"]) == 0
    assert capsys.readouterr().out == _output(7)


def test_main_rejects_bad_number():
    with pytest.raises(SystemExit):
        main(["42"])