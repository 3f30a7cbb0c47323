"""
Test the console entry point end to end
"""
import sys
from pathlib import Path
sys.path.insert(0, str(Path(__file__).parent.parent))

import pytest

from main import main


def test_short_run_exits_cleanly(capsys):
    code = main(["--ticks", "2", "--delay", "0", "--no-clear", "--seed", "11"])

    out = capsys.readouterr().out
    assert code == 0
    assert "Tick 1:" in out and "Tick 2:" in out
    assert "Simulation ended." in out
    assert "\033[2J" not in out, "--no-clear should skip the terminal clear"


def test_frame_has_one_line_per_row(capsys):
    main(["--ticks", "1", "--delay", "0", "--no-clear", "--width", "4", "--height", "3",
          "--pikes", "1", "--carps", "2"])

    lines = capsys.readouterr().out.splitlines()
    frame = lines[1:4]
    assert all(len(line) == 8 for line in frame), "Each cell renders as two characters"
    assert sum(line.count("P") for line in frame) == 1
    assert sum(line.count("C") for line in frame) == 2


def test_overcrowded_pond_is_fatal(capsys):
    code = main(["--ticks", "1", "--delay", "0", "--width", "2", "--height", "2",
                 "--pikes", "3", "--carps", "3"])

    assert code == 1
    assert "Simulation ended." not in capsys.readouterr().out


@pytest.mark.parametrize("flag, value", [
    ("--width", "0"),
    ("--height", "-3"),
    ("--pikes", "-1"),
    ("--carps", "-5"),
    ("--ticks", "-2"),
])
def test_bad_sizes_and_counts_are_rejected(flag, value, capsys):
    """Invalid sizes stop at argument parsing with a usage error, not a traceback"""
    with pytest.raises(SystemExit) as excinfo:
        main(["--delay", "0", "--no-clear", flag, value])

    assert excinfo.value.code == 2
    assert flag in capsys.readouterr().err
