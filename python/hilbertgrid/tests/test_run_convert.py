"""Tests for the command line front end."""

import io
import json
import logging

import pytest

from hilbertgrid import log_utils
from hilbertgrid.render import draw_curve
from hilbertgrid.run_convert import DEMO_LINE, main
from conftest import make_grid


def test_demo(capsys):
    assert main(['demo']) == 0
    out = capsys.readouterr().out
    blocks = out.strip().split("\n\n")
    assert len(blocks) == 3
    assert blocks[0].split("\n")[0] == "v w z A L M P Q"
    # Both the round trip and the fixed grid give back the alphabet.
    expected = "\n".join(" ".join(DEMO_LINE[i:i + 16]) for i in range(0, 64, 16))
    assert blocks[1] == expected
    assert blocks[2] == expected


def test_to_line_from_file(tmp_path, capsys):
    path = tmp_path / 'grid.json'
    path.write_text(json.dumps(make_grid(4)))
    assert main(['to-line', str(path)]) == 0
    assert json.loads(capsys.readouterr().out) == [13, 14, 10, 9, 5, 1, 2, 6,
                                                   7, 3, 4, 8, 12, 11, 15, 16]


def test_to_grid_from_stdin(monkeypatch, capsys):
    monkeypatch.setattr('sys.stdin', io.StringIO('["c", "a", "b", "d"]'))
    assert main(['to-grid']) == 0
    assert json.loads(capsys.readouterr().out) == [['a', 'b'], ['c', 'd']]


@pytest.mark.parametrize("command,payload", [
    ('to-line', [[1, 2, 3], [4, 5, 6], [7, 8, 9]]),
    ('to-line', [1, 2, 3, 4]),
    ('to-line', {'a': 1}),
    ('to-grid', [1, 2, 3, 4, 5]),
    ('to-grid', {'a': 1}),
])
def test_malformed_input(tmp_path, capsys, command, payload):
    path = tmp_path / 'input.json'
    path.write_text(json.dumps(payload))
    assert main([command, str(path)]) == 1
    captured = capsys.readouterr()
    assert captured.out == ""
    assert captured.err.startswith("Error:")


def test_invalid_json(tmp_path, capsys):
    path = tmp_path / 'input.json'
    path.write_text('[1, 2,')
    assert main(['to-grid', str(path)]) == 1
    assert 'invalid JSON' in capsys.readouterr().err


@pytest.mark.parametrize("command", ["to-line", "to-grid"])
def test_unreadable_input(tmp_path, capsys, command):
    assert main([command, str(tmp_path / "missing.json")]) == 1
    assert main([command, str(tmp_path)]) == 1
    captured = capsys.readouterr()
    assert captured.out == ""
    assert captured.err.startswith("Error: cannot read input")


def test_draw_order(capsys):
    assert main(['draw', '--order', '2']) == 0
    assert capsys.readouterr().out == draw_curve(4) + "\n"


def test_draw_named_size(capsys):
    assert main(['draw', '--size', 'o1']) == 0
    assert capsys.readouterr().out == draw_curve(2) + "\n"


def test_draw_default(capsys):
    assert main(['draw']) == 0
    assert capsys.readouterr().out == draw_curve(8) + "\n"


def test_draw_unknown_size(capsys):
    assert main(['draw', '--size', 'huge']) == 1
    assert 'unknown size' in capsys.readouterr().err


def test_draw_negative_order(capsys):
    assert main(['draw', '--order', '-1']) == 1


def test_list_orders(capsys):
    assert main(['--list-orders']) == 0
    assert 'o3: 8x8' in capsys.readouterr().out


def test_bad_log_level(capsys):
    assert main(['--log-level', 'LOUD', 'demo']) == 1
    assert 'Invalid log level' in capsys.readouterr().err


def test_no_command(capsys):
    assert main([]) == 1


def test_configure_logging():
    log_utils.configure_logging('debug')
    assert logging.getLogger().level == logging.DEBUG
    log_utils.configure_logging('WARNING')
    assert logging.getLogger().level == logging.WARNING
    with pytest.raises(ValueError):
        log_utils.configure_logging('LOUD')


def test_log_format():
    stream = io.StringIO()
    log_utils.configure_logging('INFO', stream=stream)
    logging.getLogger('hilbertgrid.curve').warning('side 3 is not a power of two')
    assert stream.getvalue() == 'hilbertgrid: WARNING: side 3 is not a power of two\n'

    stream = io.StringIO()
    log_utils.configure_logging('DEBUG', stream=stream)
    logging.getLogger('hilbertgrid.curve').debug('Rejecting grid')
    assert stream.getvalue().startswith('hilbertgrid: DEBUG ')
    assert 'hilbertgrid.curve' in stream.getvalue()
    log_utils.configure_logging('WARNING')


@pytest.mark.parametrize("name,expected", [
    ('debug', logging.DEBUG),
    ('Info', logging.INFO),
    ('ERROR', logging.ERROR),
])
def test_parse_level(name, expected):
    assert log_utils.parse_level(name) == expected


@pytest.mark.parametrize("name", ['LOUD', 'basicConfig', ''])
def test_parse_level_rejects(name):
    with pytest.raises(ValueError):
        log_utils.parse_level(name)
