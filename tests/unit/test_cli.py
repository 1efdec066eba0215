"""Unit tests for the gesture-recognize command."""

import json
import logging

import pytest

from gesture_lib import cli


@pytest.fixture(autouse=True)
def restore_root_logger():
    """configure_logging replaces root handlers; put them back afterwards."""
    root = logging.getLogger()
    handlers, level = list(root.handlers), root.level
    yield
    root.handlers[:] = handlers
    root.setLevel(level)


def _template_args(fixtures_dir):
    return [
        '-t', f'arrow={fixtures_dir / "arrow_template.json"}',
        '-t', f'circle={fixtures_dir / "circle_template.json"}',
    ]


def test_recognizes_arrow(fixtures_dir, capsys):
    status = cli.main(_template_args(fixtures_dir) + [str(fixtures_dir / "arrow_test.json")])
    assert status == 0
    assert capsys.readouterr().out.startswith("arrow. Match score: ")


def test_json_output(fixtures_dir, capsys):
    status = cli.main(_template_args(fixtures_dir) + ['--json', str(fixtures_dir / "arrow_test.json")])
    assert status == 0
    result = json.loads(capsys.readouterr().out)
    assert result['name'] == 'arrow'
    assert set(result) == {'name', 'score', 'distance'}


def test_degenerate_template_fails(fixtures_dir, tmp_path, capsys):
    line = tmp_path / "line.json"
    line.write_text(json.dumps([[i, 0] for i in range(20)]))
    status = cli.main(['-t', f'line={line}', str(fixtures_dir / "arrow_test.json")])
    assert status == 1
    assert capsys.readouterr().out == ''


def test_degenerate_template_substitute(fixtures_dir, tmp_path):
    line = tmp_path / "line.json"
    line.write_text(json.dumps([[i, 0] for i in range(20)]))
    status = cli.main(['-t', f'line={line}', '--degenerate', 'substitute',
                       str(fixtures_dir / "arrow_test.json")])
    assert status == 0


def test_missing_candidate_file(fixtures_dir, tmp_path):
    status = cli.main(_template_args(fixtures_dir) + [str(tmp_path / "missing.json")])
    assert status == 1


def test_bad_configuration(fixtures_dir):
    status = cli.main(_template_args(fixtures_dir) + ['--points', '1', str(fixtures_dir / "arrow_test.json")])
    assert status == 2


def test_template_argument_needs_name(fixtures_dir):
    with pytest.raises(SystemExit) as exc:
        cli.main(['-t', str(fixtures_dir / "arrow_template.json"), 'x.json'])
    assert exc.value.code == 2


def test_template_is_required():
    with pytest.raises(SystemExit) as exc:
        cli.main(['candidate.json'])
    assert exc.value.code == 2


def test_errors_are_logged_to_stderr(fixtures_dir, tmp_path, capsys):
    status = cli.main(_template_args(fixtures_dir) + [str(tmp_path / "missing.json")])
    captured = capsys.readouterr()
    assert status == 1
    assert captured.out == ''
    assert captured.err.startswith("ERROR: gesture_lib.cli: Recognition failed")


def test_configure_logging_replaces_handlers():
    cli.configure_logging('debug')
    cli.configure_logging('info')
    root = logging.getLogger()
    assert root.level == logging.INFO
    assert len(root.handlers) == 1


def test_log_level_is_case_insensitive(fixtures_dir):
    status = cli.main(_template_args(fixtures_dir) + ['--log-level', 'debug',
                                                      str(fixtures_dir / "arrow_test.json")])
    assert status == 0
    assert logging.getLogger().level == logging.DEBUG


def test_unknown_log_level_is_a_usage_error(fixtures_dir):
    with pytest.raises(SystemExit) as exc:
        cli.main(_template_args(fixtures_dir) + ['--log-level', 'loud', 'x.json'])
    assert exc.value.code == 2
