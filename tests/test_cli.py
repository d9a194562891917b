"""Tests for the guttr command line."""

import json
import os
from pathlib import Path

import pytest
from guttr.__main__ import main

FIXTURES_DIR = os.path.join(os.path.dirname(__file__), 'fixtures')
SITE_JSON = os.path.join(FIXTURES_DIR, 'site.json')


@pytest.fixture
def run(tmp_path: Path, monkeypatch: pytest.MonkeyPatch, capsys: pytest.CaptureFixture[str]):
    """Run main() isolated from any real .env and GUTTR_* variables; return (exit code, stdout, stderr)."""
    monkeypatch.delenv('GUTTR_CONFIG', raising=False)
    monkeypatch.delenv('GUTTR_SELECTOR', raising=False)
    no_env = str(tmp_path / 'none.env')

    def _run(*argv: str) -> tuple[int, str, str]:
        code = 0
        try:
            main(['--env-file', no_env, *argv])
        except SystemExit as e:
            code = e.code or 0
        out, err = capsys.readouterr()
        return code, out, err

    return _run


class TestPaddingCommand:
    def test_defaults(self, run) -> None:
        assert run('padding') == (0, '8px 8px 8px 8px\n', '')

    def test_options(self, run) -> None:
        code, out, _ = run('padding', '-g', '10', '-u', 'rem', '-m', 'top=0.25,bottom=0.25')
        assert code == 0
        assert out == '2.5rem 5rem 2.5rem 5rem\n'

    def test_bad_multiplier(self, run) -> None:
        code, out, err = run('padding', '-m', 'middle=1')
        assert code == 1
        assert out == ''
        assert err.startswith('Error: unknown side')


class TestGutterCommand:
    def test_json(self, run) -> None:
        code, out, _ = run('gutter', '-c', SITE_JSON, '-p', 'small:left=1', '--json')
        assert code == 0
        assert json.loads(out) == {
            'padding': '8px 8px 8px 8px',
            '@media(min-width: 768px)': {'padding': '8px 8px 8px 16px'},
            '@media(min-width: 1300px)': {'padding': '14px 14px 14px 28px'},
        }

    def test_base_multipliers(self, run) -> None:
        code, out, _ = run('gutter', '-b', 'bottom=0', '-j')
        assert code == 0
        assert json.loads(out) == {'padding': '8px 8px 0px 8px'}

    def test_css_with_selector(self, run) -> None:
        code, out, _ = run('gutter', '-c', SITE_JSON, '-s', '.card')
        assert code == 0
        assert out.splitlines()[:3] == ['.card {', '  padding: 8px 8px 8px 8px;', '}']
        assert '@media(min-width: 1300px) {' in out
        assert '@media(min-width: 768px)' not in out

    def test_config_and_selector_from_env(self, run, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv('GUTTR_CONFIG', SITE_JSON)
        monkeypatch.setenv('GUTTR_SELECTOR', 'main')
        code, out, _ = run('gutter')
        assert code == 0
        assert out.startswith('main {\n')
        assert '14px 14px 14px 14px' in out

    def test_env_file_loaded(
        self, tmp_path: Path, monkeypatch: pytest.MonkeyPatch, capsys: pytest.CaptureFixture[str]
    ) -> None:
        monkeypatch.delenv('GUTTR_CONFIG', raising=False)
        # set then delete so monkeypatch removes whatever the .env file adds
        monkeypatch.setenv('GUTTR_SELECTOR', '.unused')
        monkeypatch.delenv('GUTTR_SELECTOR')
        env_file = tmp_path / 'site.env'
        env_file.write_text('GUTTR_SELECTOR=.from-env\n')
        main(['--env-file', str(env_file), 'gutter'])
        out, err = capsys.readouterr()
        assert out.startswith('.from-env {\n')
        assert err == f'guttr: loaded {env_file}\n'

    def test_missing_config(self, run, tmp_path: Path) -> None:
        code, _, err = run('gutter', '-c', str(tmp_path / 'missing.json'))
        assert code == 1
        assert err.startswith('Error: ')

    def test_invalid_config(self, run, tmp_path: Path) -> None:
        bad = tmp_path / 'bad.json'
        bad.write_text('{"breakpoints": {"small": {"gutter": 1}}}')
        code, _, err = run('gutter', '-c', str(bad))
        assert code == 1
        assert 'mediaQuery' in err


class TestNoCommand:
    def test_prints_help_and_fails(self, run) -> None:
        code, out, _ = run()
        assert code == 1
        assert 'usage: guttr' in out
