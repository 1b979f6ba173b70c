"""
Tests for cli.py - Command line interface.
"""

import json
from unittest.mock import patch

import pytest

from medmorph import __version__
from medmorph.cli import format_info_text, format_segments_text, main
from medmorph.models import DecodeResult


class TestCLIBasics:
    """Tests for basic CLI functionality."""

    def test_version(self, capsys):
        """Test version flag."""
        result = main(['--version'])
        assert result == 0
        captured = capsys.readouterr()
        assert 'medmorph' in captured.out
        assert __version__ in captured.out

    def test_help(self, capsys):
        """Test help flag."""
        with pytest.raises(SystemExit) as exc_info:
            main(['--help'])
        assert exc_info.value.code == 0
        captured = capsys.readouterr()
        assert 'MedMorph' in captured.out

    def test_no_args(self, capsys):
        """Test running with no arguments."""
        result = main([])
        assert result == 1


class TestCLIOutput:
    """Tests for the output formats."""

    def test_simple_output(self, capsys):
        """Default output joins segments with '+'."""
        result = main(['Atherosclerosis'])
        assert result == 0
        captured = capsys.readouterr()
        assert captured.out.strip() == 'athero + sclerosis'

    def test_info_output(self, capsys):
        """Info output lists each morpheme with its kind."""
        result = main(['-i', 'cardioxitis'])
        assert result == 0
        out = capsys.readouterr().out
        assert '[Root] cardio-' in out
        assert '[Suffix] -itis: inflammation' in out
        assert '* x  (no match)' in out
        assert '1 character(s) not covered' in out

    def test_json_output(self, capsys):
        """Full output is the DecodeResult as JSON."""
        result = main(['-f', 'atherosclerosis'])
        assert result == 0
        data = json.loads(capsys.readouterr().out)
        assert data['normalized_term'] == 'atherosclerosis'
        assert [s['morpheme']['term'] for s in data['segments']] == ['athero-', '-sclerosis']
        assert data['unresolved_count'] == 0

    def test_debug_flag(self, capsys):
        assert main(['-d', 'osteo']) == 0
        assert capsys.readouterr().out.strip() == 'osteo'


class TestCLIErrorHandling:
    """Tests for error handling."""

    def test_only_punctuation(self, capsys):
        """Input that normalizes to nothing is an error."""
        result = main(['?!'])
        assert result == 1
        assert 'Error' in capsys.readouterr().err

    def test_processing_error(self, capsys):
        with patch('medmorph.cli.analyze', side_effect=RuntimeError("broken lexicon")):
            result = main(['carditis'])
        assert result == 1
        assert 'broken lexicon' in capsys.readouterr().err


class TestFormatting:
    """Tests for the text formatters."""

    def test_format_segments_text(self, small_lexicon):
        from medmorph.segment import segment
        result = DecodeResult.from_segments('x', 'hyperitis', segment('hyperitis', small_lexicon))
        assert format_segments_text(result) == 'hyper + itis'

    def test_format_info_text_empty(self):
        text = format_info_text(DecodeResult(original_term='', normalized_term=''))
        assert 'medical advice' in text
