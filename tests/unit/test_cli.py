"""
Unit tests for the CLI and configuration modules.
"""

from pathlib import Path
from types import SimpleNamespace
from unittest.mock import patch

import pytest

from copd_prs.cli import parse_args
from copd_prs.config import LookupConfig
from copd_prs.exceptions import ConfigurationError


class TestCLI:
    """Test the CLI module."""

    def test_parse_args_minimal(self):
        """Test parse_args with no arguments."""
        with patch('sys.argv', ['copd-prs']):
            args = parse_args()

            assert args.queries == []
            assert args.data_source == 'copd_data.json'
            assert args.output_dir == Path('output')
            assert args.timeout == 30.0
            assert args.default_beta == 0.2
            assert not args.interactive
            assert not args.no_report
            assert not args.save_chart
            assert not args.open_browser
            assert not args.verbose

    def test_parse_args_full(self):
        """Test parse_args with all arguments."""
        with patch('sys.argv', [
            'copd-prs',
            'HHIP',
            'rs7671167',
            '--data-source', 'https://example.org/copd_data.json',
            '--timeout', '5',
            '--default-beta', '0.1',
            '--output-dir', 'custom_output',
            '--interactive',
            '--no-report',
            '--save-chart',
            '--open-browser',
            '--verbose',
        ]):
            args = parse_args()

            assert args.queries == ['HHIP', 'rs7671167']
            assert args.data_source == 'https://example.org/copd_data.json'
            assert args.timeout == 5.0
            assert args.default_beta == 0.1
            assert args.output_dir == Path('custom_output')
            assert args.interactive
            assert args.no_report
            assert args.save_chart
            assert args.open_browser
            assert args.verbose

    def test_parse_args_explicit_argv(self):
        args = parse_args(['ABC', '--no-report'])
        assert args.queries == ['ABC']
        assert args.no_report


class TestLookupConfig:
    """Test LookupConfig validation."""

    def test_from_args(self):
        args = parse_args(['--data-source', 'data/copd_data.json', '--no-report', '--save-chart'])
        config = LookupConfig.from_args(args)

        assert config.data_source == 'data/copd_data.json'
        assert config.source_name == 'copd_data.json'
        assert not config.write_report
        assert config.save_chart
        assert config.output_dir == Path('output')

    def test_from_partial_namespace(self):
        config = LookupConfig.from_args(SimpleNamespace(data_source='copd_data.json'))
        assert config.timeout == 30.0
        assert config.write_report

    def test_url_source_name(self):
        config = LookupConfig(data_source='https://example.org/data/copd_data.json')
        assert config.source_name == 'copd_data.json'

    @pytest.mark.parametrize("kwargs", [
        {"data_source": "  "},
        {"timeout": 0},
        {"timeout": -1},
        {"default_beta": -0.2},
    ])
    def test_invalid_values(self, kwargs):
        with pytest.raises(ConfigurationError):
            LookupConfig(**kwargs)
