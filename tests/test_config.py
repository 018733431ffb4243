"""Tests for environment configuration."""

import pytest

from acm_manager import config
from acm_manager.exceptions import ConfigurationError


def test_region_defaults_to_us_east_1():
    assert config.get_region() == 'us-east-1'


def test_region_prefers_explicit_value(monkeypatch):
    monkeypatch.setenv('ACM_REGION', 'eu-west-1')
    assert config.get_region('ap-northeast-1') == 'ap-northeast-1'


def test_region_prefers_acm_region_over_aws_region(monkeypatch):
    monkeypatch.setenv('AWS_REGION', 'eu-central-1')
    assert config.get_region() == 'eu-central-1'

    monkeypatch.setenv('ACM_REGION', 'eu-west-1')
    assert config.get_region() == 'eu-west-1'


def test_settle_delay_default():
    assert config.get_settle_delay() == 5


def test_settle_delay_from_environment(monkeypatch):
    monkeypatch.setenv('ACM_VALIDATION_SETTLE_SECONDS', '0')
    assert config.get_settle_delay() == 0


@pytest.mark.parametrize('raw', ['soon', '-1'])
def test_settle_delay_rejects_invalid_values(monkeypatch, raw):
    monkeypatch.setenv('ACM_VALIDATION_SETTLE_SECONDS', raw)
    with pytest.raises(ConfigurationError):
        config.get_settle_delay()


def test_log_level(monkeypatch):
    assert config.get_log_level() == 'INFO'
    monkeypatch.setenv('LOG_LEVEL', 'debug')
    assert config.get_log_level() == 'DEBUG'
