import boto3
import pytest
from botocore.stub import Stubber

from stubs import REGION


@pytest.fixture(autouse=True)
def aws_environment(monkeypatch):
    """Keep tests away from real credentials and local configuration."""
    monkeypatch.setenv('AWS_ACCESS_KEY_ID', 'testing')
    monkeypatch.setenv('AWS_SECRET_ACCESS_KEY', 'testing')
    monkeypatch.setenv('AWS_DEFAULT_REGION', REGION)
    for name in ('ACM_REGION', 'AWS_REGION', 'ACM_VALIDATION_SETTLE_SECONDS', 'LOG_LEVEL'):
        monkeypatch.delenv(name, raising=False)


@pytest.fixture
def acm_client():
    return boto3.client('acm', region_name=REGION)


@pytest.fixture
def route53_client():
    return boto3.client('route53', region_name='us-east-1')


@pytest.fixture
def acm_stub(acm_client):
    with Stubber(acm_client) as stubber:
        yield stubber


@pytest.fixture
def route53_stub(route53_client):
    with Stubber(route53_client) as stubber:
        yield stubber
