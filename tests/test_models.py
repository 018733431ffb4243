"""Tests for data types and the issuance error."""

import pytest

from acm_manager.exceptions import HostedZoneNotFoundError, IssueCertificateError
from acm_manager.models import Certificate, IssueCertificateResult, RecordSet, ValidationMethod


@pytest.mark.parametrize('value, expected', [
    ('DNS', ValidationMethod.DNS),
    ('dns', ValidationMethod.DNS),
    (' email ', ValidationMethod.EMAIL),
    (ValidationMethod.EMAIL, ValidationMethod.EMAIL),
])
def test_parse_validation_method(value, expected):
    assert ValidationMethod.parse(value) is expected


def test_parse_validation_method_rejects_unknown():
    with pytest.raises(ValueError, match='DNS or EMAIL'):
        ValidationMethod.parse('HTTP')


def test_certificate_to_dict():
    certificate = Certificate(
        arn='arn:aws:acm:ap-northeast-1:000000000000:certificate/cert-1',
        domain_name='test.example.com',
        region='ap-northeast-1',
        status='ISSUED',
        validation_method='DNS',
        validation_record_set=RecordSet(hosted_domain_name='example.com', name='_a.example.com', value='_b.acm'),
    )

    data = certificate.to_dict()

    assert data['domainName'] == 'test.example.com'
    assert data['validationRecordSet'] == {
        'hostedDomainName': 'example.com',
        'name': '_a.example.com',
        'value': '_b.acm',
        'type': 'CNAME',
        'ttl': None,
    }


def test_email_issue_result_to_dict():
    result = IssueCertificateResult(
        certificate_arn='arn:aws:acm:ap-northeast-1:000000000000:certificate/cert-1',
        domain_name='test.example.com',
        hosted_domain_name='example.com',
        validation_method='EMAIL',
    )

    assert result.to_dict()['hostedZoneId'] == ''
    assert result.to_dict()['certificateArn'].endswith('cert-1')


def test_issue_error_message_after_rollback():
    error = IssueCertificateError('arn-1', HostedZoneNotFoundError('example.com'))

    assert error.rolled_back
    assert str(error) == 'Public hosted zone not found: example.com; rolled back issued certificate arn-1'


def test_issue_error_message_keeps_both_failures():
    error = IssueCertificateError('arn-1', HostedZoneNotFoundError('example.com'),
                                  rollback_error=RuntimeError('access denied'))

    assert not error.rolled_back
    assert str(error) == (
        'Public hosted zone not found: example.com; '
        'failed to roll back issued certificate arn-1: access denied'
    )
