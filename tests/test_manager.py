"""Tests for the region-bound AcmManager."""

from unittest.mock import patch

from acm_manager.manager import AcmManager

from stubs import REGION, certificate_arn, describe_certificate_response


def test_manager_builds_clients_for_region():
    manager = AcmManager('eu-west-1')

    assert manager.region == 'eu-west-1'
    assert manager.acm_client.meta.region_name == 'eu-west-1'
    assert manager.route53_client.meta.service_model.service_name == 'route53'


def test_manager_region_from_environment(monkeypatch):
    monkeypatch.setenv('ACM_REGION', 'ap-southeast-2')

    assert AcmManager().acm_client.meta.region_name == 'ap-southeast-2'


def test_manager_get_certificate(acm_client, acm_stub, route53_client):
    arn = certificate_arn('cert-1')
    acm_stub.add_response('describe_certificate',
                          describe_certificate_response(arn, 'test.example.com'),
                          {'CertificateArn': arn})
    manager = AcmManager(REGION, acm_client=acm_client, route53_client=route53_client)

    certificate = manager.get_certificate(arn)

    assert certificate.arn == arn
    assert certificate.region == REGION


def test_manager_delegates_issue_and_delete(acm_client, route53_client):
    manager = AcmManager(REGION, acm_client=acm_client, route53_client=route53_client)

    with patch('acm_manager.manager.issuance.issue_certificate') as issue, \
            patch('acm_manager.manager.deletion.delete_certificate') as delete:
        manager.issue_certificate('DNS', 'test.example.com', 'example.com', settle_delay=0)
        manager.delete_certificate('arn-1')

    issue.assert_called_once_with(acm_client, route53_client, 'DNS', 'test.example.com', 'example.com',
                                  settle_delay=0)
    delete.assert_called_once_with(acm_client, route53_client, 'arn-1')
