"""
Certificate directory helpers over the ACM API
"""
import logging
from typing import Dict, Any, List, Optional, Sequence

from botocore.exceptions import BotoCoreError, ClientError

from acm_manager.exceptions import AcmManagerError, CertificateNotFoundError
from acm_manager.interfaces import (
    ACMAPI,
    ACMDeleteCertificateAPI,
    ACMDescribeCertificateAPI,
    ACMListCertificatesAPI,
    ACMRequestCertificateAPI,
)
from acm_manager.models import Certificate, CertificateSummary, RecordSet, ValidationMethod

logger = logging.getLogger(__name__)


def _is_not_found(error: ClientError) -> bool:
    return error.response.get('Error', {}).get('Code') == 'ResourceNotFoundException'


def _client_region(client: Any) -> Optional[str]:
    meta = getattr(client, 'meta', None)
    return getattr(meta, 'region_name', None)


def list_certificate_summaries(acm: ACMListCertificatesAPI,
                               statuses: Optional[Sequence[str]] = None) -> List[CertificateSummary]:
    """
    List certificate summaries from ACM

    Args:
        acm: ACM client
        statuses: Optional certificate statuses to filter on (e.g. ISSUED)

    Returns:
        One summary per certificate, across all result pages
    """
    params: Dict[str, Any] = {}
    if statuses:
        params['CertificateStatuses'] = list(statuses)

    summaries = []
    paginator = acm.get_paginator('list_certificates')
    for page in paginator.paginate(**params):
        for summary in page.get('CertificateSummaryList', []):
            summaries.append(CertificateSummary(
                arn=summary['CertificateArn'],
                domain_name=summary.get('DomainName', ''),
            ))

    return summaries


def _validation_details(detail: Dict[str, Any]):
    """Validation method and record of the first domain validation option"""
    options = detail.get('DomainValidationOptions') or []
    if not options:
        return None, None

    option = options[0]
    method = option.get('ValidationMethod')
    record = option.get('ResourceRecord')
    if method != ValidationMethod.DNS.value or not record:
        return method, None

    return method, RecordSet(
        hosted_domain_name=option.get('ValidationDomain', ''),
        name=record['Name'],
        value=record['Value'],
        type=record['Type'],
    )


def get_certificate(acm: ACMDescribeCertificateAPI, arn: str) -> Certificate:
    """
    Get certificate details from ACM

    Raises:
        CertificateNotFoundError: ACM does not know the ARN
    """
    try:
        response = acm.describe_certificate(CertificateArn=arn)
    except ClientError as error:
        if _is_not_found(error):
            raise CertificateNotFoundError(arn) from error
        raise

    detail = response['Certificate']
    method, record_set = _validation_details(detail)

    return Certificate(
        arn=arn,
        domain_name=detail.get('DomainName', ''),
        region=_client_region(acm),
        type=detail.get('Type'),
        status=detail.get('Status'),
        failure_reason=detail.get('FailureReason'),
        validation_method=method,
        validation_record_set=record_set,
    )


def list_certificates(acm: ACMAPI, statuses: Optional[Sequence[str]] = None) -> List[Certificate]:
    """
    List certificates with full details

    A certificate that cannot be described is logged and left out; the rest
    of the listing is still returned.
    """
    certificates = []
    for summary in list_certificate_summaries(acm, statuses):
        try:
            certificates.append(get_certificate(acm, summary.arn))
        except (ClientError, BotoCoreError, AcmManagerError) as error:
            logger.warning(f"Failed to get details for certificate {summary.arn}: {error}")

    return certificates


def request_certificate(acm: ACMRequestCertificateAPI, validation_method: ValidationMethod,
                        target_domain: str, hosted_domain: str) -> str:
    """Request a public certificate and return its ARN"""
    response = acm.request_certificate(
        DomainName=target_domain,
        ValidationMethod=validation_method.value,
        DomainValidationOptions=[
            {
                'DomainName': target_domain,
                'ValidationDomain': hosted_domain,
            },
        ],
    )
    arn = response['CertificateArn']
    logger.info(f"Requested {validation_method.value} validated certificate for {target_domain}: {arn}")
    return arn


def remove_certificate(acm: ACMDeleteCertificateAPI, arn: str) -> None:
    """
    Delete a certificate from ACM without touching its validation record

    Raises:
        CertificateNotFoundError: ACM does not know the ARN
    """
    try:
        acm.delete_certificate(CertificateArn=arn)
    except ClientError as error:
        if _is_not_found(error):
            raise CertificateNotFoundError(arn) from error
        raise

    logger.info(f"Deleted certificate {arn}")
