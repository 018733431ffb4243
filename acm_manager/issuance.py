"""
Certificate issuance with DNS validation record provisioning
"""
import logging
import time
from typing import Optional, Union

from botocore.exceptions import BotoCoreError, ClientError

from acm_manager import certificates, hosted_zones
from acm_manager.config import get_settle_delay
from acm_manager.exceptions import (
    AcmManagerError,
    ConfigurationError,
    IssueCertificateError,
    ValidationOptionsMissingError,
)
from acm_manager.interfaces import ACMAPI, Route53API
from acm_manager.models import IssueCertificateResult, ValidationMethod

logger = logging.getLogger(__name__)


def rollback_issued_certificate(acm: ACMAPI, arn: str) -> None:
    """Delete a certificate whose issuance did not complete"""
    logger.info(f"Rolling back issued certificate {arn}")
    certificates.remove_certificate(acm, arn)


def _rollback(acm: ACMAPI, arn: str, error: Exception) -> IssueCertificateError:
    rollback_error = None
    try:
        rollback_issued_certificate(acm, arn)
    except (ClientError, BotoCoreError, AcmManagerError) as exc:
        logger.error(f"Failed to roll back issued certificate {arn}: {exc}")
        rollback_error = exc

    return IssueCertificateError(arn, error, rollback_error)


def issue_certificate(acm: ACMAPI, route53: Route53API,
                      validation_method: Union[str, ValidationMethod],
                      target_domain: str, hosted_domain: str,
                      settle_delay: Optional[float] = None) -> IssueCertificateResult:
    """
    Issue a certificate for target_domain

    With EMAIL validation the certificate is only requested. With DNS
    validation the validation record is read back after a settling delay and
    published as a CNAME in the public hosted zone named hosted_domain. Any
    failure after the request deletes the certificate again.

    Args:
        acm: ACM client
        route53: Route 53 client
        validation_method: DNS or EMAIL
        target_domain: Domain name to certify
        hosted_domain: Public hosted zone that receives the validation record
        settle_delay: Seconds to wait before describing the certificate;
            defaults to ACM_VALIDATION_SETTLE_SECONDS

    Returns:
        The issuance result; for EMAIL only the ARN and request fields are set

    Raises:
        ConfigurationError: the settling delay is invalid (nothing requested)
        ClientError: the certificate request was rejected (nothing to roll back)
        IssueCertificateError: a later step failed; carries the rollback outcome
    """
    method = ValidationMethod.parse(validation_method)
    if settle_delay is None:
        settle_delay = get_settle_delay()
    elif settle_delay < 0:
        raise ConfigurationError(f"settle_delay must not be negative, got {settle_delay}")

    arn = certificates.request_certificate(acm, method, target_domain, hosted_domain)

    result = IssueCertificateResult(
        certificate_arn=arn,
        domain_name=target_domain,
        hosted_domain_name=hosted_domain,
        validation_method=method.value,
    )

    if method is ValidationMethod.EMAIL:
        return result

    # ACM fills in the validation record asynchronously
    time.sleep(settle_delay)

    try:
        certificate = certificates.get_certificate(acm, arn)
        if certificate.validation_record_set is None:
            raise ValidationOptionsMissingError(arn)

        record_set = certificate.validation_record_set
        hosted_zone_id = hosted_zones.find_public_hosted_zone_id(route53, hosted_domain)
        hosted_zones.create_validation_record(route53, hosted_zone_id, record_set.name, record_set.value)
    except (ClientError, BotoCoreError, AcmManagerError) as error:
        raise _rollback(acm, arn, error) from error

    result.hosted_zone_id = hosted_zone_id
    result.validation_record_name = record_set.name
    result.validation_record_value = record_set.value

    logger.info(f"Issued certificate {arn} for {target_domain} with validation record in {hosted_zone_id}")
    return result
