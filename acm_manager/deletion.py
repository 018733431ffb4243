"""
Certificate deletion including its DNS validation record
"""
import logging

from acm_manager import certificates, hosted_zones
from acm_manager.interfaces import ACMAPI, Route53API

logger = logging.getLogger(__name__)


def delete_certificate(acm: ACMAPI, route53: Route53API, arn: str) -> None:
    """
    Delete a certificate, removing its DNS validation record first

    When the validation record cannot be removed the certificate is kept so
    the deletion can be retried.

    Raises:
        CertificateNotFoundError: ACM does not know the ARN
        HostedZoneNotFoundError, AmbiguousHostedZoneError, RecordSetNotFoundError:
            the validation record could not be located
    """
    certificate = certificates.get_certificate(acm, arn)

    if certificate.uses_dns_validation:
        if certificate.validation_record_set is None:
            # ACM has not published the record yet (or the request failed first),
            # so nothing was created in Route 53 and there is nothing to clean up
            logger.warning(f"Certificate {arn} uses DNS validation but has no validation record, skipping record cleanup")
        else:
            hosted_zones.delete_validation_record(route53, certificate.validation_record_set)

    certificates.remove_certificate(acm, arn)
