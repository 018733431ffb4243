"""
Region-bound entry point combining the ACM and Route 53 helpers
"""
from typing import List, Optional, Sequence, Union

from acm_manager import certificates, deletion, issuance
from acm_manager.aws_clients import get_acm_client, get_route53_client
from acm_manager.config import get_region
from acm_manager.models import (
    Certificate,
    CertificateSummary,
    IssueCertificateResult,
    ValidationMethod,
)


class AcmManager:
    """ACM and Route 53 clients for one region."""

    def __init__(self, region: Optional[str] = None, acm_client=None, route53_client=None):
        self.region = get_region(region)
        self.acm_client = acm_client or get_acm_client(self.region)
        self.route53_client = route53_client or get_route53_client()

    def list_certificate_summaries(self, statuses: Optional[Sequence[str]] = None) -> List[CertificateSummary]:
        return certificates.list_certificate_summaries(self.acm_client, statuses)

    def list_certificates(self, statuses: Optional[Sequence[str]] = None) -> List[Certificate]:
        return certificates.list_certificates(self.acm_client, statuses)

    def get_certificate(self, arn: str) -> Certificate:
        return certificates.get_certificate(self.acm_client, arn)

    def issue_certificate(self, validation_method: Union[str, ValidationMethod], target_domain: str,
                          hosted_domain: str, settle_delay: Optional[float] = None) -> IssueCertificateResult:
        return issuance.issue_certificate(
            self.acm_client, self.route53_client, validation_method,
            target_domain, hosted_domain, settle_delay=settle_delay,
        )

    def delete_certificate(self, arn: str) -> None:
        deletion.delete_certificate(self.acm_client, self.route53_client, arn)
