"""
Issue, inspect, list and delete ACM certificates with Route 53 DNS validation
"""
from acm_manager.certificates import (
    get_certificate,
    list_certificate_summaries,
    list_certificates,
)
from acm_manager.deletion import delete_certificate
from acm_manager.exceptions import (
    AcmManagerError,
    AmbiguousHostedZoneError,
    CertificateNotFoundError,
    ConfigurationError,
    HostedZoneNotFoundError,
    IssueCertificateError,
    NotFoundError,
    RecordSetNotFoundError,
    ValidationOptionsMissingError,
)
from acm_manager.issuance import issue_certificate
from acm_manager.manager import AcmManager
from acm_manager.models import (
    Certificate,
    CertificateSummary,
    HostedZone,
    IssueCertificateResult,
    RecordSet,
    ValidationMethod,
)

__version__ = '0.1.0'
