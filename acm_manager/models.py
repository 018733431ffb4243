"""
Data types for certificates, validation records and issuance results
"""
from dataclasses import dataclass
from enum import Enum
from typing import Dict, Any, Optional, Union


class ValidationMethod(str, Enum):
    DNS = 'DNS'
    EMAIL = 'EMAIL'

    @classmethod
    def parse(cls, value: Union[str, 'ValidationMethod']) -> 'ValidationMethod':
        """Accept an enum member or a case-insensitive name such as 'dns'"""
        if isinstance(value, cls):
            return value
        try:
            return cls(str(value).strip().upper())
        except ValueError:
            raise ValueError(f"Validation method must be DNS or EMAIL, got {value!r}")


@dataclass
class CertificateSummary:
    arn: str
    domain_name: str

    def to_dict(self) -> Dict[str, Any]:
        return {'arn': self.arn, 'domainName': self.domain_name}


@dataclass
class RecordSet:
    """A DNS validation record and the hosted domain that owns it."""

    hosted_domain_name: str
    name: str
    value: str
    type: str = 'CNAME'
    ttl: Optional[int] = None

    def to_dict(self) -> Dict[str, Any]:
        return {
            'hostedDomainName': self.hosted_domain_name,
            'name': self.name,
            'value': self.value,
            'type': self.type,
            'ttl': self.ttl,
        }


@dataclass
class Certificate:
    """
    Snapshot of a certificate as described by ACM.

    ``validation_record_set`` is only set for DNS-validated certificates whose
    validation record has been published by ACM.
    """

    arn: str
    domain_name: str
    region: Optional[str] = None
    type: Optional[str] = None
    status: Optional[str] = None
    failure_reason: Optional[str] = None
    validation_method: Optional[str] = None
    validation_record_set: Optional[RecordSet] = None

    @property
    def uses_dns_validation(self) -> bool:
        return self.validation_method == ValidationMethod.DNS.value

    def to_dict(self) -> Dict[str, Any]:
        return {
            'arn': self.arn,
            'domainName': self.domain_name,
            'region': self.region,
            'type': self.type,
            'status': self.status,
            'failureReason': self.failure_reason,
            'validationMethod': self.validation_method,
            'validationRecordSet': (
                self.validation_record_set.to_dict() if self.validation_record_set else None
            ),
        }


@dataclass
class HostedZone:
    id: str
    name: str
    private: bool


@dataclass
class IssueCertificateResult:
    certificate_arn: str
    domain_name: str
    hosted_domain_name: str
    validation_method: str
    hosted_zone_id: str = ''
    validation_record_name: str = ''
    validation_record_value: str = ''

    def to_dict(self) -> Dict[str, Any]:
        return {
            'certificateArn': self.certificate_arn,
            'domainName': self.domain_name,
            'hostedDomainName': self.hosted_domain_name,
            'validationMethod': self.validation_method,
            'hostedZoneId': self.hosted_zone_id,
            'validationRecordName': self.validation_record_name,
            'validationRecordValue': self.validation_record_value,
        }
