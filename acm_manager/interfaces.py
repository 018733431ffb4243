"""
Narrow views of the ACM and Route 53 clients

Each helper declares only the client operations it calls, so a boto3 client
or any test double providing those methods can be passed in.
"""
from typing import Dict, Any, List, Protocol


class Paginator(Protocol):
    def paginate(self, **kwargs: Any) -> Any: ...


class ACMListCertificatesAPI(Protocol):
    def get_paginator(self, operation_name: str) -> Paginator: ...


class ACMDescribeCertificateAPI(Protocol):
    def describe_certificate(self, *, CertificateArn: str) -> Dict[str, Any]: ...


class ACMDeleteCertificateAPI(Protocol):
    def delete_certificate(self, *, CertificateArn: str) -> Dict[str, Any]: ...


class ACMRequestCertificateAPI(Protocol):
    def request_certificate(self, *, DomainName: str, ValidationMethod: str,
                            DomainValidationOptions: List[Dict[str, str]]) -> Dict[str, Any]: ...


class ACMAPI(ACMListCertificatesAPI, ACMDescribeCertificateAPI,
             ACMDeleteCertificateAPI, ACMRequestCertificateAPI, Protocol):
    """Every ACM operation used by the orchestrators."""


class Route53ListHostedZonesAPI(Protocol):
    def get_paginator(self, operation_name: str) -> Paginator: ...


class Route53ListResourceRecordSetsAPI(Protocol):
    def list_resource_record_sets(self, *, HostedZoneId: str, StartRecordName: str,
                                  MaxItems: str) -> Dict[str, Any]: ...


class Route53ChangeResourceRecordSetsAPI(Protocol):
    def change_resource_record_sets(self, *, HostedZoneId: str,
                                    ChangeBatch: Dict[str, Any]) -> Dict[str, Any]: ...


class Route53API(Route53ListHostedZonesAPI, Route53ListResourceRecordSetsAPI,
                 Route53ChangeResourceRecordSetsAPI, Protocol):
    """Every Route 53 operation used by the orchestrators."""
