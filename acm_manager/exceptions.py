"""
Exceptions raised by the certificate and hosted zone helpers
"""
from typing import Optional


class AcmManagerError(Exception):
    """Base class for all errors raised by acm_manager."""


class ConfigurationError(AcmManagerError):
    """An environment setting could not be parsed."""


class NotFoundError(AcmManagerError):
    """A remote resource does not exist."""


class CertificateNotFoundError(NotFoundError):
    def __init__(self, arn: str):
        super().__init__(f"Certificate not found: {arn}")
        self.arn = arn


class HostedZoneNotFoundError(NotFoundError):
    def __init__(self, domain_name: str):
        super().__init__(f"Public hosted zone not found: {domain_name}")
        self.domain_name = domain_name


class RecordSetNotFoundError(NotFoundError):
    def __init__(self, name: str):
        super().__init__(f"Target record set does not exist: {name}")
        self.name = name


class AmbiguousHostedZoneError(AcmManagerError):
    def __init__(self, domain_name: str, hosted_zone_ids):
        super().__init__(
            f"Multiple public hosted zones match {domain_name}: {', '.join(hosted_zone_ids)}"
        )
        self.domain_name = domain_name
        self.hosted_zone_ids = list(hosted_zone_ids)


class ValidationOptionsMissingError(AcmManagerError):
    def __init__(self, arn: str):
        super().__init__(f"Domain validation options do not exist for certificate: {arn}")
        self.arn = arn


class IssueCertificateError(AcmManagerError):
    """
    Issuance failed after the certificate was requested.

    The triggering error is chained as ``__cause__``. ``rolled_back`` tells
    whether the requested certificate was deleted again; when it was not,
    ``rollback_error`` holds the reason and both failures appear in the message.
    """

    def __init__(self, certificate_arn: str, error: Exception,
                 rollback_error: Optional[Exception] = None):
        self.certificate_arn = certificate_arn
        self.error = error
        self.rollback_error = rollback_error
        super().__init__(self._build_message())

    @property
    def rolled_back(self) -> bool:
        return self.rollback_error is None

    def _build_message(self) -> str:
        message = str(self.error)
        if self.rolled_back:
            return f"{message}; rolled back issued certificate {self.certificate_arn}"
        return (f"{message}; failed to roll back issued certificate "
                f"{self.certificate_arn}: {self.rollback_error}")
