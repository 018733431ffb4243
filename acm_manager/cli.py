"""
Command line interface for listing, inspecting, issuing and deleting ACM certificates
"""
import logging
from typing import List, Optional

import typer
from botocore.exceptions import BotoCoreError, ClientError

from acm_manager.config import LOG_FORMAT, get_log_level
from acm_manager.exceptions import AcmManagerError
from acm_manager.manager import AcmManager
from acm_manager.models import Certificate, ValidationMethod

logger = logging.getLogger(__name__)

app = typer.Typer(
    help="Issue, inspect, list and delete ACM certificates validated through Route 53."
)

REGION_OPTION = typer.Option(
    None, "--region", help="AWS region of the certificates (default: ACM_REGION, AWS_REGION or us-east-1)."
)


@app.callback()
def main(verbose: bool = typer.Option(False, "--verbose", "-v", help="Enable debug logging.")):
    logging.basicConfig(level='DEBUG' if verbose else get_log_level(), format=LOG_FORMAT)


def _echo_certificates(certificates: List[Certificate]) -> None:
    typer.echo("DomainName\tStatus\tARN")
    for certificate in certificates:
        typer.echo(f"{certificate.domain_name}\t{certificate.status}\t{certificate.arn}")


def _fail(error: Exception) -> typer.Exit:
    logger.error(f"Error: {error}")
    return typer.Exit(code=1)


@app.command("list")
def list_command(
    status: Optional[List[str]] = typer.Option(
        None, "--status", help="Only list certificates in this status (repeatable)."
    ),
    region: Optional[str] = REGION_OPTION,
):
    """List certificates with their status."""
    try:
        certificates = AcmManager(region).list_certificates(status or None)
    except (ClientError, BotoCoreError, AcmManagerError) as error:
        raise _fail(error)
    _echo_certificates(certificates)


@app.command("get")
def get_command(
    arn: str = typer.Argument(..., help="ARN of the certificate."),
    region: Optional[str] = REGION_OPTION,
):
    """Show one certificate."""
    try:
        certificate = AcmManager(region).get_certificate(arn)
    except (ClientError, BotoCoreError, AcmManagerError) as error:
        raise _fail(error)
    _echo_certificates([certificate])

    record_set = certificate.validation_record_set
    if record_set is not None:
        typer.echo(f"ValidationRecord\t{record_set.type}\t{record_set.name}\t{record_set.value}")


@app.command("issue")
def issue_command(
    target_domain: str = typer.Argument(..., help="Domain name to certify."),
    hosted_domain: str = typer.Argument(..., help="Public hosted zone that receives the validation record."),
    method: str = typer.Option(
        "dns", "--method", help="Validation method: dns or email."
    ),
    region: Optional[str] = REGION_OPTION,
):
    """Request a certificate and publish its DNS validation record."""
    try:
        validation_method = ValidationMethod.parse(method)
    except ValueError as error:
        typer.echo(str(error), err=True)
        raise typer.Exit(code=2)

    try:
        result = AcmManager(region).issue_certificate(validation_method, target_domain, hosted_domain)
    except (ClientError, BotoCoreError, AcmManagerError) as error:
        raise _fail(error)

    typer.echo(f"ARN: {result.certificate_arn}")
    if result.hosted_zone_id:
        typer.echo(f"HostedZoneId: {result.hosted_zone_id}")
        typer.echo(f"ValidationRecordName: {result.validation_record_name}")
        typer.echo(f"ValidationRecordValue: {result.validation_record_value}")


@app.command("delete")
def delete_command(
    arn: str = typer.Argument(..., help="ARN of the certificate."),
    region: Optional[str] = REGION_OPTION,
):
    """Delete a certificate and its DNS validation record."""
    try:
        AcmManager(region).delete_certificate(arn)
    except (ClientError, BotoCoreError, AcmManagerError) as error:
        raise _fail(error)
    typer.echo(f"Deleted: {arn}")


if __name__ == '__main__':
    app()
