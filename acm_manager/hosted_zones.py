"""
Route 53 hosted zone and validation record helpers
"""
import logging
from typing import Dict, Any, List

from acm_manager.config import VALIDATION_RECORD_TTL, VALIDATION_RECORD_TYPE
from acm_manager.exceptions import (
    AmbiguousHostedZoneError,
    HostedZoneNotFoundError,
    RecordSetNotFoundError,
)
from acm_manager.interfaces import (
    Route53API,
    Route53ChangeResourceRecordSetsAPI,
    Route53ListHostedZonesAPI,
)
from acm_manager.models import HostedZone, RecordSet

logger = logging.getLogger(__name__)


def list_hosted_zones(route53: Route53ListHostedZonesAPI) -> List[HostedZone]:
    """
    List all hosted zones

    Zones without a config block are reported as private so they are never
    picked as validation targets.
    """
    zones = []
    paginator = route53.get_paginator('list_hosted_zones')
    for page in paginator.paginate():
        for zone in page.get('HostedZones', []):
            config = zone.get('Config')
            zones.append(HostedZone(
                id=zone['Id'],
                name=zone['Name'],
                private=config is None or bool(config.get('PrivateZone', False)),
            ))

    return zones


def find_public_hosted_zone_id(route53: Route53ListHostedZonesAPI, domain_name: str) -> str:
    """
    Get the ID of the single public hosted zone named domain_name

    Args:
        route53: Route 53 client
        domain_name: Zone name, with or without the trailing dot

    Raises:
        HostedZoneNotFoundError: no public zone has that name
        AmbiguousHostedZoneError: more than one public zone has that name
    """
    zone_name = domain_name.rstrip('.') + '.'

    matches = [
        zone.id for zone in list_hosted_zones(route53)
        if zone.name == zone_name and not zone.private
    ]

    if not matches:
        raise HostedZoneNotFoundError(domain_name)
    if len(matches) > 1:
        raise AmbiguousHostedZoneError(domain_name, matches)

    return matches[0]


def _change_batch(action: str, name: str, record_type: str, ttl: int, value: str) -> Dict[str, Any]:
    return {
        'Changes': [
            {
                'Action': action,
                'ResourceRecordSet': {
                    'Name': name,
                    'Type': record_type,
                    'TTL': ttl,
                    'ResourceRecords': [
                        {'Value': value},
                    ],
                },
            },
        ],
    }


def create_validation_record(route53: Route53ChangeResourceRecordSetsAPI, hosted_zone_id: str,
                             name: str, value: str, ttl: int = VALIDATION_RECORD_TTL) -> None:
    """Create the CNAME record ACM checks for DNS validation"""
    route53.change_resource_record_sets(
        HostedZoneId=hosted_zone_id,
        ChangeBatch=_change_batch('CREATE', name, VALIDATION_RECORD_TYPE, ttl, value),
    )
    logger.info(f"Created validation record {name} in hosted zone {hosted_zone_id}")


def delete_validation_record(route53: Route53API, record_set: RecordSet) -> None:
    """
    Delete a validation record from the public hosted zone that owns it

    The record must exist under exactly its name; a missing record is an
    error, not a no-op.

    Raises:
        HostedZoneNotFoundError: the owning public zone does not exist
        AmbiguousHostedZoneError: more than one public zone has the owning name
        RecordSetNotFoundError: the record does not exist in the zone
    """
    hosted_zone_id = find_public_hosted_zone_id(route53, record_set.hosted_domain_name)

    response = route53.list_resource_record_sets(
        HostedZoneId=hosted_zone_id,
        StartRecordName=record_set.name,
        MaxItems='1',
    )
    existing = response.get('ResourceRecordSets', [])
    if len(existing) != 1 or existing[0].get('Name') != record_set.name:
        raise RecordSetNotFoundError(record_set.name)

    route53.change_resource_record_sets(
        HostedZoneId=hosted_zone_id,
        ChangeBatch=_change_batch(
            'DELETE',
            record_set.name,
            record_set.type or VALIDATION_RECORD_TYPE,
            existing[0].get('TTL', VALIDATION_RECORD_TTL),
            record_set.value,
        ),
    )
    logger.info(f"Deleted validation record {record_set.name} from hosted zone {hosted_zone_id}")
