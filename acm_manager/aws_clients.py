"""
AWS client initialization utilities
"""
import boto3
from typing import Optional

from acm_manager.config import get_region


def get_acm_client(region: Optional[str] = None):
    """Get ACM client for the configured region"""
    return boto3.client('acm', region_name=get_region(region))


def get_route53_client():
    """Get Route 53 client (always uses us-east-1 for global service)"""
    return boto3.client('route53', region_name='us-east-1')
