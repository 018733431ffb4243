"""
List ACM certificates with their details
"""
import json
import logging
from typing import Dict, Any, List, Optional

from botocore.exceptions import ClientError

from acm_manager.config import get_log_level
from acm_manager.functions.cors_utils import (
    client_error_response,
    cors_response,
    error_response,
    get_query_parameter,
    handle_cors_preflight,
)
from acm_manager.manager import AcmManager

# Configure logging
logger = logging.getLogger()
logger.setLevel(get_log_level())


def parse_statuses(raw: Optional[str]) -> List[str]:
    """Split a comma separated status filter such as 'ISSUED,PENDING_VALIDATION'"""
    if not raw:
        return []
    return [status.strip().upper() for status in raw.split(',') if status.strip()]


def lambda_handler(event: Dict[str, Any], context: Any) -> Dict[str, Any]:
    """
    Lambda handler to list certificates from ACM

    Certificates that cannot be described are left out of the response.

    Args:
        event: Lambda event dictionary
        context: Lambda context object

    Returns:
        API Gateway response with CORS headers
    """
    logger.info(f"Event: {json.dumps(event)}")

    # Handle OPTIONS request for CORS preflight
    if event.get('httpMethod') == 'OPTIONS':
        return handle_cors_preflight()

    try:
        statuses = parse_statuses(get_query_parameter(event, 'status'))

        certificates = AcmManager().list_certificates(statuses or None)

        logger.info(f"Found {len(certificates)} certificates")

        return cors_response(200, {
            'success': True,
            'data': {
                'certificates': [certificate.to_dict() for certificate in certificates],
                'count': len(certificates)
            }
        })

    except ClientError as aws_error:
        return client_error_response(aws_error, 'listing certificates')

    except Exception as error:
        return error_response(error, 'listing certificates')
