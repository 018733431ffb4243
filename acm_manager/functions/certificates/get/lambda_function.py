"""
Get ACM certificate details
"""
import json
import logging
from typing import Dict, Any
from urllib.parse import unquote

from botocore.exceptions import ClientError

from acm_manager.config import get_log_level
from acm_manager.exceptions import CertificateNotFoundError
from acm_manager.functions.cors_utils import (
    client_error_response,
    cors_response,
    error_response,
    get_path_parameter,
    handle_cors_preflight,
)
from acm_manager.manager import AcmManager

# Configure logging
logger = logging.getLogger()
logger.setLevel(get_log_level())


def lambda_handler(event: Dict[str, Any], context: Any) -> Dict[str, Any]:
    """
    Lambda handler to get certificate details from ACM

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
        certificate_arn = get_path_parameter(event, 'arn')

        if not certificate_arn:
            return cors_response(400, {
                'success': False,
                'message': 'Certificate ARN is required'
            })

        # URL decode the ARN (in case it was encoded)
        certificate_arn = unquote(certificate_arn)

        logger.info(f"Getting certificate details for ARN: {certificate_arn}")

        certificate = AcmManager().get_certificate(certificate_arn)

        return cors_response(200, {
            'success': True,
            'data': {
                'certificate': certificate.to_dict()
            }
        })

    except CertificateNotFoundError:
        return cors_response(404, {
            'success': False,
            'message': 'Certificate not found'
        })

    except ClientError as aws_error:
        if aws_error.response.get('Error', {}).get('Code') == 'InvalidArnException':
            return cors_response(400, {
                'success': False,
                'message': 'Invalid certificate ARN format'
            })
        return client_error_response(aws_error, 'getting certificate')

    except Exception as error:
        return error_response(error, 'getting certificate')
