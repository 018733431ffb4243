"""
Delete an ACM certificate and its DNS validation record
"""
import json
import logging
from typing import Dict, Any
from urllib.parse import unquote

from botocore.exceptions import ClientError

from acm_manager.config import get_log_level
from acm_manager.exceptions import CertificateNotFoundError, NotFoundError, AmbiguousHostedZoneError
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
    Lambda handler to delete a certificate

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

        certificate_arn = unquote(certificate_arn)

        logger.info(f"Deleting certificate {certificate_arn}")

        AcmManager().delete_certificate(certificate_arn)

        return cors_response(200, {
            'success': True,
            'message': f'Certificate {certificate_arn} deleted successfully',
            'data': {
                'certificateArn': certificate_arn
            }
        })

    except CertificateNotFoundError:
        return cors_response(404, {
            'success': False,
            'message': 'Certificate not found'
        })

    except (NotFoundError, AmbiguousHostedZoneError) as record_error:
        # Validation record could not be removed, the certificate is kept
        logger.error(f'Error deleting validation record: {str(record_error)}')

        return cors_response(409, {
            'success': False,
            'message': 'Validation record could not be deleted; certificate was not deleted',
            'error': str(record_error)
        })

    except ClientError as aws_error:
        return client_error_response(aws_error, 'deleting certificate')

    except Exception as error:
        return error_response(error, 'deleting certificate')
