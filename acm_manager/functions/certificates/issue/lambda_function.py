"""
Issue an ACM certificate, publishing its DNS validation record when needed
"""
import json
import logging
from typing import Dict, Any

from botocore.exceptions import ClientError

from acm_manager.config import get_log_level
from acm_manager.exceptions import IssueCertificateError
from acm_manager.functions.cors_utils import (
    client_error_response,
    cors_response,
    error_response,
    extract_request_data,
    handle_cors_preflight,
)
from acm_manager.manager import AcmManager
from acm_manager.models import ValidationMethod

# Configure logging
logger = logging.getLogger()
logger.setLevel(get_log_level())


def lambda_handler(event: Dict[str, Any], context: Any) -> Dict[str, Any]:
    """
    Lambda handler to issue a certificate

    Expects a JSON body with domainName, hostedDomainName and an optional
    validationMethod (DNS by default).

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
        try:
            request_data = extract_request_data(event)
        except ValueError as error:
            return cors_response(400, {
                'success': False,
                'message': str(error)
            })

        if not request_data:
            return cors_response(400, {
                'success': False,
                'message': 'Request body is required'
            })

        domain_name = request_data.get('domainName')
        hosted_domain_name = request_data.get('hostedDomainName')

        if not domain_name or not hosted_domain_name:
            return cors_response(400, {
                'success': False,
                'message': 'Missing required fields: domainName and hostedDomainName are required'
            })

        try:
            validation_method = ValidationMethod.parse(request_data.get('validationMethod', 'DNS'))
        except ValueError as error:
            return cors_response(400, {
                'success': False,
                'message': str(error)
            })

        logger.info(f"Issuing {validation_method.value} validated certificate for {domain_name} in {hosted_domain_name}")

        result = AcmManager().issue_certificate(validation_method, domain_name, hosted_domain_name)

        return cors_response(201, {
            'success': True,
            'message': f'Certificate for {domain_name} requested successfully',
            'data': {
                'certificate': result.to_dict()
            }
        })

    except IssueCertificateError as issue_error:
        logger.error(f'Error issuing certificate: {str(issue_error)}')

        return cors_response(500, {
            'success': False,
            'message': 'Failed to issue certificate',
            'error': str(issue_error),
            'details': {
                'certificateArn': issue_error.certificate_arn,
                'rolledBack': issue_error.rolled_back,
                'rollbackError': str(issue_error.rollback_error) if issue_error.rollback_error else None,
                'errorName': type(issue_error.error).__name__
            }
        })

    except ClientError as aws_error:
        return client_error_response(aws_error, 'issuing certificate')

    except Exception as error:
        return error_response(error, 'issuing certificate')
