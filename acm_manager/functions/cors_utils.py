"""
CORS response and request helpers for the certificate Lambda functions
"""
import json
import logging
from typing import Dict, Any, Optional

from botocore.exceptions import ClientError

logger = logging.getLogger(__name__)

# CORS headers
CORS_HEADERS = {
    'Content-Type': 'application/json',
    'Access-Control-Allow-Origin': '*',
    'Access-Control-Allow-Headers': 'Content-Type,X-Amz-Date,Authorization,X-Api-Key,X-Amz-Security-Token',
    'Access-Control-Allow-Methods': 'GET,POST,DELETE,OPTIONS',
    'Access-Control-Allow-Credentials': 'true'
}


def cors_response(status_code: int, body: Dict[str, Any]) -> Dict[str, Any]:
    """
    Generate a CORS-enabled response

    Args:
        status_code: HTTP status code
        body: Response body dictionary

    Returns:
        Lambda response dictionary with CORS headers
    """
    return {
        'statusCode': status_code,
        'headers': CORS_HEADERS,
        'body': json.dumps(body, default=str)
    }


def handle_cors_preflight() -> Dict[str, Any]:
    """Lambda response for an OPTIONS preflight request"""
    return {
        'statusCode': 200,
        'headers': CORS_HEADERS,
        'body': ''
    }


def client_error_response(aws_error: ClientError, action: str) -> Dict[str, Any]:
    """
    Log an AWS error and turn it into a 500 response

    Args:
        aws_error: Error raised by a boto3 client
        action: What was being done, e.g. 'getting certificate'
    """
    error_code = aws_error.response.get('Error', {}).get('Code', 'Unknown')
    error_message = aws_error.response.get('Error', {}).get('Message', str(aws_error))

    logger.error(f'AWS error {action}: {error_code} - {error_message}')

    return cors_response(500, {
        'success': False,
        'error': error_message,
        'details': {
            'errorCode': error_code,
            'errorName': type(aws_error).__name__
        }
    })


def error_response(error: Exception, action: str) -> Dict[str, Any]:
    """Log an unexpected error and turn it into a 500 response"""
    logger.error(f'Error {action}: {str(error)}')
    logger.error(f'Error type: {type(error).__name__}')

    return cors_response(500, {
        'success': False,
        'error': str(error),
        'details': {
            'errorName': type(error).__name__
        }
    })


def extract_request_data(event: Dict[str, Any]) -> Optional[Dict[str, Any]]:
    """
    Extract and parse request body data

    Raises:
        ValueError: the body is not valid JSON
    """
    body = event.get('body')
    if not body:
        return None

    try:
        return json.loads(body)
    except json.JSONDecodeError as e:
        raise ValueError(f"Invalid JSON in request body: {str(e)}")


def get_path_parameter(event: Dict[str, Any], param_name: str) -> Optional[str]:
    path_params = event.get('pathParameters') or {}
    return path_params.get(param_name)


def get_query_parameter(event: Dict[str, Any], param_name: str) -> Optional[str]:
    query_params = event.get('queryStringParameters') or {}
    return query_params.get(param_name)
