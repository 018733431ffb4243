"""
Runtime configuration read from the environment
"""
import os
from typing import Optional

from acm_manager.exceptions import ConfigurationError

DEFAULT_REGION = 'us-east-1'

# Seconds to wait after requesting a DNS-validated certificate before the
# validation record is read back.
DEFAULT_SETTLE_DELAY_SECONDS = 5

VALIDATION_RECORD_TTL = 300
VALIDATION_RECORD_TYPE = 'CNAME'

LOG_FORMAT = '%(asctime)s - %(levelname)s - %(name)s - %(message)s'


def get_region(region: Optional[str] = None) -> str:
    """Resolve the ACM region: explicit value, ACM_REGION, AWS_REGION, then the default"""
    return region or os.environ.get('ACM_REGION') or os.environ.get('AWS_REGION') or DEFAULT_REGION


def get_settle_delay() -> float:
    """Settling delay before describing a freshly requested certificate"""
    raw = os.environ.get('ACM_VALIDATION_SETTLE_SECONDS')
    if raw is None or raw == '':
        return DEFAULT_SETTLE_DELAY_SECONDS

    try:
        delay = float(raw)
    except ValueError:
        raise ConfigurationError(f"ACM_VALIDATION_SETTLE_SECONDS must be a number, got {raw!r}")

    if delay < 0:
        raise ConfigurationError(f"ACM_VALIDATION_SETTLE_SECONDS must not be negative, got {raw!r}")
    return delay


def get_log_level() -> str:
    return os.environ.get('LOG_LEVEL', 'INFO').upper()
