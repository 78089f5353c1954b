"""
Helper Functions

Contains utility functions used throughout the application.
"""

from datetime import datetime, timezone
from typing import Dict


def get_user_identity(request_obj=None) -> Dict[str, str]:
    """Extract user identity information from request."""
    if request_obj is None:
        return {'user_ip': 'system', 'session_id': None}

    user_ip = getattr(request_obj, 'remote_addr', None) or 'unknown'

    return {
        'user_ip': user_ip,
        'session_id': None  # Future: session tracking
    }


def utc_timestamp() -> str:
    return datetime.now(timezone.utc).isoformat()
