"""
huematch Analysis ID Utilities
Generate unique analysis IDs for log correlation.
"""
import uuid
from datetime import datetime


def generate_analysis_id() -> str:
    """
    Generate a unique analysis ID for tracking.

    Returns:
        Unique analysis ID string
    """
    timestamp = datetime.now().strftime("%Y%m%d%H%M%S")
    short_uuid = uuid.uuid4().hex[:8]
    return f"clr-{timestamp}-{short_uuid}"

