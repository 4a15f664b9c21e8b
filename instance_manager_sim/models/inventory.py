"""
Instance inventory models
"""

from typing import List, Optional

from .base import ApiModel


class InstanceInformation(ApiModel):
    """One managed instance as reported by the inventory listing"""

    platform_type: Optional[str] = None  # Linux | Windows
    ping_status: Optional[str] = None  # Online | Offline
    instance_id: Optional[str] = None
    is_latest_version: Optional[bool] = None


class InstanceInformationStringFilter(ApiModel):
    """Attribute filter: a record passes if any value occurs in it"""

    key: str
    values: List[str] = []


class DescribeInstanceInformationRequest(ApiModel):
    filters: List[InstanceInformationStringFilter] = []
    next_token: Optional[str] = None


class DescribeInstanceInformationResponse(ApiModel):
    instance_information_list: List[InstanceInformation] = []
    # None marks the last page
    next_token: Optional[str] = None
