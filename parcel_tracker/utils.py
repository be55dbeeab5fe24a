# parcel_tracker/utils.py
from datetime import datetime, timezone

from .models import ParcelStatus, status_value

_NEXT_STATUS = {
    ParcelStatus.REGISTERED.value: ParcelStatus.SENT.value,
    ParcelStatus.SENT.value: ParcelStatus.DELIVERED.value,
}


def format_created_at(moment: datetime | None = None) -> str:
    """RFC 3339 UTC timestamp to the second, e.g. 2024-05-01T10:00:00Z."""
    if moment is None:
        moment = datetime.now(timezone.utc)
    elif moment.tzinfo is not None:
        moment = moment.astimezone(timezone.utc)
    return moment.strftime("%Y-%m-%dT%H:%M:%SZ")


def next_status(status) -> str | None:
    # delivered and unknown statuses have nowhere to go
    return _NEXT_STATUS.get(status_value(status))
