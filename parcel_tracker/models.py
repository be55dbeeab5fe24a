# parcel_tracker/models.py
import enum

from pydantic import BaseModel, ConfigDict, field_validator
from sqlalchemy import Column, Integer, Text

from .db import Base


class ParcelStatus(str, enum.Enum):
    """
    Known parcel statuses.

    Flow: REGISTERED -> SENT -> DELIVERED. Only a REGISTERED parcel may
    change its address or be deleted.
    """
    REGISTERED = "registered"
    SENT = "sent"
    DELIVERED = "delivered"


def status_value(status) -> str:
    return status.value if isinstance(status, enum.Enum) else status


# row of the parcel table
class ParcelRecord(Base):
    __tablename__ = "parcel"
    number = Column(Integer, primary_key=True, autoincrement=True)
    client = Column(Integer, index=True)
    status = Column(Text)
    address = Column(Text)
    created_at = Column(Text)

    def __repr__(self):
        return f"<ParcelRecord(number={self.number}, client={self.client}, status='{self.status}')>"


class Parcel(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    number: int = 0   # 0 until the store assigns one
    client: int
    status: str = ParcelStatus.REGISTERED.value
    address: str
    created_at: str

    @field_validator("status", mode="before")
    @classmethod
    def _plain_status(cls, v):
        return status_value(v)
