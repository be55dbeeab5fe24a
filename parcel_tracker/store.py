# parcel_tracker/store.py
"""
Data access for parcel records.

Each call opens its own session and closes it before returning. Address
changes and deletion only apply to parcels still in the registered status;
for any other status they succeed without touching the row.
"""

from typing import List

from sqlalchemy import delete, select, update
from sqlalchemy.orm import Session, sessionmaker

from .exceptions import ParcelNotFoundError
from .logging_config import get_logger
from .models import Parcel, ParcelRecord, ParcelStatus, status_value

logger = get_logger(__name__)

REGISTERED = ParcelStatus.REGISTERED.value


class ParcelStore:
    def __init__(self, session_factory: sessionmaker):
        self._session_factory = session_factory

    def add(self, parcel: Parcel) -> int:
        db = self._session_factory()
        try:
            with db.begin():
                record = ParcelRecord(
                    client=parcel.client,
                    status=status_value(parcel.status),
                    address=parcel.address,
                    created_at=parcel.created_at,
                )
                db.add(record)
                db.flush()
                number = record.number
            logger.debug("added parcel %s for client %s", number, parcel.client)
            return number
        finally:
            db.close()

    def get(self, number: int) -> Parcel:
        db = self._session_factory()
        try:
            return Parcel.model_validate(self._fetch(db, number))
        finally:
            db.close()

    def get_by_client(self, client: int) -> List[Parcel]:
        db = self._session_factory()
        try:
            rows = db.scalars(select(ParcelRecord).where(ParcelRecord.client == client)).all()
            return [Parcel.model_validate(r) for r in rows]
        finally:
            db.close()

    def set_status(self, number: int, status: str) -> None:
        """Overwrite the status. Any string is accepted; a missing number is a no-op."""
        db = self._session_factory()
        try:
            with db.begin():
                db.execute(
                    update(ParcelRecord)
                    .where(ParcelRecord.number == number)
                    .values(status=status_value(status))
                )
            logger.debug("parcel %s status set to %s", number, status_value(status))
        finally:
            db.close()

    def set_address(self, number: int, address: str) -> None:
        """
        Change the address of a registered parcel.

        Raises ParcelNotFoundError if the parcel does not exist. For a parcel
        in any other status the call succeeds and changes nothing.
        """
        db = self._session_factory()
        try:
            with db.begin():
                self._fetch(db, number)
                result = db.execute(
                    update(ParcelRecord)
                    .where(ParcelRecord.number == number, ParcelRecord.status == REGISTERED)
                    .values(address=address)
                    .execution_options(synchronize_session=False)
                )
                changed = result.rowcount
            if changed:
                logger.debug("parcel %s address changed", number)
            else:
                logger.debug("parcel %s is not registered, address kept", number)
        finally:
            db.close()

    def delete(self, number: int) -> None:
        """
        Delete a registered parcel.

        Raises ParcelNotFoundError if the parcel does not exist. A parcel in
        any other status is left in place and the call still succeeds.
        """
        db = self._session_factory()
        try:
            with db.begin():
                self._fetch(db, number)
                result = db.execute(
                    delete(ParcelRecord)
                    .where(ParcelRecord.number == number, ParcelRecord.status == REGISTERED)
                    .execution_options(synchronize_session=False)
                )
                changed = result.rowcount
            if changed:
                logger.debug("parcel %s deleted", number)
            else:
                logger.debug("parcel %s is not registered, kept", number)
        finally:
            db.close()

    @staticmethod
    def _fetch(db: Session, number: int) -> ParcelRecord:
        record = db.get(ParcelRecord, number)
        if record is None:
            raise ParcelNotFoundError(number)
        return record
