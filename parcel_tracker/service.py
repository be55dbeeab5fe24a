# parcel_tracker/service.py
from typing import List

from .logging_config import get_logger
from .models import Parcel, ParcelStatus
from .store import ParcelStore
from .utils import format_created_at, next_status

logger = get_logger(__name__)


class ParcelService:
    """Parcel workflow on top of a ParcelStore: register, ship, deliver."""

    def __init__(self, store: ParcelStore):
        self.store = store

    def register(self, client: int, address: str) -> Parcel:
        parcel = Parcel(
            client=client,
            status=ParcelStatus.REGISTERED,
            address=address,
            created_at=format_created_at(),
        )
        number = self.store.add(parcel)
        parcel = parcel.model_copy(update={"number": number})
        logger.info("registered parcel %s for client %s, address %r, created %s",
                    number, client, address, parcel.created_at)
        return parcel

    def client_parcels(self, client: int) -> List[Parcel]:
        parcels = self.store.get_by_client(client)
        logger.info("client %s has %d parcel(s)", client, len(parcels))
        return parcels

    def next_status(self, number: int) -> str:
        """Advance the parcel one step and return its (possibly unchanged) status."""
        parcel = self.store.get(number)
        new_status = next_status(parcel.status)
        if new_status is None:
            logger.info("parcel %s stays %s", number, parcel.status)
            return parcel.status
        self.store.set_status(number, new_status)
        logger.info("parcel %s: %s -> %s", number, parcel.status, new_status)
        return new_status

    def change_address(self, number: int, address: str) -> None:
        self.store.set_address(number, address)
        logger.info("address change requested for parcel %s: %r", number, address)

    def delete(self, number: int) -> None:
        self.store.delete(number)
        logger.info("delete requested for parcel %s", number)
