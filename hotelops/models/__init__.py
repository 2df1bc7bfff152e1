"""SQLAlchemy models for HotelOps.

All models are imported here so that Base.metadata knows every table before
``create_all`` runs. If you add a new model, import it in this file.
"""

from hotelops.models.invoice import Invoice
from hotelops.models.reservation import Reservation, reservation_rooms
from hotelops.models.room import Room
from hotelops.models.user import User

__all__ = [
    "Invoice",
    "Reservation",
    "Room",
    "User",
    "reservation_rooms",
]
