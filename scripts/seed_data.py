"""Seed the database with a small hotel: rooms, reservations, and invoices.

The data covers the cases the occupancy report has to get right: stays that
cross the reporting window, overlapping bookings of the same room,
multi-room reservations, and cancelled/no-show bookings that must not count.

Run from the project root:
    python -m scripts.seed_data
"""

import asyncio
from datetime import date, timedelta
from decimal import Decimal

from sqlalchemy import delete

from hotelops.auth.jwt import create_access_token
from hotelops.database import Base, async_session_factory, engine
from hotelops.models import Invoice, Reservation, Room, User, reservation_rooms

# ---------------------------------------------------------------------------
# Seed data definitions
# ---------------------------------------------------------------------------

ADMIN_USER = {"email": "admin@hotelops.local", "name": "Front Office Admin", "role": "admin"}

CUSTOMERS = [
    {"email": "lucia.fernandez@example.com", "name": "Lucía Fernández"},
    {"email": "mateo.rojas@example.com", "name": "Mateo Rojas"},
    {"email": "valentina.cruz@example.com", "name": "Valentina Cruz"},
]

# number, type, price per night, capacity
ROOMS = [
    ("101", "SIMPLE", Decimal("90.00"), 1),
    ("102", "SIMPLE", Decimal("90.00"), 1),
    ("103", "SIMPLE", Decimal("95.00"), 2),
    ("104", "SIMPLE", Decimal("95.00"), 2),
    ("201", "DOBLE", Decimal("140.00"), 2),
    ("202", "DOBLE", Decimal("140.00"), 2),
    ("203", "DOBLE", Decimal("155.00"), 3),
    ("301", "SUITE", Decimal("320.00"), 4),
]

# customer index, room numbers, first day offset from today, nights, status
RESERVATIONS = [
    (0, ["101"], -12, 4, "checked_out"),
    (1, ["201", "202"], -8, 3, "checked_out"),  # family booking, two rooms
    (2, ["301"], -5, 7, "checked_in"),  # crosses today
    (0, ["102"], -3, 5, "checked_in"),
    (1, ["102"], -1, 2, "confirmed"),  # overlaps the stay above in room 102
    (2, ["103", "104", "203"], 2, 2, "confirmed"),  # group booking
    (0, ["201"], 4, 3, "pending"),
    (1, ["202"], -6, 2, "cancelled"),
    (2, ["104"], -2, 1, "no_show"),
]


async def seed() -> None:
    """Recreate the schema and populate it with sample data.

    Destructive: every existing reservation, invoice, room, and user is deleted
    first so the sample numbers are reproducible.
    """
    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)

    async with async_session_factory() as session:
        for table in (Invoice.__table__, reservation_rooms, Reservation.__table__, Room.__table__, User.__table__):
            await session.execute(delete(table))
        await session.flush()

        # ------------------------------------------------------------------
        # 1. Users
        # ------------------------------------------------------------------
        admin = User(**ADMIN_USER)
        session.add(admin)
        customers = [User(role="client", **data) for data in CUSTOMERS]
        session.add_all(customers)
        await session.flush()
        print(f"✅ Created admin {admin.email} and {len(customers)} customers")

        # ------------------------------------------------------------------
        # 2. Rooms
        # ------------------------------------------------------------------
        rooms: dict[str, Room] = {}
        for number, room_type, price, capacity in ROOMS:
            rooms[number] = Room(number=number, room_type=room_type, price_per_night=price, capacity=capacity)
        session.add_all(rooms.values())
        await session.flush()
        print(f"✅ Created {len(rooms)} rooms")

        # ------------------------------------------------------------------
        # 3. Reservations and invoices
        # ------------------------------------------------------------------
        today = date.today()
        invoice_count = 0
        for customer_idx, numbers, offset, nights, status in RESERVATIONS:
            start = today + timedelta(days=offset)
            end = start + timedelta(days=nights - 1)
            booked = [rooms[n] for n in numbers]
            total = sum((room.price_per_night for room in booked), Decimal("0")) * nights

            reservation = Reservation(
                customer_id=customers[customer_idx].id,
                start_date=start,
                end_date=end,
                status=status,
                total_price=total,
                rooms=booked,
            )
            session.add(reservation)
            await session.flush()

            if status in ("checked_out", "checked_in"):
                session.add(Invoice(reservation_id=reservation.id, issued_on=start, total_amount=total))
                invoice_count += 1

            print(f"   🛏  {', '.join(numbers)} {start}..{end} [{status}]")

        await session.commit()

        token = create_access_token(str(admin.id), admin.role)

        print()
        print("=" * 60)
        print("📊 Seed Summary")
        print("=" * 60)
        print(f"   Rooms:         {len(rooms)}")
        print(f"   Reservations:  {len(RESERVATIONS)}")
        print(f"   Invoices:      {invoice_count}")
        print("=" * 60)
        print("Admin access token (expires per JWT_ACCESS_TOKEN_EXPIRE_MINUTES):")
        print(token)

    await engine.dispose()


if __name__ == "__main__":
    asyncio.run(seed())
