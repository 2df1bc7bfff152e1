"""Shared test configuration and fixtures.

Each test gets its own in-memory SQLite database (aiosqlite) with the full
schema, wrapped in a transaction that rolls back when the test ends.
"""

import uuid
from collections.abc import AsyncGenerator
from datetime import date
from decimal import Decimal

import pytest_asyncio
from httpx import ASGITransport, AsyncClient
from sqlalchemy.ext.asyncio import AsyncSession, create_async_engine
from sqlalchemy.pool import StaticPool

from hotelops.auth.jwt import create_access_token
from hotelops.database import Base, get_db
from hotelops.main import app
from hotelops.models import Invoice, Reservation, Room, User

# ---------------------------------------------------------------------------
# Per-test database: fresh in-memory SQLite, transactional rollback
# ---------------------------------------------------------------------------


@pytest_asyncio.fixture
async def test_engine():
    """Create an in-memory engine with all tables."""
    engine = create_async_engine(
        "sqlite+aiosqlite://",
        poolclass=StaticPool,
        connect_args={"check_same_thread": False},
    )
    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)
    yield engine
    await engine.dispose()


@pytest_asyncio.fixture
async def db_session(test_engine) -> AsyncGenerator[AsyncSession, None]:
    """Yield an async session wrapped in a transaction that always rolls back."""
    async with test_engine.connect() as connection:
        transaction = await connection.begin()
        session = AsyncSession(bind=connection, expire_on_commit=False)

        try:
            yield session
        finally:
            await session.close()
            await transaction.rollback()


@pytest_asyncio.fixture
async def client(db_session: AsyncSession) -> AsyncGenerator[AsyncClient, None]:
    """Provide an httpx AsyncClient wired to use the test DB session."""

    async def override_get_db() -> AsyncGenerator[AsyncSession, None]:
        yield db_session

    app.dependency_overrides[get_db] = override_get_db

    transport = ASGITransport(app=app)
    async with AsyncClient(transport=transport, base_url="http://testserver") as ac:
        yield ac

    app.dependency_overrides.clear()


# ---------------------------------------------------------------------------
# Convenience fixtures: users and tokens
# ---------------------------------------------------------------------------


async def _create_user(db_session: AsyncSession, role: str, is_active: bool = True) -> User:
    unique = uuid.uuid4().hex[:8]
    user = User(
        email=f"{role}-{unique}@test.com",
        name=f"Test {role.title()}",
        role=role,
        is_active=is_active,
    )
    db_session.add(user)
    await db_session.flush()
    return user


@pytest_asyncio.fixture
async def admin_user(db_session: AsyncSession) -> User:
    """An active hotel administrator."""
    return await _create_user(db_session, "admin")


@pytest_asyncio.fixture
async def client_user(db_session: AsyncSession) -> User:
    """An active customer account (no report access)."""
    return await _create_user(db_session, "client")


@pytest_asyncio.fixture
async def admin_headers(admin_user: User) -> dict[str, str]:
    """Return Authorization headers for the admin user."""
    token = create_access_token(str(admin_user.id), admin_user.role)
    return {"Authorization": f"Bearer {token}"}


# ---------------------------------------------------------------------------
# Convenience fixtures: a small hotel in January 2024
# ---------------------------------------------------------------------------


@pytest_asyncio.fixture
async def hotel(db_session: AsyncSession, client_user: User) -> dict[str, Room]:
    """Six rooms and a handful of reservations and invoices.

    Rooms: S1, S2, S3 (SIMPLE), D1, D2 (DOBLE), X1 (SUITE).
    For the window 2024-01-05..2024-01-10:
      - S1 booked 01-03..01-07 (3 days inside the window)
      - S2 booked 01-06..01-08 and again 01-07..01-09 (overlap: 4 distinct days)
      - D1 + D2 in one reservation 01-09..01-10 (2 rooms x 2 days)
      - X1 cancelled 01-05..01-10 (ignored)
      - S3 booked 01-20..01-22 (outside the window)
    Invoices: 500.00 on 01-05, 250.50 on 01-10, 999.00 on 01-11 (outside).
    """
    rooms = {
        "S1": Room(number="S1", room_type="SIMPLE", price_per_night=Decimal("90.00")),
        "S2": Room(number="S2", room_type="SIMPLE", price_per_night=Decimal("90.00")),
        "S3": Room(number="S3", room_type="SIMPLE", price_per_night=Decimal("90.00")),
        "D1": Room(number="D1", room_type="DOBLE", price_per_night=Decimal("140.00")),
        "D2": Room(number="D2", room_type="DOBLE", price_per_night=Decimal("140.00")),
        "X1": Room(number="X1", room_type="SUITE", price_per_night=Decimal("320.00")),
    }
    db_session.add_all(rooms.values())
    await db_session.flush()

    def _reservation(numbers: list[str], start: date, end: date, status: str = "confirmed") -> Reservation:
        return Reservation(
            customer_id=client_user.id,
            start_date=start,
            end_date=end,
            status=status,
            rooms=[rooms[n] for n in numbers],
        )

    first = _reservation(["S1"], date(2024, 1, 3), date(2024, 1, 7), "checked_out")
    group = _reservation(["D1", "D2"], date(2024, 1, 9), date(2024, 1, 10))
    db_session.add_all(
        [
            first,
            _reservation(["S2"], date(2024, 1, 6), date(2024, 1, 8)),
            _reservation(["S2"], date(2024, 1, 7), date(2024, 1, 9)),
            group,
            _reservation(["X1"], date(2024, 1, 5), date(2024, 1, 10), "cancelled"),
            _reservation(["S3"], date(2024, 1, 20), date(2024, 1, 22)),
        ]
    )
    await db_session.flush()

    db_session.add_all(
        [
            Invoice(reservation_id=first.id, issued_on=date(2024, 1, 5), total_amount=Decimal("500.00")),
            Invoice(reservation_id=group.id, issued_on=date(2024, 1, 10), total_amount=Decimal("250.50")),
            Invoice(reservation_id=group.id, issued_on=date(2024, 1, 11), total_amount=Decimal("999.00")),
        ]
    )
    await db_session.flush()
    return rooms
