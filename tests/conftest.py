"""Shared test fixtures."""
from typing import Generator, Optional

import pytest
from sqlalchemy.pool import StaticPool
from sqlmodel import Session, SQLModel, create_engine

# Import all models so SQLModel.metadata knows about them
from straid.models.activity import Activity, GPSFix, Lap  # noqa: F401
from straid.models.timeseries import (  # noqa: F401
    CardioSample,
    ElevationSample,
    KinematicsSample,
    PowerSample,
)


def make_activity(
    *,
    id: Optional[int] = None,
    name: str = "Morning Run",
    type: Optional[str] = "Run",
    date: Optional[str] = "2024-01-15T07:30:00",
    distance: Optional[float] = 10000.0,
    moving_time: Optional[float] = 3000.0,
    tags: Optional[str] = None,
    average_speed: Optional[float] = 3.33,
    average_power: Optional[float] = 250.0,
    average_heart_rate: Optional[float] = 148.0,
    average_cadence: Optional[float] = 172.0,
    ftp: Optional[float] = 280.0,
) -> Activity:
    return Activity(
        id=id,
        user_id="athlete-1",
        name=name,
        description=None,
        type=type,
        date=date,
        distance=distance,
        moving_time=moving_time,
        average_speed=average_speed,
        average_power=average_power,
        average_heart_rate=average_heart_rate,
        average_cadence=average_cadence,
        ftp=ftp,
        tags=tags,
        calories=650.0,
        total_elevation_gain=42.0,
    )


@pytest.fixture(name="engine")
def engine_fixture():
    """In-memory SQLite engine. Tables recreated fresh for each test."""
    engine = create_engine(
        "sqlite:///:memory:",
        connect_args={"check_same_thread": False},
        poolclass=StaticPool,
    )
    SQLModel.metadata.create_all(engine)
    yield engine
    SQLModel.metadata.drop_all(engine)


@pytest.fixture(name="test_session")
def test_session_fixture(engine) -> Generator[Session, None, None]:
    """Provides a DB session connected to in-memory SQLite."""
    with Session(engine) as session:
        yield session


@pytest.fixture(name="ten_day_block")
def ten_day_block_fixture(test_session: Session):
    """2024-01-01 .. 2024-01-10, one 1000 m / 300 s run per day."""
    for day in range(1, 11):
        test_session.add(
            make_activity(
                id=day,
                name=f"Run {day}",
                date=f"2024-01-{day:02d}T07:00:00",
                distance=1000.0,
                moving_time=300.0,
            )
        )
    test_session.commit()


@pytest.fixture(name="streams_activity")
def streams_activity_fixture(test_session: Session) -> Activity:
    """
    One activity with four power samples (t=100..103). Cardio is missing at
    t=101, kinematics only exists at t=100, elevation only at t=103.
    Two laps (start 100, 102) and three GPS fixes (one without power).
    """
    activity = make_activity(id=7, date="2024-03-02T09:00:00")
    test_session.add(activity)
    for ts, watts in [(100, 240.0), (101, 250.0), (102, 260.0), (103, 270.0)]:
        test_session.add(PowerSample(activity_id=7, timestamp=ts, total_power=watts))
    for ts, hr in [(100, 140.0), (102, 150.0), (103, 152.0)]:
        test_session.add(CardioSample(activity_id=7, timestamp=ts, heart_rate=hr))
    test_session.add(
        KinematicsSample(
            activity_id=7, timestamp=100, speed=3.2, cadence=170.0,
            distance=3.2, stride_length=1.13,
        )
    )
    test_session.add(ElevationSample(activity_id=7, timestamp=103, elevation=55.5))
    test_session.add(Lap(activity_id=7, lap_number=2, timestamp=102, trigger=0))
    test_session.add(Lap(activity_id=7, lap_number=1, timestamp=100, trigger=0))
    for ts, lat, lng in [(103, 48.8570, 2.3510), (100, 48.8566, 2.3522), (105, 48.8575, 2.3500)]:
        test_session.add(GPSFix(activity_id=7, timestamp=ts, lat=lat, lng=lng))
    # Samples of another activity at the same timestamps must not leak in
    test_session.add(make_activity(id=8, date="2024-03-03T09:00:00"))
    test_session.add(PowerSample(activity_id=8, timestamp=100, total_power=999.0))
    test_session.add(CardioSample(activity_id=8, timestamp=101, heart_rate=199.0))
    test_session.commit()
    test_session.refresh(activity)
    return activity
