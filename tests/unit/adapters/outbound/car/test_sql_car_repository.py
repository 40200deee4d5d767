"""Unit tests for SqlCarRepository using SQLite in-memory."""

import pytest
from sqlalchemy import create_engine
from sqlalchemy.exc import OperationalError
from sqlalchemy.orm import sessionmaker
from sqlalchemy.pool import StaticPool

from autolist.adapters.outbound.car.models import Base
from autolist.adapters.outbound.car.sql_car_repository import SqlCarRepository
from autolist.domain.entities.car import Condition


@pytest.fixture
def sqlite_engine():
    """Create SQLite in-memory engine for testing."""
    engine = create_engine(
        "sqlite:///:memory:",
        echo=False,
        connect_args={"check_same_thread": False},
        poolclass=StaticPool,
    )
    Base.metadata.create_all(engine)
    return engine


@pytest.fixture
def repository(sqlite_engine, monkeypatch):
    """Create SQL repository with SQLite in-memory database for testing."""
    SessionLocal = sessionmaker(
        autocommit=False, autoflush=False, expire_on_commit=False, bind=sqlite_engine
    )

    def get_test_db_session():
        return SessionLocal()

    monkeypatch.setattr(
        "autolist.adapters.outbound.car.sql_car_repository.get_db_session",
        get_test_db_session,
    )

    return SqlCarRepository()


def test_save_and_find_round_trip(repository, make_car):
    """Test that a saved car can be read back with all embedded fields."""
    saved = repository.save(make_car(lat=40.0, lon=-74.0, condition=Condition.NEW))

    found = repository.find_by_id(saved.id)

    assert found is not None
    assert found.id == saved.id
    assert found.condition == Condition.NEW
    assert found.details.manufacturer.code == 101
    assert found.details.manufacturer.name == "Chevrolet"
    assert found.details.model == "Impala"
    assert found.details.mileage == 32280
    assert found.location.lat == 40.0
    assert found.location.lon == -74.0
    assert found.location.address is None
    assert found.created_at is not None
    assert found.created_at.tzinfo is not None


def test_save_without_id_assigns_id(repository, make_car):
    """Test that the database assigns distinct ids."""
    first = repository.save(make_car())
    second = repository.save(make_car())

    assert first.id is not None
    assert second.id is not None
    assert first.id != second.id


def test_save_existing_updates_in_place(repository, make_car):
    """Test that saving a car with a known id updates it."""
    saved = repository.save(make_car(model="Impala"))
    saved.details.model = "Malibu"
    saved.location.lat = 12.5

    repository.save(saved)

    cars = repository.find_all()
    assert len(cars) == 1
    assert cars[0].details.model == "Malibu"
    assert cars[0].location.lat == 12.5


def test_find_by_id_missing(repository):
    """Test that a missing id returns None."""
    assert repository.find_by_id(404) is None


def test_find_all_empty(repository):
    """Test that listing an empty table returns an empty list."""
    assert repository.find_all() == []


def test_delete(repository, make_car):
    """Test that deleting removes only the given car."""
    first = repository.save(make_car())
    second = repository.save(make_car())

    repository.delete(first)

    assert repository.find_by_id(first.id) is None
    assert repository.find_by_id(second.id) is not None


def test_database_errors_propagate(monkeypatch, make_car):
    """Test that store errors are raised, not swallowed."""
    engine = create_engine("sqlite:///:memory:")  # no tables created
    SessionLocal = sessionmaker(bind=engine)
    monkeypatch.setattr(
        "autolist.adapters.outbound.car.sql_car_repository.get_db_session",
        lambda: SessionLocal(),
    )
    repository = SqlCarRepository()

    with pytest.raises(OperationalError):
        repository.find_all()
    with pytest.raises(OperationalError):
        repository.save(make_car())


def test_save_without_id_after_explicit_id(repository, make_car, monkeypatch):
    """Test that explicit-id inserts resync the id sequence and new ids stay fresh."""
    synced = []
    monkeypatch.setattr(
        "autolist.adapters.outbound.car.sql_car_repository.sync_id_sequence",
        lambda db, table: synced.append(table),
    )

    repository.save(make_car(car_id=7))
    saved = repository.save(make_car())

    assert synced == ["cars"]
    assert saved.id != 7
    assert len(repository.find_all()) == 2
