"""SQL-backed car repository adapter."""

from datetime import datetime, timezone
from typing import Optional

from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session

from autolist.application.ports.car_repository import CarRepository
from autolist.domain.entities.car import Car, Condition, Details, Location, Manufacturer
from autolist.infrastructure.db import get_db_session, sync_id_sequence
from autolist.infrastructure.logging.logger import log_store_operation, logger

from .models import CarModel


def _aware(value: Optional[datetime]) -> Optional[datetime]:
    # SQLite returns naive datetimes
    if value is not None and value.tzinfo is None:
        return value.replace(tzinfo=timezone.utc)
    return value


class SqlCarRepository(CarRepository):
    """SQLAlchemy implementation of car repository."""

    def _model_to_entity(self, model: CarModel) -> Car:
        """
        Convert CarModel to Car entity.

        Args:
            model: SQLAlchemy model instance

        Returns:
            Car entity
        """
        return Car(
            id=model.id,
            condition=Condition(model.condition),
            details=Details(
                body=model.body,
                model=model.model,
                manufacturer=Manufacturer(
                    code=model.manufacturer_code, name=model.manufacturer_name
                ),
                model_year=model.model_year,
                number_of_doors=model.number_of_doors,
                fuel_type=model.fuel_type,
                engine=model.engine,
                mileage=model.mileage,
                production_year=model.production_year,
                external_color=model.external_color,
            ),
            location=Location(
                lat=model.lat,
                lon=model.lon,
                address=model.address,
                city=model.city,
                state=model.state,
                zip=model.zip,
            ),
            created_at=_aware(model.created_at),
            modified_at=_aware(model.modified_at),
        )

    def _entity_to_model(self, car: Car, model: Optional[CarModel] = None) -> CarModel:
        """
        Copy a Car entity onto a CarModel (for upsert).

        Args:
            car: Car entity
            model: Existing model instance (for update) or None (for insert)

        Returns:
            CarModel instance
        """
        if model is None:
            model = CarModel(id=car.id)
        model.condition = car.condition.value
        model.body = car.details.body
        model.model = car.details.model
        model.manufacturer_code = car.details.manufacturer.code
        model.manufacturer_name = car.details.manufacturer.name
        model.number_of_doors = car.details.number_of_doors
        model.fuel_type = car.details.fuel_type
        model.engine = car.details.engine
        model.mileage = car.details.mileage
        model.model_year = car.details.model_year
        model.production_year = car.details.production_year
        model.external_color = car.details.external_color
        model.lat = car.location.lat
        model.lon = car.location.lon
        model.address = car.location.address
        model.city = car.location.city
        model.state = car.location.state
        model.zip = car.location.zip
        return model

    def save(self, car: Car) -> Car:
        """
        Save a car (insert when id is None or unknown, update otherwise).

        Args:
            car: Car entity to save

        Returns:
            The persisted car, with its assigned id
        """
        db: Session = get_db_session()
        try:
            model = db.get(CarModel, car.id) if car.id is not None else None
            operation = "update" if model is not None else "create"
            if model is not None:
                self._entity_to_model(car, model)
            else:
                model = self._entity_to_model(car)
                db.add(model)
                if car.id is not None:
                    db.flush()
                    sync_id_sequence(db, CarModel.__tablename__)

            db.commit()
            db.refresh(model)
            log_store_operation("car", operation, model.id)
            return self._model_to_entity(model)
        except SQLAlchemyError as e:
            db.rollback()
            logger.error(f"Database error while saving car {car.id}: {str(e)}")
            raise
        finally:
            db.close()

    def find_by_id(self, car_id: int) -> Optional[Car]:
        """
        Get a car by id.

        Args:
            car_id: Car identifier

        Returns:
            Car entity, or None if not found
        """
        db: Session = get_db_session()
        try:
            model = db.get(CarModel, car_id)
            if model is None:
                return None
            return self._model_to_entity(model)
        except SQLAlchemyError as e:
            logger.error(f"Database error while getting car {car_id}: {str(e)}")
            raise
        finally:
            db.close()

    def find_all(self) -> list[Car]:
        """
        List all cars.

        Returns:
            List of all cars
        """
        db: Session = get_db_session()
        try:
            models = db.query(CarModel).all()
            return [self._model_to_entity(model) for model in models]
        except SQLAlchemyError as e:
            logger.error(f"Database error while listing cars: {str(e)}")
            raise
        finally:
            db.close()

    def delete(self, car: Car) -> None:
        """
        Delete a car.

        Args:
            car: Car entity to remove
        """
        db: Session = get_db_session()
        try:
            model = db.get(CarModel, car.id)
            if model is not None:
                db.delete(model)
                db.commit()
                log_store_operation("car", "delete", car.id)
        except SQLAlchemyError as e:
            db.rollback()
            logger.error(f"Database error while deleting car {car.id}: {str(e)}")
            raise
        finally:
            db.close()
