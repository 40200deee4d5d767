"""SQL-backed price repository adapter."""

from decimal import Decimal
from typing import Optional

from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session

from autolist.application.ports.price_repository import PriceRepository
from autolist.domain.entities.price import Price
from autolist.infrastructure.db import get_db_session, sync_id_sequence
from autolist.infrastructure.logging.logger import log_store_operation, logger

from .models import PriceModel


class SqlPriceRepository(PriceRepository):
    """SQLAlchemy implementation of price repository."""

    def _model_to_entity(self, model: PriceModel) -> Price:
        return Price(
            id=model.id,
            currency=model.currency,
            amount=Decimal(model.amount),
        )

    def save(self, price: Price) -> Price:
        """
        Save a price (insert when id is None or unknown, update otherwise).

        Args:
            price: Price entity to save

        Returns:
            The persisted price, with its assigned id
        """
        db: Session = get_db_session()
        try:
            model = db.get(PriceModel, price.id) if price.id is not None else None
            operation = "update" if model is not None else "create"
            if model is None:
                model = PriceModel(id=price.id)
                db.add(model)
            model.currency = price.currency
            model.amount = price.amount
            if operation == "create" and price.id is not None:
                db.flush()
                sync_id_sequence(db, PriceModel.__tablename__)

            db.commit()
            db.refresh(model)
            log_store_operation("price", operation, model.id)
            return self._model_to_entity(model)
        except SQLAlchemyError as e:
            db.rollback()
            logger.error(f"Database error while saving price {price.id}: {str(e)}")
            raise
        finally:
            db.close()

    def find_by_id(self, price_id: int) -> Optional[Price]:
        """
        Get a price by id.

        Args:
            price_id: Price identifier

        Returns:
            Price entity, or None if not found
        """
        db: Session = get_db_session()
        try:
            model = db.get(PriceModel, price_id)
            if model is None:
                return None
            return self._model_to_entity(model)
        except SQLAlchemyError as e:
            logger.error(f"Database error while getting price {price_id}: {str(e)}")
            raise
        finally:
            db.close()

    def find_all(self) -> list[Price]:
        """List all prices."""
        db: Session = get_db_session()
        try:
            models = db.query(PriceModel).all()
            return [self._model_to_entity(model) for model in models]
        except SQLAlchemyError as e:
            logger.error(f"Database error while listing prices: {str(e)}")
            raise
        finally:
            db.close()

    def delete(self, price: Price) -> None:
        """Delete a price."""
        db: Session = get_db_session()
        try:
            model = db.get(PriceModel, price.id)
            if model is not None:
                db.delete(model)
                db.commit()
                log_store_operation("price", "delete", price.id)
        except SQLAlchemyError as e:
            db.rollback()
            logger.error(f"Database error while deleting price {price.id}: {str(e)}")
            raise
        finally:
            db.close()
