"""Application errors."""


class NotFoundError(Exception):
    """Requested identifier does not exist in a store."""

    entity = "Entity"

    def __init__(self, entity_id: object) -> None:
        self.entity_id = entity_id
        super().__init__(f"{self.entity} {entity_id} not found")


class CarNotFoundError(NotFoundError):
    """No car with the requested identifier."""

    entity = "Car"


class PriceNotFoundError(NotFoundError):
    """No price with the requested identifier."""

    entity = "Price"


class CollaboratorError(Exception):
    """A collaborator service failed or answered with an error."""


class PriceClientError(CollaboratorError):
    """The price client could not produce a price."""


class MapsClientError(CollaboratorError):
    """The maps client could not resolve an address."""
