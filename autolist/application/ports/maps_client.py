"""Maps client port interface."""

from abc import ABC, abstractmethod

from autolist.domain.entities.car import Location


class MapsClient(ABC):
    """Port interface for the maps collaborator."""

    @abstractmethod
    def get_address(self, location: Location) -> Location:
        """
        Resolve the address of a location.

        Args:
            location: Location with coordinates set

        Returns:
            Location with address, city, state and zip populated

        Raises:
            MapsClientError: If the call fails
        """
        pass
