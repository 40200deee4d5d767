"""Mock maps client adapter."""

from autolist.application.ports.maps_client import MapsClient
from autolist.domain.entities.car import Location

# (address, city, state, zip)
_ADDRESS_BOOK = [
    ("777 Brockton Avenue", "Abington", "MA", "02351"),
    ("30 Memorial Drive", "Avon", "MA", "02322"),
    ("250 Hartford Avenue", "Bellingham", "MA", "02019"),
    ("700 Oak Street", "Brockton", "MA", "02301"),
    ("66-4 Parkhurst Rd", "Chelmsford", "MA", "01824"),
    ("591 Memorial Dr", "Chicopee", "MA", "01020"),
    ("55 Brooksby Village Way", "Danvers", "MA", "01923"),
    ("137 Teaticket Hwy", "East Falmouth", "MA", "02536"),
    ("42 Fairhaven Commons Way", "Fairhaven", "MA", "02719"),
    ("374 William S Canning Blvd", "Fall River", "MA", "02721"),
]


class MockMapsClient(MapsClient):
    """Maps client returning addresses from a fixed address book for development."""

    def get_address(self, location: Location) -> Location:
        """
        Pick an address for the given coordinates.

        The same coordinates always map to the same address.

        Args:
            location: Location with coordinates set

        Returns:
            New Location with the same coordinates and address fields filled in
        """
        index = (round(abs(location.lat) * 10_000) + round(abs(location.lon) * 10_000)) % len(
            _ADDRESS_BOOK
        )
        address, city, state, zip_code = _ADDRESS_BOOK[index]
        return Location(
            lat=location.lat,
            lon=location.lon,
            address=address,
            city=city,
            state=state,
            zip=zip_code,
        )
