"""Unit tests for the Car entity."""

from autolist.domain.entities.car import Location


def test_copy_address_from_keeps_coordinates():
    """Test that copying an address never touches lat/lon."""
    location = Location(lat=40.0, lon=-74.0, address="old", city="old")
    resolved = Location(lat=1.0, lon=2.0, address="1 Main St", city="NYC", state="NY", zip="10001")

    location.copy_address_from(resolved)

    assert location == Location(
        lat=40.0, lon=-74.0, address="1 Main St", city="NYC", state="NY", zip="10001"
    )


def test_copy_address_from_clears_missing_fields():
    """Test that missing fields in the resolved address overwrite stale ones."""
    location = Location(lat=40.0, lon=-74.0, address="old", city="old", state="old", zip="old")

    location.copy_address_from(Location(lat=40.0, lon=-74.0))

    assert location.address is None
    assert location.zip is None
