import logging
from typing import List

from ..models.city import City
from ..models.location import Location
from ..schemas.property import CityCreate, LocationCreate
from .base import BaseService

logger = logging.getLogger(__name__)


class GeographyService(BaseService):
    def create_city(self, city_data: CityCreate) -> City:
        return self._save(City(**city_data.dict()))

    def get_city(self, city_id: int) -> City:
        return self._get_or_raise(City, city_id)

    def list_cities(self) -> List[City]:
        return self.db.query(City).order_by(City.city_name).all()

    def delete_city(self, city_id: int) -> None:
        """Locations in the city are removed with it, and their rentals too"""
        city = self._get_or_raise(City, city_id)
        logger.info(f"Deleting city {city_id} with cascading locations")
        self._delete(city, "City")

    def create_location(self, location_data: LocationCreate) -> Location:
        if location_data.city_id is not None:
            self._require_parent(City, location_data.city_id, "Location", "city_id")
        return self._save(Location(**location_data.dict()))

    def get_location(self, location_id: int) -> Location:
        return self._get_or_raise(Location, location_id)

    def delete_location(self, location_id: int) -> None:
        """Rentals placed at the location are removed with it"""
        location = self._get_or_raise(Location, location_id)
        logger.info(f"Deleting location {location_id} with cascading rentals")
        self._delete(location, "Location")
