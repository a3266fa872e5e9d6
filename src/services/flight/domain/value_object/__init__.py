from .city import City
from .flight_id import FlightId

__all__ = ["City", "FlightId"]
