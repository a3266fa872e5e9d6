from .entity import Flight as Flight
from .factory import FlightDetails as FlightDetails
from .factory import FlightFactory as FlightFactory
from .repository import FlightRepository as FlightRepository
from .value_object import City as City
from .value_object import FlightId as FlightId
