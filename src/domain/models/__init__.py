from .geo import GeoPoint
from .page import PaginationStrategy, VehiclePage
from .route import Route
from .trip import Trip
from .vehicle import Vehicle, VehicleStatus

__all__ = [
    "GeoPoint",
    "PaginationStrategy",
    "Route",
    "Trip",
    "Vehicle",
    "VehiclePage",
    "VehicleStatus",
]
