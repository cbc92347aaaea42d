from .customer import Customer
from .reservation import Reservation
