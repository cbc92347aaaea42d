from .customer import Customer, CustomerCreate, CustomerUpdate
from .reservation import Reservation, ReservationCreate
