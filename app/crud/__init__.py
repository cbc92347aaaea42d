from .crud_customer import customer
from .crud_reservation import reservation
