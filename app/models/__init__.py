# Logistics Manager — Database Models
# Import all models here for SQLAlchemy discovery

from app.models.location import Location                              # noqa
from app.models.route import Route                                    # noqa
from app.models.customer import Customer                              # noqa
from app.models.employee import Employee, Dispatcher, Driver          # noqa
from app.models.truck import Truck, DriverDrives, Assigned            # noqa
from app.models.order import Order                                    # noqa
from app.models.invoice import Invoice                                # noqa
