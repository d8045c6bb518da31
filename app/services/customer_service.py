# app/services/customer_service.py
from app.models.customer import Customer
from app.services.table_service import TableService

CUSTOMER_SEEDS = [
    {"customerId": "c00001", "phoneNumber": "604-555-0142", "email": "orders@pacificfreshfoods.ca",
     "name": "Pacific Fresh Foods"},
    {"customerId": "c00002", "phoneNumber": "778-555-0199", "email": "shipping@northshorebuild.ca",
     "name": "North Shore Building Supply"},
    {"customerId": "c00003", "phoneNumber": "416-555-0123", "email": "logistics@lakesidepaper.ca",
     "name": "Lakeside Paper Co"},
]


class CustomerService(TableService):
    model = Customer
    seeds = CUSTOMER_SEEDS
