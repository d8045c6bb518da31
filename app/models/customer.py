# app/models/customer.py
from sqlalchemy import Column, String
from app.database import Base


class Customer(Base):
    __tablename__ = "customertable"

    customer_id = Column("customerId", String(6), primary_key=True)
    phone_number = Column("phoneNumber", String(15))
    email = Column("email", String(40))
    name = Column("name", String(30), nullable=False)

    def __repr__(self):
        return f"<Customer {self.customer_id} {self.name}>"
