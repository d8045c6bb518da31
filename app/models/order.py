# app/models/order.py
"""
Orders table — a shipment request tied to a customer and a route.
orderDate is a native DATE; departure/arrival are "HH:MM" text.
invoiceId is a plain reference: invoicetable.orderId already points back here.
"""

from sqlalchemy import Column, String, Float, Date, ForeignKey
from app.database import Base


class Order(Base):
    __tablename__ = "ordertable"

    order_id = Column("orderId", String(6), primary_key=True)
    customer_id = Column("customerId", String(6), ForeignKey("customertable.customerId"), nullable=False)
    weight = Column("weight", Float)
    route_id = Column(
        "routeId", String(6),
        ForeignKey("routetable.routeId", ondelete="CASCADE"),
        nullable=False, index=True,
    )
    order_date = Column("orderDate", Date)
    departure_time = Column("departureTime", String(5))
    arrival_time = Column("arrivalTime", String(5))
    invoice_id = Column("invoiceId", String(6))
    dispatcher_id = Column("dispatcherId", String(6), ForeignKey("dispatchertable.dispatcherId"))

    def __repr__(self):
        return f"<Order {self.order_id} customer={self.customer_id} route={self.route_id}>"
