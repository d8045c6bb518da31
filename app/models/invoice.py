# app/models/invoice.py
from sqlalchemy import Column, String, Date, ForeignKey
from app.database import Base


class Invoice(Base):
    __tablename__ = "invoicetable"

    invoice_id = Column("invoiceId", String(6), primary_key=True)
    issue_date = Column("issueDate", Date)
    status = Column("status", String(20))      # opaque, e.g. paid | unpaid
    order_id = Column("orderId", String(6), ForeignKey("ordertable.orderId", ondelete="CASCADE"))

    def __repr__(self):
        return f"<Invoice {self.invoice_id} order={self.order_id} status={self.status}>"
