from sqlalchemy import Column, String, Text
from sqlalchemy.orm import relationship
from biztime.core.db import Base


class Company(Base):
    __tablename__ = "companies"

    # Slug of the name; never changes after creation
    code = Column(String, primary_key=True)
    name = Column(String, nullable=False, unique=True)
    description = Column(Text, nullable=True)

    # Relationship: one-to-many (companies → invoices)
    invoices = relationship(
        "Invoice",
        back_populates="company",
        cascade="all, delete-orphan",
        passive_deletes=True,
        order_by="Invoice.id",
    )
