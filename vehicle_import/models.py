from sqlalchemy import Column, String, Integer, Float, DateTime
from .db import Base

# -----------------------------
# ORM model for imported vehicle listings
# -----------------------------
class Vehicle(Base):
    __tablename__ = "vehicles"
    # One row per normalized CSV line; columns mirror the column registry
    id          = Column(Integer, primary_key=True, autoincrement=True)
    provider    = Column(String, index=True, nullable=False)   # data source tag of the upload
    uuid        = Column(String, index=True)                     # provider's own identifier
    vin         = Column(String, index=True)
    make        = Column(String)
    model       = Column(String)
    mileage     = Column(String)                                  # kept as provided
    year        = Column(String)                                  # kept as provided
    price       = Column(Float)
    zip_code    = Column(String)
    create_date = Column(DateTime)
    update_date = Column(DateTime)

    def __repr__(self):
        return f"<Vehicle(id={self.id}, provider={self.provider}, vin={self.vin})>"

    def __str__(self):
        return (
            f"Vehicle {self.vin} ({self.year} {self.make} {self.model}), "
            f"provider={self.provider}, price={self.price}, mileage={self.mileage}, "
            f"zip={self.zip_code}"
        )
