from sqlalchemy import Column, Integer, String, Text, CheckConstraint
from sqlalchemy.orm import relationship
from app.core.database import Base


class Company(Base):
    """
    Company that posts jobs.

    The handle is the public key and never changes after creation.
    """
    __tablename__ = "companies"
    __table_args__ = (
        CheckConstraint("num_employees >= 0", name="ck_companies_num_employees"),
    )

    handle = Column(String(25), primary_key=True)
    name = Column(Text, unique=True, nullable=False)
    description = Column(Text, nullable=False)
    num_employees = Column(Integer, nullable=True)
    logo_url = Column(Text, nullable=True)

    # Relationships
    jobs = relationship("Job", back_populates="company", cascade="all, delete-orphan")

    def __repr__(self):
        return f"<Company(handle='{self.handle}', name='{self.name}')>"
