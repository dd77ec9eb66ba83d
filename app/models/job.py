from sqlalchemy import Column, Integer, String, Text, Numeric, ForeignKey, CheckConstraint
from sqlalchemy.orm import relationship
from app.core.database import Base


class Job(Base):
    """
    Job posting owned by a company.

    equity is a fraction in [0, 1]; the store returns it as a decimal string.
    """
    __tablename__ = "jobs"
    __table_args__ = (
        CheckConstraint("salary >= 0", name="ck_jobs_salary"),
        CheckConstraint("equity <= 1.0", name="ck_jobs_equity"),
    )

    id = Column(Integer, primary_key=True, index=True)
    title = Column(Text, nullable=False)
    salary = Column(Integer, nullable=True)
    equity = Column(Numeric, nullable=True)
    company_handle = Column(
        String(25),
        ForeignKey("companies.handle", ondelete="CASCADE"),
        nullable=False,
        index=True,
    )

    # Relationships
    company = relationship("Company", back_populates="jobs")

    def __repr__(self):
        return f"<Job(id={self.id}, title='{self.title}', company_handle='{self.company_handle}')>"
