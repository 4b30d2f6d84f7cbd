"""
Database Models - SQLAlchemy ORM models for both stores.

The clinical store holds clients and their tasks; the memory store holds
free-form memories. Each store has its own declarative base so tables are
created on the right engine.

The services read and write through raw parameterized SQL; these models
define the schema and are used to bootstrap and seed databases.
"""
from datetime import datetime

from sqlalchemy import Boolean, Column, Date, DateTime, ForeignKey, Integer, String, Text
from sqlalchemy.orm import declarative_base, relationship

ClinicalBase = declarative_base()
MemoryBase = declarative_base()


class Client(ClinicalBase):
    """A client of the practice. full_name is the display and sort key."""
    __tablename__ = "clients"

    id = Column(Integer, primary_key=True, autoincrement=True)
    full_name = Column(String(200), nullable=False, index=True)
    email = Column(String(200), nullable=True)
    phone = Column(String(50), nullable=True)
    date_of_birth = Column(Date, nullable=True)
    created_at = Column(DateTime, default=datetime.utcnow, nullable=False)

    tasks = relationship("Task", back_populates="client")


class Task(ClinicalBase):
    """
    A unit of billable work, optionally attached to a client.

    Billed amount is never stored: it is actual_minutes times the
    configured revenue rate.
    """
    __tablename__ = "tasks"

    id = Column(Integer, primary_key=True, autoincrement=True)
    client_id = Column(Integer, ForeignKey("clients.id"), nullable=True)
    title = Column(String(200), nullable=False, default="")
    status = Column(String(20), nullable=False, default="pending", index=True)
    priority = Column(Integer, nullable=False, default=3)  # 1 = most urgent
    due_date = Column(Date, nullable=True)
    estimated_minutes = Column(Integer, nullable=True)
    actual_minutes = Column(Integer, nullable=True)
    auto_completable = Column(Boolean, nullable=False, default=False)
    completed_at = Column(DateTime, nullable=True)
    completed_by = Column(String(100), nullable=True)

    client = relationship("Client", back_populates="tasks")


class Memory(MemoryBase):
    """A stored memory; only counted by the status endpoint."""
    __tablename__ = "memories"

    id = Column(Integer, primary_key=True, autoincrement=True)
    content = Column(Text, nullable=False)
    created_at = Column(DateTime, default=datetime.utcnow, nullable=False)
