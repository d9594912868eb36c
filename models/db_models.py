"""
SQLAlchemy ORM models for the MySQL database.

Purpose:
- Map the `job` table the debug probes read from
- Column names follow the existing camelCase schema; attributes are snake_case

This service only reads; the table is owned and migrated by the main application.
"""

from sqlalchemy import Column, String, Float, Integer, DateTime, JSON, Boolean, Text
from core.db import Base
from datetime import datetime

class Job(Base):
    """
    A job posting ingested from a job board or aggregator.

    Columns:
    - id: application-generated identifier
    - source/sourceId: originating board and its own identifier
    - locations/tags: JSON arrays of strings
    - score: relevance score computed at ingestion
    - hidden: soft-delete flag; hidden jobs are excluded from counts
    """
    __tablename__ = "job"

    id = Column(String(64), primary_key=True)
    source = Column(String(50), nullable=False, index=True)
    source_id = Column("sourceId", String(255), nullable=True)
    title = Column(String(500), nullable=False)
    company = Column(String(255), nullable=False)
    locations = Column(JSON, nullable=True)
    remote = Column(Boolean, default=False)
    url = Column(String(1000), nullable=False, unique=True)
    description = Column(Text, nullable=True)
    salary_min = Column("salaryMin", Integer, nullable=True)
    salary_max = Column("salaryMax", Integer, nullable=True)
    currency = Column(String(10), nullable=True)
    tags = Column(JSON, nullable=True)
    posted_at = Column("postedAt", DateTime, nullable=True)
    score = Column(Float, default=0.0)
    hidden = Column(Boolean, default=False, index=True)
    created_at = Column("createdAt", DateTime, default=datetime.utcnow)
    updated_at = Column("updatedAt", DateTime, default=datetime.utcnow, onupdate=datetime.utcnow)
