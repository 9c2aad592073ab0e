from sqlalchemy import Column, String, Text
from biztime.core.db import Base

class Company(Base):
    __tablename__ = "companies"

    # Natural key, never changed after creation
    code = Column(String, primary_key=True)
    name = Column(String, nullable=False, unique=True)
    description = Column(Text, nullable=True)
