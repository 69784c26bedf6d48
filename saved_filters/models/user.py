"""
User model: the identity that owns saved filters, keyed by login code.
"""
from sqlalchemy import Column, Integer, Text, DateTime
from sqlalchemy.sql import func

from saved_filters.database import Base


class User(Base):
    __tablename__ = 'users'

    id = Column(Integer, primary_key=True, autoincrement=True)
    code = Column(Text, nullable=False, unique=True)
    name = Column(Text, default='')
    created_at = Column(DateTime(timezone=True), server_default=func.now())

    def __repr__(self):
        return f'<User {self.code}>'
