"""
SavedFilter model: named filter presets per UI view, private or shared.

(name, filter_view, user_id) is unique; the owner is set on creation and
never reassigned.
"""
from sqlalchemy import Column, Integer, Text, DateTime, JSON, UniqueConstraint
from sqlalchemy.sql import func

from saved_filters.database import Base
from saved_filters.models.mixins import OwnedSharedMixin


class SavedFilter(OwnedSharedMixin, Base):
    __tablename__ = 'saved_filters'
    __table_args__ = (
        UniqueConstraint('name', 'filter_view', 'user_id', name='uq_saved_filter_name_view_owner'),
    )

    id = Column(Integer, primary_key=True, autoincrement=True)
    name = Column(Text, nullable=False)
    title = Column(Text, nullable=True)
    filter_view = Column(Text, nullable=False, index=True)
    filter_expression = Column(JSON, nullable=True)         # structured criteria
    filter_custom_expression = Column(Text, nullable=True)  # free-form criteria
    created_at = Column(DateTime(timezone=True), server_default=func.now())
    updated_at = Column(DateTime(timezone=True), server_default=func.now(), onupdate=func.now())

    def to_dict(self):
        return {
            'id': self.id,
            'name': self.name,
            'title': self.title,
            'filter_view': self.filter_view,
            'filter_expression': self.filter_expression,
            'filter_custom_expression': self.filter_custom_expression,
            'shared': bool(self.shared),
            'owner': self.owner.code if self.owner else None,
            'created_at': self.created_at.isoformat() if self.created_at else None,
            'updated_at': self.updated_at.isoformat() if self.updated_at else None,
        }

    def __repr__(self):
        return f'<SavedFilter {self.filter_view}/{self.name}>'
