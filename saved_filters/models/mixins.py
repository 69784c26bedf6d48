"""
Column mixins shared by models that follow the owner/shared visibility pattern.
"""
from sqlalchemy import Column, Integer, Boolean, ForeignKey, false
from sqlalchemy.orm import declared_attr, relationship


class OwnedSharedMixin:
    """
    Adds an owning user and a shared flag.

    Pair with the predicates in saved_filters.services.visibility to scope
    queries to "mine or shared".
    """

    shared = Column(Boolean, nullable=False, default=False, server_default=false())

    @declared_attr
    def user_id(cls):
        return Column(Integer, ForeignKey('users.id'), nullable=False, index=True)

    @declared_attr
    def owner(cls):
        return relationship('User')
