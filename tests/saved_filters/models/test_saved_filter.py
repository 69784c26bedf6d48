"""Tests for the SavedFilter and User models."""
from sqlalchemy import text

from saved_filters.models.saved_filter import SavedFilter


class TestSavedFilterToDict:
    """to_dict() serializes records for the JSON API."""

    def test_serializes_fields(self, db_session, make_user):
        alice = make_user('alice')
        row = SavedFilter(
            name='open-items',
            title='Open items',
            filter_view='orders.grid',
            filter_expression={'criteria': [{'field': 'status', 'value': 'open'}]},
            filter_custom_expression="self.status = 'open'",
            shared=True,
            user_id=alice.id,
        )
        db_session.add(row)
        db_session.commit()

        data = row.to_dict()
        assert data['id'] == row.id
        assert data['name'] == 'open-items'
        assert data['title'] == 'Open items'
        assert data['filter_view'] == 'orders.grid'
        assert data['filter_expression'] == {'criteria': [{'field': 'status', 'value': 'open'}]}
        assert data['filter_custom_expression'] == "self.status = 'open'"
        assert data['shared'] is True
        assert data['owner'] == 'alice'
        assert data['created_at'] is not None

    def test_shared_defaults_to_false(self, db_session, make_user):
        alice = make_user('alice')
        row = SavedFilter(name='f', filter_view='v', user_id=alice.id)
        db_session.add(row)
        db_session.commit()
        assert row.shared is False
        assert row.to_dict()['shared'] is False

    def test_transient_record_serializes_without_timestamps(self):
        data = SavedFilter(name='f', filter_view='v').to_dict()
        assert data['id'] is None
        assert data['owner'] is None
        assert data['created_at'] is None


class TestUser:
    def test_repr_uses_code(self, make_user):
        assert repr(make_user('carol')) == '<User carol>'


class TestSharedServerDefault:
    """The database itself defaults shared to false, matching the migration."""

    def test_column_has_server_default(self):
        assert SavedFilter.__table__.c.shared.server_default is not None

    def test_raw_insert_without_shared_is_private(self, db_session, make_user):
        alice = make_user('alice')
        db_session.execute(
            text("INSERT INTO saved_filters (name, filter_view, user_id) VALUES ('raw', 'v', :uid)"),
            {'uid': alice.id},
        )
        db_session.commit()
        row = db_session.query(SavedFilter).filter_by(name='raw').one()
        assert row.shared is False
