"""Contact store: the only code that reads or writes the contacts table."""

from contextlib import contextmanager

from loguru import logger
from sqlalchemy.exc import SQLAlchemyError

from contactdesk.errors import StoreError
from contactdesk.models import Contact


class ContactStore:
    """Create, list and delete contacts through a pooled database handle.

    ``db`` is the Flask-SQLAlchemy extension bound to the app; its engine
    owns the bounded connection pool. Each operation uses one session,
    which holds at most one pooled connection and gives it back when the
    operation ends, whether it succeeded or not. Operations must run
    inside an application context.
    """

    def __init__(self, db):
        self.db = db

    @contextmanager
    def _session(self, failure):
        session = self.db.session
        try:
            yield session
        except SQLAlchemyError as exc:
            session.rollback()
            logger.error(f'{failure}: {exc}')
            raise StoreError(failure) from exc
        finally:
            session.close()

    def bootstrap(self):
        """Create the contacts table if it is missing.

        Never alters an existing table. Returns False instead of raising
        when the database is unreachable.
        """
        try:
            Contact.__table__.create(bind=self.db.engine, checkfirst=True)
        except SQLAlchemyError as exc:
            logger.error(f'Database init error: {exc}')
            return False
        logger.info('Database initialized')
        return True

    def create(self, submission):
        """Insert a validated ContactSubmission and return its new id."""
        with self._session('Failed to save contact') as session:
            contact = Contact(
                name=submission.name,
                email=submission.email,
                phone=submission.phone,
                subject=submission.subject,
                message=submission.message
            )
            session.add(contact)
            session.flush()
            contact_id = contact.id
            session.commit()
        logger.info(f'Stored contact {contact_id}')
        return contact_id

    def list_all(self):
        """Return every contact, newest first (id breaks created_at ties)."""
        with self._session('Failed to fetch contacts'):
            return Contact.query.order_by(
                Contact.created_at.desc(),
                Contact.id.desc()
            ).all()

    def delete_by_id(self, contact_id):
        """Delete a contact if it exists. Returns whether a row was removed."""
        with self._session('Failed to delete contact') as session:
            removed = Contact.query.filter_by(id=contact_id).delete()
            session.commit()
        logger.info(f'Deleted contact {contact_id} (rows: {removed})')
        return removed > 0

    def close(self):
        """Dispose of the pool's connections at shutdown."""
        self.db.engine.dispose()
