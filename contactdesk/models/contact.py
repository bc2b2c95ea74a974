"""Contact submission model."""

from datetime import timezone

from contactdesk.extensions import db


class Contact(db.Model):
    """A stored contact-form submission. Rows are never updated."""
    __tablename__ = 'contacts'
    # Keep SQLite from reusing the ids of deleted rows
    __table_args__ = {'sqlite_autoincrement': True}

    id = db.Column(db.Integer, primary_key=True, autoincrement=True)
    name = db.Column(db.String(255), nullable=False)
    email = db.Column(db.String(255), nullable=False)
    phone = db.Column(db.String(50), nullable=True)
    subject = db.Column(db.String(255), nullable=False)
    message = db.Column(db.Text, nullable=False)
    created_at = db.Column(db.TIMESTAMP,
                           server_default=db.text('CURRENT_TIMESTAMP'))

    def created_at_utc(self):
        """created_at as an aware datetime. The database stores UTC."""
        if self.created_at.tzinfo is None:
            return self.created_at.replace(tzinfo=timezone.utc)
        return self.created_at

    def to_dict(self):
        return {
            'id': self.id,
            'name': self.name,
            'email': self.email,
            'phone': self.phone,
            'subject': self.subject,
            'message': self.message,
            'created_at': self.created_at_utc().isoformat() if self.created_at else None,
        }

    def __repr__(self):
        return f'<Contact {self.id} {self.subject}>'
