"""Contact submission form and the validation gate built on it."""

from dataclasses import dataclass

from email_validator import validate_email
from werkzeug.datastructures import MultiDict
from wtforms import Form, StringField, TextAreaField
from wtforms.validators import DataRequired, Email, Length, Optional, ValidationError as FieldError

from contactdesk.errors import ValidationError

FIELDS = ('name', 'email', 'phone', 'subject', 'message')

GMAIL_DOMAINS = {'gmail.com', 'googlemail.com'}
PLUS_TAG_DOMAINS = {
    'outlook.com', 'hotmail.com', 'live.com',
    'icloud.com', 'me.com',
}
DASH_TAG_DOMAINS = {'yahoo.com', 'ymail.com', 'rocketmail.com'}


def strip_filter(value):
    return value.strip() if isinstance(value, str) else value


class ContactForm(Form):
    """Contact form. Every field is trimmed before its validators run."""
    name = StringField('Name', filters=[strip_filter], validators=[
        DataRequired(message='Name is required'),
        Length(max=255, message='Name must be at most 255 characters')
    ])
    email = StringField('Email', filters=[strip_filter], validators=[
        DataRequired(message='Valid email is required'),
        Email(message='Valid email is required'),
        Length(max=255, message='Email must be at most 255 characters')
    ])
    phone = StringField('Phone', filters=[strip_filter], validators=[
        Optional(),
        Length(max=50, message='Phone must be at most 50 characters')
    ])
    subject = StringField('Subject', filters=[strip_filter], validators=[
        DataRequired(message='Subject is required'),
        Length(max=255, message='Subject must be at most 255 characters')
    ])
    message = TextAreaField('Message', filters=[strip_filter], validators=[
        DataRequired(message='Message is required'),
        Length(max=5000, message='Message must be at most 5000 characters')
    ])

    def __init__(self, formdata=None, message_min_length=0, **kwargs):
        super().__init__(formdata, **kwargs)
        self.message_min_length = message_min_length

    def validate_message(self, field):
        """Enforce the configured minimum message length."""
        if len(field.data) < self.message_min_length:
            raise FieldError(
                f'Message must be at least {self.message_min_length} characters')

    @property
    def violations(self):
        """Errors flattened to ``{'field', 'message'}`` pairs in field order."""
        return [
            {'field': field.name, 'message': message}
            for field in self
            for message in field.errors
        ]


@dataclass(frozen=True)
class ContactSubmission:
    """A submission that passed validation: trimmed, with a canonical email."""
    name: str
    email: str
    subject: str
    message: str
    phone: 'str | None' = None


def normalize_email(address):
    """Canonicalize an address the way common mail providers route it.

    The whole address is lower-cased. Gmail ignores dots and ``+tag``
    suffixes in the local part and aliases googlemail.com; Outlook and
    iCloud drop ``+tag``; Yahoo drops ``-tag``.
    """
    normalized = validate_email(address, check_deliverability=False).normalized
    local, _, domain = normalized.rpartition('@')
    local, domain = local.lower(), domain.lower()

    if domain in GMAIL_DOMAINS:
        local = local.split('+', 1)[0].replace('.', '')
        domain = 'gmail.com'
    elif domain in PLUS_TAG_DOMAINS:
        local = local.split('+', 1)[0]
    elif domain in DASH_TAG_DOMAINS:
        local = local.split('-', 1)[0]

    # A tag-only local part ("+news@...") is left as is
    if not local:
        return normalized.lower()
    return f'{local}@{domain}'


def _formdata(payload):
    """Wrap a decoded JSON object as form data.

    Absent, null and non-scalar values all become empty strings.
    """
    if not isinstance(payload, dict):
        payload = {}
    data = MultiDict()
    for key in FIELDS:
        value = payload.get(key)
        if isinstance(value, str):
            data[key] = value
        elif isinstance(value, (int, float)) and not isinstance(value, bool):
            data[key] = str(value)
        else:
            data[key] = ''
    return data


def validate_submission(payload, message_min_length=10):
    """Check a raw submission and return its normalized form.

    Raises ValidationError listing every broken rule. Performs no I/O.
    """
    form = ContactForm(_formdata(payload), message_min_length=message_min_length)
    if not form.validate():
        raise ValidationError(form.violations)

    return ContactSubmission(
        name=form.name.data,
        email=normalize_email(form.email.data),
        phone=form.phone.data or None,
        subject=form.subject.data,
        message=form.message.data,
    )
