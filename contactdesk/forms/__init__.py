"""Submission forms."""

from .contact import ContactForm, ContactSubmission, normalize_email, validate_submission

__all__ = [
    'ContactForm',
    'ContactSubmission',
    'normalize_email',
    'validate_submission',
]
