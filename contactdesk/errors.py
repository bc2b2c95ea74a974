"""Exceptions raised by the validation gate and the contact store."""


class ContactDeskError(Exception):
    """Base class for contactdesk errors."""


class ValidationError(ContactDeskError):
    """A submission broke one or more field rules.

    ``violations`` is the ordered list of ``{'field': ..., 'message': ...}``
    dicts, one per broken rule.
    """

    def __init__(self, violations):
        self.violations = list(violations)
        fields = ', '.join(v['field'] for v in self.violations)
        super().__init__(f'Invalid submission: {fields}')


class StoreError(ContactDeskError):
    """The contact store could not complete an operation.

    The message is safe to show a client; driver detail stays in the log
    and on ``__cause__``.
    """
