"""Seed script to populate the contacts table with sample submissions."""

from contactdesk import create_app
from contactdesk.errors import ContactDeskError
from contactdesk.forms import validate_submission

SAMPLE_CONTACTS = [
    {
        'name': 'Jane Smith',
        'email': 'JANE@Example.com',
        'subject': 'Support',
        'message': 'Hello, this is a test message.'
    },
    {
        'name': 'Rahul Verma',
        'email': 'rahul.verma+site@gmail.com',
        'phone': '+91 98765 43210',
        'subject': 'Partnership enquiry',
        'message': 'We would like to discuss a partnership with your team.'
    },
    {
        'name': 'Ana Costa',
        'email': 'ana@empresa.com.br',
        'phone': '(11) 98765-4321',
        'subject': 'Feedback',
        'message': 'The new contact form works nicely on mobile, thanks!'
    },
]


def seed_database():
    """Insert the sample contacts through the validation gate and store."""
    app = create_app()

    with app.app_context():
        store = app.extensions['contact_store']
        if store.list_all():
            print('Database already seeded!')
            return

        print('Seeding database...')
        min_length = app.config['MESSAGE_MIN_LENGTH']
        for payload in SAMPLE_CONTACTS:
            try:
                contact_id = store.create(validate_submission(payload, min_length))
            except ContactDeskError as e:
                print(f'  Skipped {payload["email"]}: {e}')
                continue
            print(f'  Added contact {contact_id}: {payload["subject"]}')

        print('Database seeded successfully!')


if __name__ == '__main__':
    seed_database()
