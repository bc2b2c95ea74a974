# contactdesk - development server / WSGI entry point
# Run locally with `python app.py`, or point a WSGI server at `app:app`.

import os

from contactdesk import create_app

app = create_app()

# ==================== MAIN ====================

if __name__ == '__main__':
    try:
        app.run(host='0.0.0.0', port=int(os.environ.get('PORT', 5000)))
    finally:
        with app.app_context():
            app.extensions['contact_store'].close()
