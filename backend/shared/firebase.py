import firebase_admin
from firebase_admin import credentials

from config.settings import FIREBASE_CREDENTIALS


def get_firebase_app() -> firebase_admin.App:
    """Get the default Firebase app, initializing it on first use."""
    try:
        return firebase_admin.get_app()
    except ValueError:
        # No default app yet
        pass

    if FIREBASE_CREDENTIALS:
        cred = credentials.Certificate(FIREBASE_CREDENTIALS)
    else:
        cred = credentials.ApplicationDefault()

    return firebase_admin.initialize_app(cred)
