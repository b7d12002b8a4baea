import firebase_admin
from firebase_admin import credentials, db

from treeqr.config.settings import Settings

_APP_NAME = "treeqr"

_app: firebase_admin.App | None = None


def init_firebase(settings: Settings) -> None:
    """Initialize the process-wide Firebase app from settings."""
    global _app  # noqa: PLW0603
    cred = credentials.Certificate(settings.firebase_credentials_path)
    _app = firebase_admin.initialize_app(
        cred,
        {
            "databaseURL": settings.firebase_database_url,
            "httpTimeout": settings.firebase_timeout_seconds,
        },
        name=_APP_NAME,
    )


def close_firebase() -> None:
    """Delete the process-wide Firebase app."""
    global _app  # noqa: PLW0603
    if _app is not None:
        firebase_admin.delete_app(_app)
        _app = None


def get_reference(path: str) -> db.Reference:
    """Return a database reference bound to the initialized app.

    Raises:
        ValueError: if the path contains characters Firebase does not allow.
    """
    if _app is None:
        raise RuntimeError("Firebase app not initialized. Call init_firebase() first.")
    return db.reference(path, app=_app)
