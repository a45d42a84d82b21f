"""Server routes used by the SDK."""

URL_CURSOR = "/_api/cursor"


def cursor_path(cursor_id: str) -> str:
    """Path of the continuation resource for a server-side cursor."""
    return f"{URL_CURSOR}/{cursor_id}"


def database_prefix(database: str | None) -> str:
    return f"/_db/{database}" if database else ""
