"""Desktop front end (PySide6) — install with the ``desktop`` extra."""
