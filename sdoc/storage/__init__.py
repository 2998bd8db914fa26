"""SQLite persistence for processed documents."""
