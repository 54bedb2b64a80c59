# ABOUTME: booksdb - a small book catalog kept in an in-memory SQLite database.
# ABOUTME: The persistence layer lives in booksdb.db, the command line in booksdb.cli.
