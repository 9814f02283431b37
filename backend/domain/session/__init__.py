"""Session domain - login sessions with fixed expiry."""
