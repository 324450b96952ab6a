"""Session-scoped transaction ledger served over HTTP."""
