"""Donations and expenses.

These records are read-only over HTTP: they feed the daily report and the
spreadsheet exports, and are recorded through the ``relief-admin`` CLI."""
