"""Reporting API endpoints for the relief admin back office

This package provides the daily donation/expense aggregate and the
spreadsheet exports of donations, expenses, volunteers and crises.
All endpoints are restricted to users with administrator privileges.

Report handlers delegate to ``service`` (JSON aggregates) and ``export``
(spreadsheet generation), which contain the actual business logic."""
