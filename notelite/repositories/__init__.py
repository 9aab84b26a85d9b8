# Repositories package init
"""
NoteLite Backend — Repositories Layer
=======================================

What:  Data-access gateways; the only code that builds SQL against a table.
Why:   Services express business rules in terms of a small, explicit method
       set instead of ad hoc queries.

Repository Inventory:
    - NoteStore: CRUD plus case-insensitive title search over `notes`
"""
