# Services package init
"""
NoteLite Backend — Services Layer
===================================

What:  Business logic layer sitting between routes (HTTP) and the note store.
Why:   Routes handle HTTP, services handle business rules, the store handles SQL.

Service Inventory:
    - NoteService: exists-or-fail note operations and error translation
"""
