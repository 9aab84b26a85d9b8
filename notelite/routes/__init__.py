# Routes package init
"""
NoteLite Backend — API Routes Package
=======================================

What:  HTTP route handlers that accept requests and return responses.

Route Inventory:
    - notes.py:   POST   /api/notes              (create)
                  GET    /api/notes              (list all)
                  GET    /api/notes/search       (title search)
                  GET    /api/notes/{id}         (get one)
                  PUT    /api/notes/{id}         (update)
                  DELETE /api/notes/{id}         (delete)

Design Principle:
    Routes are THIN — they handle HTTP concerns only:
    - Extract data from request (path, query, body)
    - Call the appropriate service
    - Pick the status code

    Business logic belongs in services, not routes.
"""
