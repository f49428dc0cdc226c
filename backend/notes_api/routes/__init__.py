# Routes package init
"""
Notes API — API Routes Package
================================

Route Inventory:
    - notes.py:   POST   /api/notes           (create)
                  GET    /api/notes           (list)
                  PUT    /api/notes/{id}      (partial update)
                  DELETE /api/notes/{id}      (delete)
    - health.py:  GET    /                    (liveness message)
                  GET    /health              (database health)

Routes are thin: they pick the store for the request, call NoteService and
return its result. Status-code mapping for failures lives in the exception
handlers registered by main.py.
"""
