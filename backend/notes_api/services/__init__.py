# Services package init
"""
Notes API — Services Layer
============================

Service Inventory:
    - NoteStore (abstract): persistence interface (insert, find_all,
      update_by_id, delete_by_id)
    - SQLAlchemyNoteStore: NoteStore over an AsyncSession
    - NoteService: one store call per operation, failures mapped to
      NotFoundError / DatabaseError with fixed messages
"""
