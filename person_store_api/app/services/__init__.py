"""
Service layer abstraction.

``validation`` holds the person field rules and ``person_service``
the create/read/update/delete logic built on top of the in‑memory
repository.  API handlers only translate between HTTP and these
functions.
"""
