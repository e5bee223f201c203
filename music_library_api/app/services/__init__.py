"""
Service layer abstraction.

Each service encapsulates the logic for one concern: the song catalog,
the snapshot file it is persisted to and the visit counter.  API
handlers only talk to these objects, which are created once by the
application factory and shared by every request.
"""
