"""
Data access layer.

Repositories own the SQL for a table and hand pydantic schemas back to
the service layer, which never touches a connection directly.
"""
