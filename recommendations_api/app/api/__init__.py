"""
HTTP routes, grouped by API version.

Each version subpackage exposes a ``router`` that ``main`` mounts
under ``/api/<version>``.
"""
