"""
Service layer.

Services hold the business rules and talk to storage only through
repositories, so API handlers never see SQL.
"""
