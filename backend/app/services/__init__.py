# Services package init
"""
Blog Management API — Services Layer
=====================================

What:  Business logic layer sitting between routes (HTTP) and repositories.
How:   Services receive a repository, apply business rules, and return
       response schemas. Routes build them per request via Depends().

Service Inventory:
    - BlogPostService: validation, id/timestamp assignment, PATCH merge
"""
