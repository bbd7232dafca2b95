# Repositories package init
"""
Blog Management API — Repository Layer
=======================================

What:  Persistence operations over the `blog_posts` table.
How:   Each repository method maps to exactly one SQL statement and turns
       "no row" into NotFoundError and driver failures into DatabaseError.

Repository Inventory:
    - BlogPostRepositoryBase (abstract): The five-operation contract
    - BlogPostRepository: SQLAlchemy AsyncSession implementation
"""
