# Routes package init
"""
Blog Management API — API Routes Package
=========================================

What:  HTTP route handlers that accept requests and return responses.

Route Inventory (blog routes are mounted under API_PREFIX, default /api):
    - blog_posts.py: POST   /blog-post         (create)
                     GET    /blog-post         (list)
                     GET    /blog-post/{id}    (get one)
                     PATCH  /blog-post/{id}    (partial update)
                     DELETE /blog-post/{id}    (soft delete)
    - health.py:     GET    /health            (liveness check)

Routes are thin: parse the request, call the service, pick the status code.
"""
