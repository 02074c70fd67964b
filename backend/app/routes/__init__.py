# Routes package init
"""
PostSearch Backend: API Routes Package
========================================

Route Inventory:
    - posts.py:   GET    /posts           (list posts)
                  POST   /posts           (create post)
                  GET    /posts/{id}      (show post)
                  POST   /posts/{id}      (update post)
                  DELETE /posts/{id}      (delete post)
    - health.py:  GET    /health          (service health check)

Routes stay thin: pull parameters from the request, call the controller,
return its result. Status mapping for failures lives in main.py.
"""
