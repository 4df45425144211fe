"""TeamIn package.

Team presence tracking organized by feature modules (users, presence,
dashboard) with a thin Flask JSON controller layer over service/repository
layers.
"""
