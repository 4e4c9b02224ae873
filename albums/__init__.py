"""
Album Catalogue - a small CRUD web application over a single ``album`` table.

The data layer is a table gateway (``AlbumTable``) built on SQLAlchemy Core;
the web layer is FastAPI with Jinja2 views and a JSON API.
"""

__version__ = "0.1.0"
