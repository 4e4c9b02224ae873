"""SQLAlchemy Core table definitions.

Single source of truth for the database schema. Used by ``create_schema``
and by AlbumTable for queries.
"""

import sqlalchemy as sa

metadata = sa.MetaData()

albums = sa.Table(
    "album",
    metadata,
    sa.Column("id", sa.Integer, primary_key=True, autoincrement=True),
    sa.Column("artist", sa.String(100), nullable=False),
    sa.Column("title", sa.String(100), nullable=False),
)
