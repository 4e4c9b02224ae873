"""Tests for the Album record."""

from albums.persistence.models import Album


class TestAlbumDefaults:
    def test_defaults(self):
        album = Album()
        assert album.id is None
        assert album.artist is None
        assert album.title is None
        assert album.is_new

    def test_zero_id_is_new(self):
        assert Album(id=0, artist="Adele", title="21").is_new

    def test_persisted_id_is_not_new(self):
        assert not Album(id=7, artist="Adele", title="21").is_new


class TestFromDict:
    def test_reads_all_fields(self):
        album = Album.from_dict({"id": 3, "artist": "Gotye", "title": "Making Mirrors"})
        assert album.id == 3
        assert album.artist == "Gotye"
        assert album.title == "Making Mirrors"

    def test_missing_keys_keep_defaults(self):
        album = Album.from_dict({"artist": "Adele"})
        assert album.id is None
        assert album.artist == "Adele"
        assert album.title is None

    def test_unknown_keys_ignored(self):
        album = Album.from_dict({"id": 1, "artist": "A", "title": "T", "genre": "pop"})
        assert album == Album(id=1, artist="A", title="T")
        assert not hasattr(album, "genre")

    def test_empty_mapping(self):
        assert Album.from_dict({}) == Album()

    def test_each_call_builds_a_fresh_album(self):
        row = {"id": 1, "artist": "A", "title": "T"}
        first = Album.from_dict(row)
        second = Album.from_dict(row)
        assert first == second
        assert first is not second


class TestExchange:
    def test_overwrites_in_place(self):
        album = Album(id=1, artist="Old", title="Old")
        album.exchange({"id": 2, "artist": "New", "title": "New"})
        assert album == Album(id=2, artist="New", title="New")

    def test_missing_keys_reset_fields(self):
        album = Album(id=1, artist="Adele", title="21")
        album.exchange({"title": "25"})
        assert album.id is None
        assert album.artist is None
        assert album.title == "25"


class TestSerialization:
    def test_to_dict(self):
        album = Album(id=5, artist="Lana Del Rey", title="Born To Die")
        assert album.to_dict() == {"id": 5, "artist": "Lana Del Rey", "title": "Born To Die"}

    def test_round_trip(self):
        for album in [
            Album(),
            Album(id=1, artist="Adele", title="21"),
            Album(id=42, artist="Bruce Springsteen", title="Wrecking Ball (Deluxe)"),
            Album(artist="Ünïcödé", title="<b>&</b>"),
        ]:
            assert Album.from_dict(album.to_dict()) == album
