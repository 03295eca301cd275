from services.music_filter import filter_music_events, is_music_event


def _ev(name, segment=None, genre=None, sub=None):
    cls = {}
    if segment:
        cls["segment"] = {"name": segment}
    if genre:
        cls["genre"] = {"name": genre}
    if sub:
        cls["subGenre"] = {"name": sub}
    return {"id": name, "name": name, "classifications": [cls] if cls else []}


def test_hamilton_under_arts_and_theatre_is_excluded():
    # name hits "hamilton" and nothing in the classification says music
    e = {"id": "1", "name": "Hamilton",
         "classifications": [{"segment": {"name": "Arts & Theatre"}}]}
    assert filter_music_events([e]) == []


def test_music_segment_keeps_theatre_named_event():
    e = _ev("Broadway Rocks Live", segment="MUSIC")
    assert is_music_event(e)


def test_genre_substring_keeps_event():
    assert is_music_event(_ev("The Musical Box", genre="Progressive Rock"))
    assert is_music_event(_ev("Theater of Hip-Hop", genre="Hip-Hop/Rap"))


def test_subgenre_substring_keeps_event():
    assert is_music_event(_ev("Harry Potter in Concert", sub="Pop"))


def test_plain_name_passes_even_without_classification():
    assert is_music_event(_ev("Monday Karaoke", segment="Miscellaneous"))


def test_strict_mode_drops_unclassified_names():
    e = _ev("Monday Karaoke", segment="Miscellaneous")
    assert not is_music_event(e, strict=True)
    assert is_music_event(_ev("Jazz Brunch", genre="Jazz"), strict=True)


def test_missing_fields_do_not_break_filter():
    assert is_music_event({})
    assert is_music_event({"name": None, "classifications": None})
    assert not is_music_event({"name": "Theatre Night", "classifications": [None]})


def test_filter_keeps_order_and_is_idempotent():
    events = [
        _ev("Band A", segment="Music"),
        _ev("Wicked the Musical", segment="Arts & Theatre"),
        _ev("Band B"),
        _ev("Broadway Bash", genre="Country"),
        _ev("Theatre Gala"),
    ]
    once = filter_music_events(events)
    assert [e["name"] for e in once] == ["Band A", "Band B", "Broadway Bash"]
    assert filter_music_events(once) == once
    strict = filter_music_events(events, strict=True)
    assert filter_music_events(strict, strict=True) == strict


def test_only_top_level_classification_counts():
    e = {"id": "1", "name": "Hamilton",
         "classifications": [{"segment": {"name": "Arts & Theatre"}},
                             {"segment": {"name": "Music"}, "genre": {"name": "Rock"}}]}
    assert not is_music_event(e)
    assert filter_music_events([e]) == []
