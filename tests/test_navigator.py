from spellnav.buffer import Position
from spellnav.navigator import AddWordResult, MisspellingNavigator, clean_word_list, trim_selection


def _selection(buf):
    start, end = buf.get_selection()
    return (start.line, start.column), (end.line, end.column)


def test_scan_selects_then_corrects_preserving_case(make_buffer, make_checker):
    checker = make_checker(misspelled={"Teh"}, suggestions={"Teh": ["the", "ten"]})
    nav = MisspellingNavigator(checker)
    buf = make_buffer("Teh cat sat.")

    assert nav.primary_action(buf) == "found"
    assert buf.get_selected_text() == "Teh"
    assert buf.scrolled == [(Position(0, 0), Position(0, 3))]

    assert nav.primary_action(buf) == "corrected"
    assert buf.content == "The cat sat."
    assert _selection(buf) == ((0, 0), (0, 3))
    assert buf.get_selected_text() == "The"


def test_corrected_word_is_not_replaced_again(make_buffer, make_checker):
    checker = make_checker(misspelled={"Teh"}, suggestions={"Teh": ["The"]})
    nav = MisspellingNavigator(checker)
    buf = make_buffer("Teh cat sat.")
    nav.primary_action(buf)
    nav.primary_action(buf)

    assert nav.primary_action(buf) == "clean"
    assert buf.content == "The cat sat."
    assert _selection(buf) == ((0, 12), (0, 12))


def test_no_suggestions_ignores_word_until_paragraph_is_clean(make_buffer, make_checker):
    checker = make_checker(misspelled={"Teh"})
    nav = MisspellingNavigator(checker)
    buf = make_buffer("Teh Teh cat.").select((0, 0), (0, 3))

    assert nav.primary_action(buf) == "ignored"
    assert nav.ignored == {"teh"}
    assert _selection(buf) == ((0, 3), (0, 3))
    assert buf.content == "Teh Teh cat."

    assert nav.primary_action(buf) == "clean"
    assert nav.ignored == set()
    assert _selection(buf) == ((0, 12), (0, 12))


def test_ignored_word_does_not_trigger_scan_in_same_call(make_buffer, make_checker):
    checker = make_checker(misspelled={"Teh", "wurd"})
    nav = MisspellingNavigator(checker)
    buf = make_buffer("Teh wurd").select((0, 0), (0, 3))

    assert nav.primary_action(buf) == "ignored"
    assert buf.get_selected_text() == ""

    assert nav.primary_action(buf) == "found"
    assert buf.get_selected_text() == "wurd"
    assert nav.ignored == {"teh"}


def test_selection_is_trimmed_to_word_bounds(make_buffer, make_checker):
    checker = make_checker(misspelled={"teh"}, suggestions={"teh": ["the"]})
    nav = MisspellingNavigator(checker)
    buf = make_buffer("a  teh,  b").select((0, 1), (0, 9))
    assert buf.get_selected_text() == "  teh,  "

    assert nav.primary_action(buf) == "corrected"
    assert checker.checked == ["teh"]
    assert buf.content == "a  the,  b"
    assert _selection(buf) == ((0, 3), (0, 6))


def test_trim_selection_across_lines():
    trimmed = trim_selection("\n\n  bar.\n", Position(1, 4))
    assert trimmed.word == "bar"
    assert trimmed.start == Position(3, 2)
    assert trimmed.end == Position(3, 5)


def test_correctly_spelled_selection_falls_through_to_scan(make_buffer, make_checker):
    checker = make_checker(misspelled={"wurd"})
    nav = MisspellingNavigator(checker)
    buf = make_buffer("good wurd").select((0, 0), (0, 4))

    assert nav.primary_action(buf) == "found"
    assert _selection(buf) == ((0, 5), (0, 9))


def test_scan_maps_offsets_on_later_lines(make_buffer, make_checker):
    checker = make_checker(misspelled={"wurd"})
    nav = MisspellingNavigator(checker)
    buf = make_buffer("Intro\n\nGood line\nwith wurd here", line=2)

    assert nav.primary_action(buf) == "found"
    assert _selection(buf) == ((3, 5), (3, 9))


def test_scan_skips_acronyms_digits_and_custom_words(make_buffer, make_checker):
    checker = make_checker(misspelled={"NASA", "b4", "zorp", "wurd"})
    nav = MisspellingNavigator(checker, custom_words=["Zorp"])
    buf = make_buffer("NASA b4 zorp wurd")

    assert nav.primary_action(buf) == "found"
    assert buf.get_selected_text() == "wurd"


def test_scan_on_blank_line_is_noop(make_buffer, make_checker):
    nav = MisspellingNavigator(make_checker(misspelled={"teh"}))
    buf = make_buffer("teh\n\nteh", line=1)

    assert nav.primary_action(buf) == "no_paragraph"
    assert _selection(buf) == ((1, 0), (1, 0))


def test_clean_scan_is_idempotent(make_buffer, make_checker):
    persisted = []
    nav = MisspellingNavigator(make_checker(), custom_words=["foo"], persist=persisted.append)
    buf = make_buffer("All words fine here.\nSecond line", line=1, column=2)

    assert nav.primary_action(buf) == "clean"
    assert _selection(buf) == ((1, 11), (1, 11))
    assert nav.primary_action(buf) == "clean"
    assert nav.custom_words == ["foo"]
    assert persisted == []


def test_scroll_failure_is_swallowed(make_buffer, make_checker):
    nav = MisspellingNavigator(make_checker(misspelled={"wurd"}))
    buf = make_buffer("a wurd")
    buf.scroll_error = RuntimeError("no view")

    assert nav.primary_action(buf) == "found"
    assert buf.get_selected_text() == "wurd"


def test_without_dictionary_every_action_is_clean(make_buffer):
    nav = MisspellingNavigator(None)
    buf = make_buffer("Teh cat sat.\nxyzzy", column=1)
    assert nav.primary_action(buf) == "clean"
    assert _selection(buf) == ((0, 12), (0, 12))

    buf.select((0, 0), (0, 3))
    assert nav.primary_action(buf) == "clean"
    assert buf.content == "Teh cat sat.\nxyzzy"


def test_set_checker_swaps_reference(make_buffer, make_checker):
    nav = MisspellingNavigator(None)
    buf = make_buffer("a wurd")
    assert nav.primary_action(buf) == "clean"

    nav.set_checker(make_checker(misspelled={"wurd"}))
    assert nav.primary_action(buf) == "found"


def test_add_to_custom_once(make_buffer, make_checker):
    persisted = []
    nav = MisspellingNavigator(make_checker(), persist=persisted.append)
    buf = make_buffer("NASA rocks").select((0, 0), (0, 4))

    first = nav.add_selection_to_custom(buf)
    assert first == AddWordResult("added", "NASA")
    assert first.message == 'Added "NASA" to custom dictionary.'

    second = nav.add_selection_to_custom(buf)
    assert second.status == "already_present"
    assert second.message == '"NASA" is already in your custom dictionary.'

    assert nav.custom_words == ["nasa"]
    assert persisted == [["nasa"]]
    assert buf.content == "NASA rocks"
    assert nav.ignored == set()


def test_added_word_is_never_misspelled(make_buffer, make_checker):
    checker = make_checker(misspelled={"Wurd", "wurd", "WURD", "wUrd"})
    nav = MisspellingNavigator(checker)
    buf = make_buffer("(Wurd)").select((0, 0), (0, 6))

    assert nav.add_selection_to_custom(buf).ok
    for variant in ("Wurd", "wurd", "WURD", "wUrd", "wurd,"):
        assert nav.is_misspelled(variant) is False


def test_add_to_custom_rejects_empty_and_non_words(make_buffer, make_checker):
    nav = MisspellingNavigator(make_checker())

    empty = nav.add_selection_to_custom(make_buffer("abc"))
    assert empty.status == "empty_selection"

    blank = nav.add_selection_to_custom(make_buffer("a   b").select((0, 1), (0, 4)))
    assert blank.status == "empty_selection"

    digits = nav.add_selection_to_custom(make_buffer("x 1234 y").select((0, 2), (0, 6)))
    assert digits.status == "not_a_word"
    assert digits.message == "That selection doesn't look like a word."
    assert nav.custom_words == []


def test_custom_words_from_settings_are_cleaned(make_checker):
    nav = MisspellingNavigator(make_checker(), custom_words=[" Foo ", "", "foo", "Bar"])
    assert nav.custom_words == ["foo", "bar"]
    assert nav.custom == {"foo", "bar"}


def test_replace_and_clear_custom_words(make_checker):
    persisted = []
    checker = make_checker(misspelled={"zorp"})
    nav = MisspellingNavigator(checker, custom_words=["old"], persist=persisted.append)

    assert nav.replace_custom_words(["Zorp", "zorp", " ", "New"]) == ["zorp", "new"]
    assert nav.is_misspelled("zorp") is False

    nav.clear_custom_words()
    assert nav.custom_words == []
    assert nav.is_misspelled("zorp") is True
    assert persisted == [["zorp", "new"], []]


def test_shutdown_drops_checker_and_ignores(make_buffer, make_checker):
    nav = MisspellingNavigator(make_checker(misspelled={"Teh"}))
    nav.primary_action(make_buffer("Teh").select((0, 0), (0, 3)))
    assert nav.ignored == {"teh"}

    nav.shutdown()
    assert nav.checker is None
    assert nav.ignored == set()


def test_clean_word_list_skips_non_strings():
    assert clean_word_list(["A", 3, None, "a", "b "]) == ["a", "b"]
