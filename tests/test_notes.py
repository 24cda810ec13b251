import pytest

from acidvoice.notes import MidiNoteEvent, MidiNoteList


def test_default_event():
    note = MidiNoteEvent()
    assert (note.key, note.velocity, note.detune, note.priority) == (64, 64, 0.0, 0)


@pytest.mark.parametrize("key,velocity,priority", [(-1, 200, -3), (128, -1, -1)])
def test_invalid_constructor_values_fall_back(key, velocity, priority):
    note = MidiNoteEvent(key, velocity, 0.0, priority)
    assert note.key == 64
    assert note.velocity == 64
    assert note.priority == 0


def test_valid_constructor_values_kept():
    note = MidiNoteEvent(0, 127, 0.5, 3)
    assert (note.key, note.velocity, note.detune, note.priority) == (0, 127, 0.5, 3)


def test_invalid_assignments_are_ignored():
    note = MidiNoteEvent(60, 100)
    note.key = 128
    note.velocity = -5
    note.priority = -1
    assert (note.key, note.velocity, note.priority) == (60, 100, 0)
    note.key = 127
    note.velocity = 0
    assert (note.key, note.velocity) == (127, 0)


def test_equality_by_key_only():
    assert MidiNoteEvent(60, 10) == MidiNoteEvent(60, 120, 1.0, 5)
    assert not MidiNoteEvent(60, 10) == MidiNoteEvent(61, 10)


def test_empty_list():
    notes = MidiNoteList()
    assert notes.empty
    assert len(notes) == 0
    with pytest.raises(IndexError):
        notes.front()


def test_push_front_makes_most_recent_the_front():
    notes = MidiNoteList()
    notes.push_front(MidiNoteEvent(60, 100))
    notes.push_front(MidiNoteEvent(64, 90))
    assert notes.front().key == 64
    assert [n.key for n in notes] == [64, 60]


def test_push_stores_a_copy():
    notes = MidiNoteList()
    event = MidiNoteEvent(60, 100)
    notes.push_front(event)
    event.key = 70
    assert notes.front().key == 60


def test_remove_front_reveals_previous_note():
    notes = MidiNoteList()
    notes.push_front(MidiNoteEvent(60, 100))
    notes.push_front(MidiNoteEvent(64, 90))
    notes.remove(MidiNoteEvent(64, 0))
    assert notes.front().key == 60
    assert notes.front().velocity == 100
    assert len(notes) == 1


def test_remove_oldest_duplicate_first():
    notes = MidiNoteList()
    notes.push_front(MidiNoteEvent(60, 10))
    notes.push_front(MidiNoteEvent(62, 20))
    notes.push_front(MidiNoteEvent(60, 30))
    notes.remove(MidiNoteEvent(60, 0))
    assert [(n.key, n.velocity) for n in notes] == [(60, 30), (62, 20)]


def test_remove_missing_key_changes_nothing():
    notes = MidiNoteList()
    notes.push_front(MidiNoteEvent(60, 100))
    notes.remove(MidiNoteEvent(61, 0))
    assert len(notes) == 1
    assert notes.front().key == 60


def test_full_list_drops_oldest():
    notes = MidiNoteList()
    for key in range(128):
        notes.push_front(MidiNoteEvent(key, 100))
    assert len(notes) == 128
    notes.push_front(MidiNoteEvent(5, 1))
    assert len(notes) == 128
    assert notes.front().velocity == 1
    assert list(notes)[-1].key == 1


def test_clear_empties_list():
    notes = MidiNoteList()
    notes.push_front(MidiNoteEvent(60, 100))
    notes.clear()
    assert notes.empty
    assert not notes