"""MIDI note events and the held-note stack used for monophonic voice handling."""

from __future__ import annotations

import copy
from collections import deque
from collections.abc import Iterator


class MidiNoteEvent:
    """A MIDI note: key and velocity in 0...127, detune in semitones, a priority >= 0.

    Out-of-range values given to the constructor fall back to the defaults;
    out-of-range values assigned later are ignored. Two events are equal when
    their keys are equal.
    """

    DEFAULT_KEY = 64
    DEFAULT_VELOCITY = 64

    def __init__(
        self,
        key: int = DEFAULT_KEY,
        velocity: int = DEFAULT_VELOCITY,
        detune: float = 0.0,
        priority: int = 0,
    ) -> None:
        self._key = key if 0 <= key <= 127 else self.DEFAULT_KEY
        self._velocity = velocity if 0 <= velocity <= 127 else self.DEFAULT_VELOCITY
        self._priority = priority if priority >= 0 else 0
        self.detune = detune

    @property
    def key(self) -> int:
        return self._key

    @key.setter
    def key(self, value: int) -> None:
        if 0 <= value <= 127:
            self._key = value

    @property
    def velocity(self) -> int:
        return self._velocity

    @velocity.setter
    def velocity(self, value: int) -> None:
        if 0 <= value <= 127:
            self._velocity = value

    @property
    def priority(self) -> int:
        return self._priority

    @priority.setter
    def priority(self, value: int) -> None:
        if value >= 0:
            self._priority = value

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, MidiNoteEvent):
            return NotImplemented
        return self._key == other._key

    __hash__ = None  # type: ignore[assignment]

    def __repr__(self) -> str:
        return (
            f"MidiNoteEvent(key={self._key}, velocity={self._velocity}, "
            f"detune={self.detune}, priority={self._priority})"
        )


class MidiNoteList:
    """A bounded stack of held notes; the most recently pushed note is the front.

    When full, pushing a note drops the oldest one.
    """

    CAPACITY = 128

    def __init__(self) -> None:
        self._notes: deque[MidiNoteEvent] = deque(maxlen=self.CAPACITY)

    def clear(self) -> None:
        """Forget all held notes."""
        self._notes.clear()

    @property
    def empty(self) -> bool:
        return not self._notes

    def __len__(self) -> int:
        return len(self._notes)

    def __bool__(self) -> bool:
        return bool(self._notes)

    def __iter__(self) -> Iterator[MidiNoteEvent]:
        """Iterate from the most recent note to the oldest."""
        return reversed(self._notes)

    def front(self) -> MidiNoteEvent:
        """Return the most recently pushed note."""
        if not self._notes:
            raise IndexError("front of an empty note list")
        return self._notes[-1]

    def push_front(self, note: MidiNoteEvent) -> None:
        """Store a copy of ``note`` as the most recent entry."""
        self._notes.append(copy.copy(note))

    def remove(self, note: MidiNoteEvent) -> None:
        """Remove the oldest entry with the same key as ``note``, if any."""
        try:
            self._notes.remove(note)
        except ValueError:
            pass