from typing import Hashable, Sequence, Tuple

# States are opaque to the model: anything hashable (a word, a character, an
# enum member, an int) works.
State = Hashable
Window = Tuple[State, ...]
StateSequence = Sequence[State]
