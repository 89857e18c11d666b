"""# memento

A small library to implement undo and redo with snapshots of an object's
state, also known as the Memento pattern.

Three objects work together:

- the originator owns some state, and knows how to capture it in a snapshot
  and how to put a snapshot back. `TextEditor` is an originator for a piece of
  text.
- a `Snapshot` is an immutable capture of that state at one point in time.
- the caretaker, `History`, keeps an undo stack and a redo stack of snapshots
  and moves them around when undo or redo is requested. It never looks inside
  a snapshot.

The originator is passed to each `History` call. Here is an example:

    >>> editor = TextEditor()
    >>> history = History()
    >>> editor.type("Java ")
    >>> history.save(editor)
    >>> editor.type("Design ")
    >>> history.save(editor)
    >>> editor.type("Patterns")
    >>> editor.getContent()
    'Java Design Patterns'
    >>> history.undo(editor)
    True
    >>> editor.getContent()
    'Java Design '
    >>> history.undo(editor)
    True
    >>> editor.getContent()
    'Java '
    >>> history.redo(editor)
    True
    >>> editor.getContent()
    'Java Design '

Any object with a `save()` method returning a `Snapshot` and a
`restore(snapshot)` method can be used instead of `TextEditor`. Snapshots of
mutable state (lists, dicts, other objects) are deep-copied, so a snapshot
always keeps the state it was created with. See the Examples folder for more.
"""

from .editor import TextEditor
from .history import History, HistoryError
from .snapshot import Snapshot

__all__ = ["History", "HistoryError", "Snapshot", "TextEditor"]

try:
    from ._version import version as __version__
except ImportError:
    __version__ = "<unknown>"
