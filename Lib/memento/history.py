import logging
import threading


logger = logging.getLogger(__name__)


class HistoryError(Exception):
    pass


class History:

    """A History is the caretaker: it manages a stack of undo snapshots and a
    stack of redo snapshots for an originator, without ever looking inside
    the snapshots.

        >>> from memento import TextEditor
        >>> editor = TextEditor()
        >>> history = History()

    Before each edit, the state of the editor is saved with save():

        >>> editor.type("Java ")
        >>> history.save(editor)
        >>> editor.type("Design ")
        >>> history.save(editor)
        >>> editor.type("Patterns")
        >>> editor.getContent()
        'Java Design Patterns'

    undo() puts back the most recently saved state. The state it moved away
    from becomes available for redo():

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

    Doing undo or redo when its respective stack is empty does nothing, and
    returns False:

        >>> History().undo(editor)
        False
        >>> editor.getContent()
        'Java Design '

    Saving a new state discards the redo stack:

        >>> history.save(editor)
        >>> history.canRedo()
        False

    The editor is passed to every call, and can be any object with a save()
    method returning a Snapshot and a restore(snapshot) method. The History
    never holds on to it.

    History() has two optional arguments. `maxHistory` limits the number of
    snapshots kept on the undo stack: when save() would exceed it, the oldest
    snapshot is dropped. The default (None) is unbounded. `changeMonitor`
    should be a callable taking one positional argument. It will be called
    with every snapshot that is saved or applied via undo() or redo(). This
    mechanism can be used to trigger view updates in a GUI application.
    """

    def __init__(self, maxHistory=None, changeMonitor=None):
        if maxHistory is not None:
            if isinstance(maxHistory, bool) or not isinstance(maxHistory, int):
                raise HistoryError(f"maxHistory must be an int or None, not {maxHistory!r}")
            if maxHistory < 1:
                raise HistoryError(f"maxHistory must be at least 1, not {maxHistory}")
        self.undoStack = []
        self.redoStack = []
        self.maxHistory = maxHistory
        self._changeMonitor = changeMonitor
        self._lock = threading.Lock()

    def __repr__(self):
        return (f"{self.__class__.__name__}(undo={len(self.undoStack)}, "
                f"redo={len(self.redoStack)}, maxHistory={self.maxHistory})")

    def save(self, editor):
        """Push the current state of `editor` onto the undo stack, and clear
        the redo stack: a new edit invalidates whatever could be redone.
        """
        with self._lock:
            snapshot = editor.save()
            if self.maxHistory is not None:
                while len(self.undoStack) >= self.maxHistory:
                    evicted = self.undoStack.pop(0)
                    logger.debug("evicted oldest snapshot %r", evicted)
            self.undoStack.append(snapshot)
            self.redoStack.clear()
            logger.debug("saved %r (undo=%d)", snapshot, len(self.undoStack))
        if self._changeMonitor is not None:
            self._changeMonitor(snapshot)

    def undo(self, editor):
        """Restore `editor` to the snapshot on the top of the undo stack, and
        make its current state redoable.

        Return True if something was undone, False if the undo stack was empty.
        If editor.restore() raises, the exception propagates and both stacks
        are left as they were.
        """
        return self._performUndo(editor, self.undoStack, self.redoStack, "undo")

    def redo(self, editor):
        """Restore `editor` to the snapshot on the top of the redo stack, and
        make its current state undoable.

        Return True if something was redone, False if the redo stack was empty.
        """
        return self._performUndo(editor, self.redoStack, self.undoStack, "redo")

    def _performUndo(self, editor, popStack, pushStack, action):
        with self._lock:
            if not popStack:
                logger.debug("nothing to %s", action)
                return False
            # The stacks only change once restore() has succeeded.
            current = editor.save()
            snapshot = popStack[-1]
            editor.restore(snapshot)
            popStack.pop()
            pushStack.append(current)
            logger.debug("%s to %r (undo=%d, redo=%d)", action, snapshot,
                         len(self.undoStack), len(self.redoStack))
        if self._changeMonitor is not None:
            self._changeMonitor(snapshot)
        return True

    def canUndo(self):
        return bool(self.undoStack)

    def canRedo(self):
        return bool(self.redoStack)

    def clear(self):
        """Forget all undo and redo snapshots. Originators are not affected."""
        with self._lock:
            self.undoStack.clear()
            self.redoStack.clear()
        logger.debug("cleared history")
