from .snapshot import Snapshot


class TextEditor:

    """A TextEditor is the originator: it owns a piece of text that can be
    extended with type(), captured with save() and put back with restore().

        >>> editor = TextEditor()
        >>> editor.type("Java ")
        >>> snapshot = editor.save()
        >>> editor.type("Design ")
        >>> editor.getContent()
        'Java Design '
        >>> editor.restore(snapshot)
        >>> editor.getContent()
        'Java '
    """

    def __init__(self, content=""):
        if not isinstance(content, str):
            raise TypeError(f"content must be str, not {type(content).__name__}")
        self._content = content

    def __repr__(self):
        return f"{self.__class__.__name__}({self._content!r})"

    @property
    def content(self):
        return self._content

    def getContent(self):
        """Return the current text."""
        return self._content

    def type(self, words):
        """Append `words` to the current text."""
        if not isinstance(words, str):
            raise TypeError(f"words must be str, not {type(words).__name__}")
        self._content += words

    def save(self):
        """Return a Snapshot of the current text. The editor is not modified."""
        return Snapshot(self._content)

    def restore(self, snapshot):
        """Set the current text to the text captured by `snapshot`. A snapshot
        that doesn't hold text raises TypeError, and the editor is left as it
        was.
        """
        content = snapshot.content
        if not isinstance(content, str):
            raise TypeError(f"not a text snapshot: {snapshot!r}")
        self._content = content
