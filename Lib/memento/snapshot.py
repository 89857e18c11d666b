from copy import deepcopy
from functools import singledispatch


class Snapshot:

    """A Snapshot is an immutable capture of an originator's state at one
    point in time.

        >>> s = Snapshot("Java ")
        >>> s.content
        'Java '
        >>> s == Snapshot("Java ")
        True

    Snapshots can't be modified after they have been created:

        >>> s.content = "other"  # doctest: +IGNORE_EXCEPTION_DETAIL
        Traceback (most recent call last):
            ...
        AttributeError: Snapshot is immutable

    Immutable values (strings, numbers, None) are shared by reference.
    Any other value is copied with copyState() when the snapshot is created,
    and again every time the content is read, so neither the originator nor
    the caretaker can change a snapshot behind the other's back:

        >>> state = {"text": "abc"}
        >>> s = Snapshot(state)
        >>> state["text"] = "xyz"
        >>> s.content
        {'text': 'abc'}
        >>> s.content["text"] = "q"
        >>> s.content
        {'text': 'abc'}
    """

    __slots__ = ("_content",)

    def __init__(self, content):
        object.__setattr__(self, "_content", copyState(content))

    @property
    def content(self):
        return copyState(self._content)

    def __setattr__(self, attr, value):
        raise AttributeError(f"{self.__class__.__name__} is immutable")

    def __delattr__(self, attr):
        raise AttributeError(f"{self.__class__.__name__} is immutable")

    def __eq__(self, other):
        if not isinstance(other, Snapshot):
            return NotImplemented
        return self._content == other._content

    def __hash__(self):
        # Unhashable (mutable) content makes an unhashable snapshot, just
        # like it would for a tuple.
        return hash((Snapshot, self._content))

    def __repr__(self):
        return f"{self.__class__.__name__}({self._content!r})"

    def __reduce__(self):
        return (self.__class__, (self._content,))

    def __copy__(self):
        return self

    def __deepcopy__(self, memo):
        return self


@singledispatch
def copyState(state):
    """Return a copy of `state` that can't be modified through the original
    object. This is a deep copy, except for types that were registered as
    atomic (immutable), which are returned as is.
    """
    return deepcopy(state)


def _copyState_atomic(state):
    return state


def registerAtomicType(type):
    """Register a type as immutable: its values will be shared by reference
    instead of being copied when stored in or read from a Snapshot.
    """
    copyState.register(type, _copyState_atomic)


registerAtomicType(str)
registerAtomicType(bytes)
registerAtomicType(int)  # includes bool
registerAtomicType(float)
registerAtomicType(complex)
registerAtomicType(type(None))
registerAtomicType(Snapshot)
