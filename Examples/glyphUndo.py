from dataclasses import dataclass, field
from memento import History, Snapshot


@dataclass
class Point:

    x: float
    y: float
    type: str = "line"
    smooth: bool = False


@dataclass
class Glyph:

    """A Glyph is an originator with nested, mutable state. Its snapshots
    are deep copies, so editing the glyph in place doesn't affect them.
    """

    width: float = 0
    contours: list = field(default_factory=list)

    def save(self):
        return Snapshot((self.width, self.contours))

    def restore(self, snapshot):
        self.width, self.contours = snapshot.content


if __name__ == "__main__":
    glyph = Glyph(width=200)
    history = History(maxHistory=10)

    history.save(glyph)
    glyph.contours.append([Point(100, 100), Point(100, 200), Point(200, 200), Point(200, 100)])
    assert len(glyph.contours) == 1
    assert len(glyph.contours[0]) == 4

    history.save(glyph)
    glyph.contours.append([Point(100, 300)])
    for pt in [Point(100, 400), Point(200, 400), Point(200, 300)]:
        history.save(glyph)
        glyph.contours[-1].append(pt)
    assert len(glyph.contours[1]) == 4

    history.undo(glyph)
    assert len(glyph.contours[1]) == 3
    history.redo(glyph)
    assert len(glyph.contours[1]) == 4

    history.save(glyph)
    glyph.contours[1][2].x += 30
    glyph.contours[1][2].y += 30
    assert glyph.contours[1][2] == Point(230, 430)

    history.undo(glyph)
    assert glyph.contours[1][2] == Point(200, 400)

    history.save(glyph)
    glyph.contours[1].insert(2, Point(150, 430))
    assert glyph.contours[1][2] == Point(150, 430)
    assert len(glyph.contours[1]) == 5

    history.undo(glyph)
    assert len(glyph.contours[1]) == 4

    history.save(glyph)
    glyph.width = 300
    history.undo(glyph)
    assert glyph.width == 200
    print(f"{len(history.undoStack)} undo steps, {len(history.redoStack)} redo steps")
