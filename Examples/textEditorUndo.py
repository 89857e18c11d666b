from memento import History, TextEditor


def report(label, editor):
    print(f"{label}: {editor.getContent()!r}")


if __name__ == "__main__":
    editor = TextEditor()
    history = History()

    editor.type("Java ")
    history.save(editor)
    editor.type("Design ")
    history.save(editor)
    editor.type("Patterns")
    report("content", editor)
    assert editor.getContent() == "Java Design Patterns"

    history.undo(editor)
    report("1st undo", editor)
    assert editor.getContent() == "Java Design "

    history.undo(editor)
    report("2nd undo", editor)
    assert editor.getContent() == "Java "

    history.redo(editor)
    report("redo", editor)
    assert editor.getContent() == "Java Design "

    # Here the state is saved after each edit, so the first undo lands on the
    # state that was just saved.
    editor = TextEditor()
    history = History()
    editor.type("Hello World")
    history.save(editor)
    editor.type("Hii Bro")
    history.save(editor)
    report("content", editor)

    history.undo(editor)
    report("1st undo", editor)
    assert editor.getContent() == "Hello WorldHii Bro"
    history.undo(editor)
    report("2nd undo", editor)
    assert editor.getContent() == "Hello World"
    assert not history.undo(editor)
    assert editor.getContent() == "Hello World"
