from wakabox.view.merge import merge_box

BOX = "```wakatime\nPython     1 hr     " + "█" * 20 + "     100 %\n```"
OLD_BOX = "```wakatime\nGo     2 mins     " + "░" * 20 + "     1 %\n```"


def test_merge_appends_when_no_box():
    document = "# 2024-01-15\n\nsome notes\n"
    assert merge_box(document, BOX) == document + BOX


def test_merge_into_empty_document():
    assert merge_box("", BOX) == BOX


def test_merge_replaces_existing_box_only():
    document = f"# Today\n\n{OLD_BOX}\n\n## Afterwards\n"
    assert merge_box(document, BOX) == f"# Today\n\n{BOX}\n\n## Afterwards\n"


def test_merge_is_idempotent():
    documents = [
        "",
        "plain text",
        f"before\n{OLD_BOX}\nafter",
        f"{OLD_BOX}",
        "```python\nprint(1)\n```\n",
    ]
    for document in documents:
        once = merge_box(document, BOX)
        assert merge_box(once, BOX) == once


def test_merge_replacement_is_greedy_to_last_fence():
    document = f"intro\n{OLD_BOX}\n```python\nprint(1)\n```\ntail"
    assert merge_box(document, BOX) == f"intro\n{BOX}\ntail"


def test_merge_leaves_unterminated_box_untouched():
    document = "notes\n```wakatime\nhalf written"
    assert merge_box(document, BOX) == document


def test_merge_box_with_backslashes_is_inserted_literally():
    box = "```wakatime\nC\\d     1 min     ░     1 %\n```"
    assert merge_box(f"x {OLD_BOX} y", box) == f"x {box} y"
