import pytest

from page_authoring.collections import SlideDraft
from page_authoring.editors.slideshow import SlideshowEditor
from page_authoring.errors import UnknownFieldError
from page_authoring.models.page import Slide, SlideshowPage


def make_editor(**kwargs) -> SlideshowEditor:
    editor = SlideshowEditor(**kwargs)
    editor.present()
    editor.set_field("title", "Holiday")
    return editor


def test_slideshow_round_trip():
    page = SlideshowPage(
        id="42",
        title="Holiday",
        images=[Slide(title="Beach", src="beach.jpg"), Slide(title="Hills", src="hills.jpg")],
    )
    editor = SlideshowEditor()
    editor.load(page)

    assert editor.validate().ok
    assert editor.collect_draft() == page


def test_each_invalid_slide_gets_its_own_message():
    editor = make_editor()
    no_title = editor.add_slide(SlideDraft(title="", src="a.jpg"))
    fine = editor.add_slide(SlideDraft(title="ok", src="b.jpg"))
    no_url = editor.add_slide(SlideDraft(title="c", src=" "))
    empty = editor.add_slide()

    result = editor.validate()

    assert result.errors == {
        no_title.key: "Title is required",
        no_url.key: "URL is required",
        empty.key: "Title is required",
    }
    assert fine.key not in result.errors


def test_removing_middle_slide_keeps_others_editable():
    editor = make_editor()
    first = editor.add_slide(SlideDraft(title="one", src="1.jpg"))
    middle = editor.add_slide(SlideDraft(title="two", src="2.jpg"))
    last = editor.add_slide(SlideDraft(title="three", src="3.jpg"))

    editor.remove_slide(middle)
    editor.set_slide_field(last, "src", "")

    result = editor.validate()
    assert result.errors == {last.key: "URL is required"}

    editor.set_slide_field(last, "src", "3b.jpg")
    editor.set_slide_field(first, "title", "uno")
    page = editor.collect_draft()
    assert page.images == [Slide(title="uno", src="1.jpg"), Slide(title="three", src="3b.jpg")]


def test_empty_slideshow_is_allowed():
    editor = make_editor(id_factory=lambda: "1")

    assert editor.validate().ok
    assert editor.collect_draft().images == []


def test_present_clears_loaded_slides():
    editor = SlideshowEditor()
    editor.load(SlideshowPage(id="1", title="T", images=[Slide(title="a", src="b")]))

    form = editor.present()

    assert len(editor.slides) == 0
    assert form.collections[0].rows == []
    assert form.collections[0].add_label == "Add Slide"


def test_slide_errors_show_on_rows():
    editor = make_editor()
    handle = editor.add_slide()

    form = editor.view(editor.validate().errors)

    row = form.collections[0].rows[0]
    assert row.handle == handle.key
    assert row.error == "Title is required"


def test_unknown_slide_field_is_rejected():
    editor = make_editor()
    handle = editor.add_slide()

    with pytest.raises(UnknownFieldError):
        editor.set_slide_field(handle, "url", "a.jpg")
