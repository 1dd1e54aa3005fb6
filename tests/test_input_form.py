import pytest

from gomato.input_form import Back, TaskCreated, TaskInputForm, TextField
from gomato.styles import strip_styles


def _type(form, text):
    for char in text:
        assert form.handle_key(char) is None


def test_initial_focus_is_title():
    form = TaskInputForm()
    assert form.focused == 0
    assert form.fields[0].focused is True
    assert form.fields[1].focused is False


def test_typing_goes_to_focused_field():
    form = TaskInputForm()
    _type(form, "write report")
    assert form.fields[0].value == "write report"
    assert form.fields[1].value == ""


def test_submit_flow_returns_task_created():
    form = TaskInputForm()
    _type(form, "title text")
    assert form.handle_key("enter") is None
    _type(form, "details here")
    assert form.handle_key("enter") is None
    assert form.focused == 2
    assert form.handle_key("enter") == TaskCreated("title text", "details here")


@pytest.mark.parametrize("key", ["esc", "ctrl+c"])
def test_cancel_returns_back(key):
    form = TaskInputForm()
    _type(form, "abc")
    assert form.handle_key(key) == Back()


@pytest.mark.parametrize("key", ["tab", "ctrl+n"])
def test_next_cycles_through_fields_and_button(key):
    form = TaskInputForm()
    seen = []
    for _ in range(3):
        form.handle_key(key)
        seen.append(form.focused)
    assert seen == [1, 2, 0]
    assert form.fields[0].focused is True


@pytest.mark.parametrize("key", ["shift+tab", "ctrl+p"])
def test_previous_wraps_to_button(key):
    form = TaskInputForm()
    form.handle_key(key)
    assert form.focused == 2
    assert not any(field.focused for field in form.fields)
    form.handle_key(key)
    assert form.focused == 1
    assert form.fields[1].focused is True


def test_typing_on_button_changes_nothing():
    form = TaskInputForm()
    form.handle_key("shift+tab")
    _type(form, "zzz")
    assert [field.value for field in form.fields] == ["", ""]


def test_char_limit_is_enforced():
    form = TaskInputForm()
    _type(form, "a" * 200)
    assert len(form.fields[0].value) == 156


def test_backspace_deletes_last_character():
    form = TaskInputForm()
    _type(form, "abc")
    form.handle_key("backspace")
    assert form.fields[0].value == "ab"


def test_view_contents():
    form = TaskInputForm()
    plain = strip_styles(form.view())
    assert plain.startswith("Create a new task\n\n")
    assert "> Create" in plain
    assert plain.endswith("(press esc to cancel)")
    assert "Title" in plain
    assert "Description" in plain


def test_view_highlights_button_when_focused():
    form = TaskInputForm()
    before = form.view()
    form.handle_key("shift+tab")
    after = form.view()
    assert "> Create" in before
    assert "> Create" not in after
    assert "> Create" in strip_styles(after)


def test_text_field_cursor_editing():
    field = TextField(focused=True)
    for char in "held":
        field.handle_key(char)
    field.handle_key("left")
    field.handle_key("left")
    field.handle_key("l")
    assert field.value == "hellld"[:0] + "helld" or field.value == "helld"
    assert field.value == "helld"
    field.handle_key("home")
    field.handle_key("delete")
    assert field.value == "elld"
    field.handle_key("end")
    assert field.position == len(field.value)


def test_unfocused_field_ignores_keys():
    field = TextField()
    assert field.handle_key("x") is False
    assert field.value == ""


def test_set_value_truncates_and_moves_cursor():
    field = TextField(char_limit=3)
    field.set_value("12345")
    assert field.value == "123"
    assert field.position == 3


def test_validate_records_error_but_keeps_value():
    def numeric(text):
        if text and not text.isdigit():
            raise ValueError("must be a number")

    field = TextField(focused=True, validate=numeric)
    field.handle_key("7")
    assert field.error is None
    field.handle_key("x")
    assert field.value == "7x"
    assert field.error == "must be a number"
    field.handle_key("backspace")
    assert field.error is None


def test_field_view_shows_value_and_prompt():
    field = TextField(prompt="Name: ", value="abc")
    assert strip_styles(field.view()) == "Name: abc"
    field.focus()
    assert strip_styles(field.view()) == "Name: abc "