"""BDD tests for menu publication."""

from pytest_bdd import parsers, scenarios, then, when
from shop.menu.errors import MenuError
from shop.menu.events import MenuOpened

scenarios("features/menu_publication.feature")


# ---------------------------------------------------------------------------
# When steps
# ---------------------------------------------------------------------------
@when("the menu is opened")
def open_menu(menu, error):
    try:
        menu.open()
    except MenuError as exc:
        error["exc"] = exc


@when(parsers.cfparse('the option group "{name}" is removed'))
def remove_group(menu, name, error):
    group = next(g for g in menu.option_groups if g.name == name)
    try:
        menu.remove_option_group(group.id)
    except MenuError as exc:
        error["exc"] = exc


# ---------------------------------------------------------------------------
# Then steps
# ---------------------------------------------------------------------------
@then("the menu is open")
def menu_open(menu):
    assert menu.is_open is True


@then("the menu is still a draft")
def menu_draft(menu):
    assert menu.is_open is False


@then("a MenuOpened event is raised")
def menu_opened_raised(menu):
    assert any(isinstance(e, MenuOpened) for e in menu._events)
