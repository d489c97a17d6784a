import uuid

from streamlit.testing.v1 import AppTest


TABS_ID = uuid.UUID(int=1)
LINES_KEY = "bundle_form:new:products"
ADD_KEY = "bundle_form_new_products_add"
ROW_QTY_KEY = f"bundle_form_new_products_qty_{TABS_ID}"


def _lines_app():
    import uuid
    from decimal import Decimal
    from types import SimpleNamespace

    from components.catalog.bundle_form import _render_lines

    tabs = SimpleNamespace(id=uuid.UUID(int=1), name="Chlorine Tablets", price=Decimal("10.00"))
    _render_lines("new", "products", {tabs.id: tabs})


def _quantities(at):
    return [line.quantity for line in at.session_state[LINES_KEY]]


def test_adding_existing_item_raises_its_quantity():
    at = AppTest.from_function(_lines_app).run()

    at.button(key=ADD_KEY).click().run()
    assert _quantities(at) == [1]

    at.button(key=ADD_KEY).click().run()
    assert not at.exception
    assert _quantities(at) == [2]
    assert at.number_input(key=ROW_QTY_KEY).value == 2

    at.run()
    assert _quantities(at) == [2]


def test_row_quantity_edit_is_kept():
    at = AppTest.from_function(_lines_app).run()
    at.button(key=ADD_KEY).click().run()

    at.number_input(key=ROW_QTY_KEY).set_value(4).run()

    assert _quantities(at) == [4]


def test_remove_then_add_starts_from_one():
    at = AppTest.from_function(_lines_app).run()
    at.button(key=ADD_KEY).click().run()
    at.button(key=ADD_KEY).click().run()

    at.button(key=f"bundle_form_new_products_remove_{TABS_ID}").click().run()
    assert _quantities(at) == []

    at.button(key=ADD_KEY).click().run()
    assert _quantities(at) == [1]
    assert at.number_input(key=ROW_QTY_KEY).value == 1
