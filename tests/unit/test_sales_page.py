# tests/unit/test_sales_page.py

import pytest
from unittest.mock import call

from selenium.common.exceptions import TimeoutException
from selenium.webdriver.common.keys import Keys

from chronicle_e2e.data.test_data import SaleData, SaleItem, SalePurchaser, SaleSummary
from chronicle_e2e.locators import sales_locators
from chronicle_e2e.page_objects import sales_page
from chronicle_e2e.page_objects.sales_page import SalesPage

pytestmark = pytest.mark.unit


@pytest.fixture
def page(mock_driver, no_sleep):
    return SalesPage(mock_driver)


def test_get_sales_count(page, mock_driver, make_element):
    mock_driver.find_elements.return_value = [make_element(), make_element(), make_element()]

    assert page.get_sales_count() == 3


def test_validate_sale_summary_passes_on_match(page, mock_driver, make_element):
    texts = ["Subtotal", "$1,000.00", "$100.00", "$90.00", "$990.00"]
    mock_driver.find_elements.return_value = [make_element(text) for text in texts]

    page.validate_sale_summary(SaleSummary("$1,000.00", "$100.00", "$90.00", "$990.00"))


def test_validate_sale_summary_fails_on_mismatch(page, mocker):
    mocker.patch.object(page, "get_sale_summary", return_value=SaleSummary(subtotal="$10.00", total="$10.00"))

    with pytest.raises(AssertionError, match="Sale summary mismatch"):
        page.validate_sale_summary(SaleSummary(subtotal="$20.00", total="$20.00"))


def test_add_new_purchaser_wraps_timeout(page, mocker):
    mocker.patch.object(page, "wait_until_visible", side_effect=TimeoutException("no dialog"))

    with pytest.raises(RuntimeError, match="Could not add purchaser: Sarah Connor"):
        page.add_new_purchaser("Sarah", "Connor", "sarah.connor@example.com")


def test_add_new_purchaser_fills_dialog(page, mocker):
    mocker.patch.object(page, "wait_until_visible")
    fill = mocker.patch.object(page, "fill_input")
    click = mocker.patch.object(page, "click_element")

    page.add_new_purchaser("Sarah", "Connor", "sarah.connor@example.com")

    assert fill.call_args_list == [
        call(sales_locators.PURCHASER_FIRST_NAME_INPUT, "Sarah", timeout=10),
        call(sales_locators.PURCHASER_LAST_NAME_INPUT, "Connor", timeout=10),
        call(sales_locators.PURCHASER_EMAIL_INPUT, "sarah.connor@example.com", timeout=10),
    ]
    click.assert_called_once_with(sales_locators.ADD_PERSON_BUTTON)


def test_select_item_raises_when_not_in_dropdown(page, mock_driver, mocker, make_element):
    mock_driver.find_elements.return_value = [make_element(), make_element(), make_element()]
    mocker.patch.object(page, "fill_input")
    mocker.patch.object(page, "_visible_options", return_value=[make_element("Interment fee")])
    escape = mocker.patch.object(page, "press_key")

    with pytest.raises(RuntimeError, match='Item "Plot" not found'):
        page._select_item(0, "Plot")
    escape.assert_called_once()


def test_fill_item_details_first_row_uses_dedicated_quantity_input(page, mock_driver, mocker, make_element):
    mocker.patch.object(page, "_select_item")
    select_plot = mocker.patch.object(page, "_select_plot")
    quantity = make_element()
    shared = [make_element() for _ in range(2)]
    mock_driver.find_element.return_value = quantity
    mock_driver.find_elements.return_value = shared

    page.fill_item_details(0, SaleItem(description="Plot", quantity=2, price="1000", discount="100"))

    quantity.send_keys.assert_called_once_with("2")
    shared[0].send_keys.assert_called_once_with("1000")
    shared[1].send_keys.assert_called_once_with("100")
    select_plot.assert_not_called()


def test_fill_item_details_second_row_uses_shared_inputs(page, mock_driver, mocker, make_element):
    mocker.patch.object(page, "_select_item")
    select_plot = mocker.patch.object(page, "_select_plot")
    shared = [make_element() for _ in range(5)]
    mock_driver.find_elements.return_value = shared

    page.fill_item_details(1, SaleItem(description="Plot", related_plot="B A 1", quantity=1, price=500,
                                       discount=0))

    select_plot.assert_called_once_with(1, "B A 1")
    shared[2].send_keys.assert_called_once_with("1")
    shared[3].send_keys.assert_called_once_with("500")
    shared[4].send_keys.assert_called_once_with("0")


def test_fill_item_details_selects_all_when_clear_is_ignored(page, mock_driver, mocker, make_element):
    # Arrange: the price input keeps its auto-filled value after clear()
    mocker.patch.object(page, "_select_item")
    quantity = make_element()
    price, discount = make_element(value="750"), make_element()
    mock_driver.find_element.return_value = quantity
    mock_driver.find_elements.return_value = [price, discount]

    # Act
    page.fill_item_details(0, SaleItem(description="Plot", quantity=1, price="1000", discount="100"))

    # Assert
    sent = [c.args for c in price.send_keys.call_args_list]
    assert sent == [(Keys.CONTROL, "a"), (Keys.BACKSPACE,), ("1000",)]
    discount.send_keys.assert_called_once_with("100")


def test_add_items_adds_a_row_per_extra_item(page, mocker):
    add_row = mocker.patch.object(page, "click_add_item")
    mocker.patch.object(page, "_row_ready", return_value=True)
    fill = mocker.patch.object(page, "fill_item_details")
    items = [SaleItem(description="Plot"), SaleItem(description="Interment fee")]

    page.add_items(items)

    add_row.assert_called_once()
    assert fill.call_args_list == [call(0, items[0]), call(1, items[1])]


def test_add_items_raises_when_row_never_appears(page, mocker):
    mocker.patch.object(page, "click_add_item")
    mocker.patch.object(page, "_row_ready", return_value=False)
    mocker.patch.object(page, "fill_item_details")
    mocker.patch.object(sales_page, "poll_until", return_value=False)

    with pytest.raises(RuntimeError, match="New item row 2"):
        page.add_items([SaleItem(description="Plot"), SaleItem(description="Plot")])


def test_validate_purchaser_in_table_accepts_truncated_name(page, mock_driver, mocker, make_element):
    mocker.patch.object(page, "wait_until_visible")
    mock_driver.find_elements.return_value = [make_element("INV-1"), make_element("01/01"),
                                              make_element("Linda Rodr...")]

    page.validate_purchaser_in_table("Linda Rodriguez")


def test_validate_purchaser_in_table_raises_on_mismatch(page, mock_driver, mocker, make_element):
    mocker.patch.object(page, "wait_until_visible")
    mock_driver.find_elements.return_value = [make_element("INV-1"), make_element("01/01"),
                                              make_element("John Doe")]

    with pytest.raises(RuntimeError, match="Purchaser name mismatch"):
        page.validate_purchaser_in_table("Sarah Connor")


def test_click_create_requires_button(page, mock_driver):
    mock_driver.find_elements.return_value = []

    with pytest.raises(RuntimeError, match="CREATE button not found"):
        page.click_create()


def test_click_create_confirms_dialog_and_waits_for_invoice(page, mock_driver, mocker, make_element):
    mock_driver.find_elements.return_value = [make_element("CREATE")]
    mocker.patch.object(page, "wait_until_visible")
    mocker.patch.object(page, "js_click")
    mocker.patch.object(page, "is_element_visible", return_value=True)
    click = mocker.patch.object(page, "click_element")
    mocker.patch.object(page, "wait_for_url_matches")
    mocker.patch.object(sales_page, "network_checkpoint", return_value=3.0)
    wait_api = mocker.patch.object(sales_page, "wait_for_api_endpoint", return_value=True)

    page.click_create()

    click.assert_called_once_with(sales_locators.DIALOG_CREATE_BUTTON, timeout=5)
    assert wait_api.call_args_list[0] == call(mock_driver, sales_locators.INVOICES_API, timeout=30, since=3.0)


def test_create_sale_fills_form_without_submitting(page, mocker):
    names = ("fill_reference", "fill_issue_date", "fill_due_date", "fill_note", "select_owner",
             "click_add_purchaser", "add_new_purchaser", "add_items", "click_create")
    mocks = {name: mocker.patch.object(page, name) for name in names}
    sale = SaleData(reference="AUTO-1", note="note", purchaser=SalePurchaser("Sarah", "Connor", "s@example.com"),
                    items=[SaleItem(description="Plot")])

    page.create_sale(sale)

    mocks["fill_reference"].assert_called_once_with("AUTO-1")
    mocks["fill_issue_date"].assert_not_called()
    mocks["select_owner"].assert_called_once_with(None)
    mocks["add_new_purchaser"].assert_called_once_with("Sarah", "Connor", "s@example.com")
    mocks["add_items"].assert_called_once_with(sale.items)
    mocks["click_create"].assert_not_called()
