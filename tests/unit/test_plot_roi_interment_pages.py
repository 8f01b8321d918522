# tests/unit/test_plot_roi_interment_pages.py

import logging

import pytest
from unittest.mock import call

from selenium.common.exceptions import NoSuchElementException, TimeoutException, WebDriverException

from chronicle_e2e.config.config import BASE_URL
from chronicle_e2e.data.test_data import IntermentData, RoiData
from chronicle_e2e.locators import interment_locators, roi_locators
from chronicle_e2e.page_objects import base_page, plot_page
from chronicle_e2e.page_objects.interment_page import IntermentPage
from chronicle_e2e.page_objects.plot_page import PlotPage
from chronicle_e2e.page_objects.roi_page import RoiPage

pytestmark = pytest.mark.unit


# --- PlotPage ---

def test_get_first_vacant_plot_name(mock_driver, no_sleep):
    mock_driver.execute_script.return_value = ["B A 2 Vacant", "B A 5 Vacant"]

    assert PlotPage(mock_driver).get_first_vacant_plot_name() == "B A 2"


def test_get_first_vacant_plot_name_raises_without_vacant_plots(mock_driver, no_sleep):
    mock_driver.execute_script.return_value = []

    with pytest.raises(RuntimeError, match="No vacant plots found"):
        PlotPage(mock_driver).get_first_vacant_plot_name()


def test_select_plot_falls_back_to_next_locator(mock_driver, no_sleep, mocker):
    page = PlotPage(mock_driver)
    click = mocker.patch.object(page, "click_element", side_effect=[TimeoutException("no exact"), None])
    mocker.patch.object(page, "wait_for_url_contains")

    page.select_plot("B A 1")

    assert click.call_count == 2


def test_select_plot_raises_when_no_locator_matches(mock_driver, no_sleep, mocker):
    page = PlotPage(mock_driver)
    mocker.patch.object(page, "click_element", side_effect=WebDriverException("nothing"))

    with pytest.raises(RuntimeError, match="Plot B A 1 not found"):
        page.select_plot("B A 1")


def test_navigate_to_add_roi(mock_driver, no_sleep, mocker):
    navigate = mocker.patch.object(plot_page, "navigate_safely")

    PlotPage(mock_driver).navigate_to_add_roi("B A 1")

    navigate.assert_called_once_with(mock_driver, plot_page.add_roi_url("B A 1"))
    assert navigate.call_args.args[1].startswith(f"{BASE_URL}/customer-organization/")


@pytest.mark.parametrize("shown, expected, verified", [
    ("RESERVED", "Reserved", True),
    ("Vacant", "Reserved", False),
])
def test_verify_status_changed_ignores_case(mock_driver, mocker, shown, expected, verified):
    page = PlotPage(mock_driver)
    mocker.patch.object(page, "get_plot_status", return_value=shown)

    assert page.verify_status_changed(expected) is verified


# --- RoiPage ---

@pytest.fixture
def roi_page(mock_driver, no_sleep, mocker):
    page = RoiPage(mock_driver)
    mocker.patch.object(page, "click_roi_tab")
    return page


def _name_element(make_element, card_text):
    element = make_element()
    element.find_element.return_value = make_element(card_text)
    return element


def test_verify_roi_person_requires_matching_label(roi_page, mock_driver, make_element):
    mock_driver.find_elements.return_value = [_name_element(make_element, "John Doe\nROI HOLDER")]

    assert roi_page.verify_roi_person("John Doe", "holder") is True
    assert roi_page.verify_roi_person("John Doe", "applicant") is False


def test_verify_roi_person_false_when_name_missing(roi_page, mock_driver):
    mock_driver.find_elements.return_value = []

    assert roi_page.verify_roi_person("John Doe", "holder") is False


def test_verify_roi_holder_and_applicant(roi_page, mocker):
    mocker.patch.object(roi_page, "verify_roi_person", side_effect=[True, False])

    assert roi_page.verify_roi_holder_and_applicant("John Doe", "Jane Smith") is False


def test_fill_first_available_falls_back_without_error_logs(roi_page, mocker, caplog):
    # Arrange: the id-based field is not rendered, the label-based one is
    mocker.patch.object(base_page, "WebDriverWait").return_value.until.side_effect = [
        TimeoutException("hidden"), True,
    ]
    fill = mocker.patch.object(roi_page, "fill_input")

    # Act
    with caplog.at_level(logging.DEBUG):
        roi_page._fill_first_available((roi_locators.FEE_INPUT, roi_locators.FEE_INPUT_BY_LABEL), "1000")

    # Assert
    fill.assert_called_once_with(roi_locators.FEE_INPUT_BY_LABEL, "1000", timeout=5)
    assert not [record for record in caplog.records if record.levelno >= logging.ERROR]


def test_fill_first_available_raises_when_no_field_visible(roi_page, mocker):
    mocker.patch.object(roi_page, "is_element_visible", return_value=False)
    fill = mocker.patch.object(roi_page, "fill_input")

    with pytest.raises(NoSuchElementException, match="1000"):
        roi_page._fill_first_available((roi_locators.FEE_INPUT, roi_locators.FEE_INPUT_BY_LABEL), "1000")

    fill.assert_not_called()


def test_select_nth_raises_when_dropdown_missing(roi_page, mock_driver):
    mock_driver.find_elements.return_value = []

    with pytest.raises(RuntimeError, match="Expected at least 2 dropdowns"):
        roi_page._select_nth(1, "25 Years")


def test_verify_fee_in_form_reads_first_available_field(roi_page, mocker):
    mocker.patch.object(roi_page, "is_element_visible", side_effect=[False, True])
    read = mocker.patch.object(roi_page, "get_input_value", return_value="1000")

    assert roi_page.verify_fee_in_form("1000") is True
    read.assert_called_once_with(roi_locators.FEE_INPUT_BY_LABEL, timeout=3)


def test_verify_notes_in_form_strips_value(roi_page, mocker):
    mocker.patch.object(roi_page, "is_element_visible", return_value=True)
    mocker.patch.object(roi_page, "get_input_value", return_value=" Test ROI for automation \n")

    assert roi_page.verify_notes_in_form("Test ROI for automation") is True


def test_fill_roi_form_selects_right_type_and_term(roi_page, mocker):
    mocker.patch.object(roi_page, "wait_until_visible")
    select = mocker.patch.object(roi_page, "_select_nth")
    mocker.patch.object(roi_page, "_fill_first_available")
    mocker.patch.object(roi_page, "fill_input")

    roi_page.fill_roi_form(RoiData(right_type="Cremation", term_of_right="25 Years", fee="1000"))

    selected = [c.args[1] for c in select.call_args_list]
    assert selected[:2] == ["Cremation", "25 Years"]


# --- IntermentPage ---

@pytest.fixture
def interment_page(mock_driver, no_sleep):
    return IntermentPage(mock_driver)


def test_click_add_interment_raises_off_manage_page(interment_page, mock_driver, mocker):
    mocker.patch.object(interment_page, "wait_until_visible")
    mocker.patch.object(interment_page, "wait_for_url_contains", side_effect=TimeoutException("slow"))
    mock_driver.current_url = f"{BASE_URL}/customer-organization/Astana_Tegal_Gundul"

    with pytest.raises(RuntimeError, match="Failed to navigate to Add Interment form"):
        interment_page.click_add_interment()


def test_fill_interment_form_fills_optional_fields(interment_page, mocker):
    mocker.patch.object(interment_page, "click_element")
    fill = mocker.patch.object(interment_page, "fill_input")
    select_type = mocker.patch.object(interment_page, "select_interment_type")
    data = IntermentData(first_name="John", last_name="Doe", interment_type="Burial")

    interment_page.fill_interment_form(data, {"occupation": "Teacher", "interment_depth": "6", "unknown": "x"})

    filled = {c.args[0]: c.args[1] for c in fill.call_args_list}
    assert filled[interment_locators.OCCUPATION] == "Teacher"
    assert filled[interment_locators.INTERMENT_DEPTH] == "6"
    assert "x" not in filled.values()
    select_type.assert_called_once_with("Burial")


def test_update_interment_form_clears_middle_name_when_renaming(interment_page, mocker):
    mocker.patch.object(interment_page, "click_element")
    fill = mocker.patch.object(interment_page, "_fill_focused")

    interment_page.update_interment_form(first_name="Jane", last_name="Smith", middle_name="Ann")

    assert fill.call_args_list == [
        call(interment_locators.FIRST_NAME, "Jane"),
        call(interment_locators.LAST_NAME, "Smith"),
        call(interment_locators.MIDDLE_NAME, ""),
    ]
