# tests/e2e/test_advance_search.py

import pytest

from chronicle_e2e.steps import advance_search_steps as steps
from chronicle_e2e.steps import login_steps

pytestmark = pytest.mark.e2e


def _search_plot(context, section, row, number):
    steps.on_home_page(context)
    steps.click_advanced_search_without_login(context)
    steps.select_cemetery(context, "<TEST_CEMETERY>")
    steps.select_plot_tab(context)
    steps.select_section(context, section)
    steps.select_row(context, row)
    steps.enter_plot_number(context, number)
    steps.click_search(context)


@pytest.mark.parametrize("section, row, number, plot", [
    ("<TEST_SECTION>", "<TEST_ROW>", "<TEST_NUMBER>", "<TEST_SECTION> <TEST_ROW> <TEST_NUMBER>"),
    ("B", "A", "1", "B A 1"),
])
def test_public_advanced_plot_search(context, section, row, number, plot):
    """
    Searches a plot by section, row and number without logging in and checks
    the sidebar shows the plot and its cemetery.
    """
    # --- Act ---
    _search_plot(context, section, row, number)

    # --- Assert ---
    steps.should_be_on_results_page(context)
    steps.should_see_results_information(context)
    steps.should_see_plot_number(context, plot)
    steps.should_see_cemetery_name(context, "<TEST_CEMETERY>")


def test_close_advanced_search_returns_home(context):
    _search_plot(context, "<TEST_SECTION>", "<TEST_ROW>", "<TEST_NUMBER>")
    steps.should_be_on_results_page(context)

    steps.click_close_advance_search(context)

    steps.should_be_on_home_page(context)
    steps.should_not_see_results_sidebar(context)


def test_logged_in_search_opens_plot(context):
    """Logged-in users can open a plot from the advanced search results."""
    # --- Arrange ---
    login_steps.logged_in_as_default_user(context)

    # --- Act ---
    steps.search_plot_logged_in(context, "<TEST_CEMETERY>", "<TEST_SECTION>", "<TEST_ROW>", "<TEST_NUMBER>")
    steps.should_see_plot_in_results(context, "<TEST_SECTION> <TEST_ROW> <TEST_NUMBER>")
    steps.click_plot_in_results(context, "<TEST_SECTION> <TEST_ROW> <TEST_NUMBER>")

    # --- Assert ---
    steps.should_see_plot_sidebar(context, "<TEST_SECTION> <TEST_ROW> <TEST_NUMBER>")
