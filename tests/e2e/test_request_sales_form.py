# tests/e2e/test_request_sales_form.py

import pytest

from chronicle_e2e.data.test_data import REQUEST_SALES_FORM_DATA
from chronicle_e2e.steps import request_sales_form_steps as steps

pytestmark = pytest.mark.e2e


@pytest.fixture
def purchasable_plot(context):
    """On the public details page of a for-sale plot that offers Request to Buy."""
    steps.on_sell_plots_page(context, REQUEST_SALES_FORM_DATA["cemetery"]["name"])
    steps.expand_first_section(context)
    steps.find_plot_with_purchase_option(context)
    steps.should_see_request_to_buy(context)
    return context.data["selected_plot"]


def _complete_form(context, with_interment_details):
    steps.continue_description(context)
    steps.fill_roi_applicant(context)
    steps.continue_roi_applicant(context)
    if with_interment_details:
        steps.fill_interment_details(context)
        steps.continue_interment_details(context)
    steps.fill_roi(context)
    steps.continue_roi(context)
    steps.agree_to_terms(context)
    steps.continue_terms(context)
    steps.add_signature(context)
    steps.continue_signature(context)


def test_pre_need_purchase_request(context, purchasable_plot):
    """
    A visitor requests a pre-need purchase of a for-sale plot and gets a
    confirmation for that plot.
    """
    # --- Act ---
    steps.click_request_to_buy(context)
    steps.select_pre_need(context)
    steps.should_be_on_request_form(context)
    steps.plot_should_match_on_form(context)
    _complete_form(context, with_interment_details=False)
    steps.submit_request(context)

    # --- Assert ---
    steps.should_see_confirmation_dialog(context)
    steps.request_should_be_sent(context)


def test_at_need_purchase_request(context, purchasable_plot):
    steps.click_request_to_buy(context)
    steps.select_at_need(context)
    steps.should_be_on_request_form(context)
    steps.plot_should_match_on_form(context)
    _complete_form(context, with_interment_details=True)
    steps.submit_request(context)

    steps.should_see_confirmation_dialog(context)
    steps.request_should_be_sent(context)
