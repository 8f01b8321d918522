# chronicle_e2e/steps/request_sales_form_steps.py

import logging

from chronicle_e2e.data.test_data import REQUEST_SALES_FORM_DATA

from .context import ScenarioContext

logger = logging.getLogger(__name__)


def on_sell_plots_page(context: ScenarioContext, cemetery_name: str):
    """Given I am on the sell plots page for {string}"""
    # The URL comes from the data set; the name only documents the scenario
    logger.info(f"Opening sell plots page for {cemetery_name}")
    context.request_sales_form_page.navigate_to_sell_plots_page()


def expand_first_section(context: ScenarioContext):
    """When I expand the first section in sell plots page"""
    context.request_sales_form_page.expand_section(REQUEST_SALES_FORM_DATA["plot"]["section"])


def find_plot_with_purchase_option(context: ScenarioContext):
    """When I find a plot with purchase option available"""
    context.data["selected_plot"] = context.request_sales_form_page.find_plot_with_purchase_option()


def should_see_request_to_buy(context: ScenarioContext):
    """Then I should see a Request to Buy button on the plot details page"""
    assert context.request_sales_form_page.verify_request_to_buy_button_visible(), "Request to Buy button not shown"


def click_request_to_buy(context: ScenarioContext):
    """When I click the Request to Buy button"""
    context.request_sales_form_page.click_request_to_buy(context.data.get("selected_plot"))


def select_pre_need(context: ScenarioContext):
    """When I select Pre-need plot purchase option"""
    context.request_sales_form_page.select_pre_need_purchase()


def select_at_need(context: ScenarioContext):
    """When I select At-need plot purchase option"""
    context.request_sales_form_page.select_at_need_purchase()


def should_be_on_request_form(context: ScenarioContext):
    """Then I should be on the request form page"""
    assert context.request_sales_form_page.is_on_request_form(), (
        f"Not on a purchase form: {context.driver.current_url}"
    )


def plot_should_match_on_form(context: ScenarioContext):
    """Then the plot name and cemetery should match on the form"""
    context.request_sales_form_page.validate_form_summary(context.data["selected_plot"])


def continue_description(context: ScenarioContext):
    """When I continue from the description section"""
    context.request_sales_form_page.continue_description_section()


def fill_roi_applicant(context: ScenarioContext):
    """When I fill the ROI Applicant form with valid data"""
    context.request_sales_form_page.fill_roi_applicant_form()


def continue_roi_applicant(context: ScenarioContext):
    """When I continue from the ROI Applicant section"""
    context.request_sales_form_page.continue_roi_applicant_section()


def fill_interment_details(context: ScenarioContext):
    """When I fill the At-need Interment Details form with valid data"""
    context.request_sales_form_page.fill_interment_details_form()


def continue_interment_details(context: ScenarioContext):
    """When I continue from the Interment Details section"""
    context.request_sales_form_page.continue_interment_details_section()


def fill_roi(context: ScenarioContext):
    """When I fill the ROI form with valid data"""
    context.request_sales_form_page.fill_roi_form()


def continue_roi(context: ScenarioContext):
    """When I continue from the ROI section"""
    context.request_sales_form_page.continue_roi_section()


def agree_to_terms(context: ScenarioContext):
    """When I agree to the terms and conditions"""
    context.request_sales_form_page.agree_to_terms()


def continue_terms(context: ScenarioContext):
    """When I continue from the terms section"""
    context.request_sales_form_page.continue_terms_section()


def add_signature(context: ScenarioContext):
    """When I add a signature"""
    context.request_sales_form_page.add_signature()


def continue_signature(context: ScenarioContext):
    """When I continue from the signature section"""
    context.request_sales_form_page.continue_signature_section()


def submit_request(context: ScenarioContext):
    """When I submit the request form"""
    context.request_sales_form_page.submit_request()


def should_see_confirmation_dialog(context: ScenarioContext):
    """Then I should see a confirmation dialog"""
    assert context.request_sales_form_page.verify_confirmation_dialog(), "Confirmation dialog not shown"


def request_should_be_sent(context: ScenarioContext):
    """Then the confirmation should show that the request was sent successfully"""
    assert context.request_sales_form_page.verify_success_message(), '"Request was sent" message not shown'
