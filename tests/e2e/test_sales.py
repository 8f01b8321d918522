# tests/e2e/test_sales.py

import pytest

from chronicle_e2e.steps import login_steps, sales_steps

pytestmark = pytest.mark.e2e


@pytest.fixture
def sales_page(context):
    """Logged in, with the sales invoice table loaded."""
    login_steps.logged_in_as_default_user(context)
    sales_steps.navigate_to_sales(context)
    sales_steps.sales_table_loaded(context)


def test_create_sale_invoice(context, sales_page):
    """
    Creates an invoice for a new purchaser, checks the expected summary before
    submitting and finds the purchaser on top of the sales table afterwards.
    """
    # --- Act ---
    sales_steps.click_create_sale(context)
    sales_steps.fill_sale_form(context)

    # --- Assert ---
    sales_steps.summary_should_match_expected(context)

    # --- Act 2: Submit ---
    sales_steps.click_create(context)

    sales_steps.purchaser_should_be_in_table(context)


def test_cancel_sale_keeps_table(context, sales_page):
    # --- Arrange ---
    sales_steps.click_create_sale(context)
    sales_steps.fill_sale_form(context, reference="AUTO-SALE-CANCELLED")

    # --- Act ---
    sales_steps.cancel_sale(context)

    # --- Assert ---
    sales_steps.sales_table_loaded(context)
