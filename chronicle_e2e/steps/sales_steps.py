# chronicle_e2e/steps/sales_steps.py

from dataclasses import replace
from typing import Optional

from chronicle_e2e.data.placeholders import replace_placeholders
from chronicle_e2e.data.test_data import SALES_DATA, SaleData

from .context import ScenarioContext


def _sale(context: ScenarioContext) -> SaleData:
    return context.data.setdefault("sale", SALES_DATA["default"])


def navigate_to_sales(context: ScenarioContext):
    """When I navigate to the sales page"""
    context.sales_page.navigate_to_sales()


def sales_table_loaded(context: ScenarioContext):
    """Then I should see the sales table"""
    context.sales_page.validate_sales_table_loaded()
    context.data["sales_count"] = context.sales_page.get_sales_count()


def click_create_sale(context: ScenarioContext):
    """When I click the create sale button"""
    context.sales_page.click_create_sale()


def fill_sale_form(context: ScenarioContext, reference: Optional[str] = None):
    """When I fill the sale form with valid data"""
    sale = _sale(context)
    if reference:
        sale = replace(sale, reference=replace_placeholders(reference))
        context.data["sale"] = sale
    context.sales_page.create_sale(sale)


def summary_should_match_expected(context: ScenarioContext):
    """Then the sale summary should show the expected amounts"""
    sale = _sale(context)
    if sale.expected_summary is None:
        raise ValueError(f"Sale {sale.reference} has no expected summary")
    context.sales_page.validate_sale_summary(sale.expected_summary)


def click_create(context: ScenarioContext):
    """When I create the sale"""
    context.sales_page.click_create()


def purchaser_should_be_in_table(context: ScenarioContext, name: Optional[str] = None):
    """Then I should see the purchaser in the first row of the sales table"""
    expected = replace_placeholders(name) if name else _sale(context).purchaser.full_name
    context.sales_page.validate_purchaser_in_table(expected)


def cancel_sale(context: ScenarioContext):
    """When I cancel the sale"""
    context.sales_page.click_cancel()
