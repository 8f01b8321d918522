# chronicle_e2e/steps/advance_search_steps.py

from chronicle_e2e.core.logging_config import success
from chronicle_e2e.data.placeholders import replace_placeholders
from chronicle_e2e.page_objects.advance_search_page import HOME_URL

from .context import ScenarioContext


def on_home_page(context: ScenarioContext):
    """Given I am on the Chronicle home page"""
    context.advance_search_page.open_home()


def click_advanced_search_without_login(context: ScenarioContext):
    """When I click Advanced search button without login"""
    context.advance_search_page.click_advanced_search_button(public=True)


def select_cemetery(context: ScenarioContext, cemetery_name: str):
    """When I select cemetery {string} in advanced search"""
    cemetery_name = replace_placeholders(cemetery_name)
    context.advance_search_page.select_cemetery(cemetery_name)
    success(context.advance_search_page.logger, f"Cemetery {cemetery_name} selected")


def select_plot_tab(context: ScenarioContext):
    """When I select Plot tab in advanced search"""
    context.advance_search_page.select_plot_tab()


def select_section(context: ScenarioContext, section: str):
    """When I select section {string} in advanced search without login"""
    context.advance_search_page.select_section(replace_placeholders(section))


def select_row(context: ScenarioContext, row: str):
    """When I select row {string} in advanced search without login"""
    context.advance_search_page.select_row(replace_placeholders(row))


def enter_plot_number(context: ScenarioContext, number: str):
    """When I enter plot number {string} in advanced search without login"""
    context.advance_search_page.enter_plot_number(replace_placeholders(number), public=True)


def click_search(context: ScenarioContext):
    """When I click Search button in advanced search without login"""
    context.advance_search_page.click_search()


def should_be_on_results_page(context: ScenarioContext):
    """Then I should be navigated to advance search results page"""
    page = context.advance_search_page
    page.wait_for_url_contains("/search/advance", timeout=10)
    assert page.is_on_results_page(), f"Not on the results page: {context.driver.current_url}"
    assert page.has_results_information(), "Advance search results heading is not visible"


def should_see_results_information(context: ScenarioContext):
    """Then I should see search results information"""
    assert context.advance_search_page.has_results_information(), "Search results heading/subheading missing"


def should_see_plot_number(context: ScenarioContext, plot_number: str):
    """Then I should see plot number {string} in sidebar results"""
    plot_number = replace_placeholders(plot_number)
    text = context.advance_search_page.get_plot_detail_text()
    assert plot_number in text, f"Plot number {plot_number!r} not in sidebar text {text!r}"


def should_see_cemetery_name(context: ScenarioContext, cemetery_name: str):
    """Then I should see cemetery name {string} in sidebar results"""
    cemetery_name = replace_placeholders(cemetery_name)
    text = context.advance_search_page.get_cemetery_name()
    assert text == cemetery_name, f"Expected cemetery {cemetery_name!r}, sidebar shows {text!r}"


def click_close_advance_search(context: ScenarioContext):
    """When I click close advance search button"""
    context.advance_search_page.close_search()


def should_be_on_home_page(context: ScenarioContext):
    """Then I should be on the home page"""
    assert context.advance_search_page.is_on_home_page(), (
        f"Expected {HOME_URL}, at {context.driver.current_url}"
    )


def should_not_see_results_sidebar(context: ScenarioContext):
    """Then I should not see advance search results sidebar"""
    assert context.advance_search_page.is_results_sidebar_hidden(), "Advance search results sidebar still visible"


def search_plot_logged_in(context: ScenarioContext, cemetery_name: str, section: str, row: str, number: str):
    """When I search cemetery {string} section {string} row {string} plot number {string} in advanced search"""
    context.advance_search_page.search_plot(
        replace_placeholders(cemetery_name),
        replace_placeholders(section),
        replace_placeholders(row),
        replace_placeholders(number),
    )


def should_see_plot_in_results(context: ScenarioContext, plot_id: str):
    """Then I should see plot {string} in advanced search results"""
    context.advance_search_page.verify_search_results_contain(replace_placeholders(plot_id))


def click_plot_in_results(context: ScenarioContext, plot_id: str):
    """When I click plot {string} in advanced search results"""
    context.advance_search_page.click_plot_from_results(replace_placeholders(plot_id))


def should_see_plot_sidebar(context: ScenarioContext, plot_id: str):
    """Then I should see the plot sidebar for {string}"""
    context.advance_search_page.verify_plot_sidebar(replace_placeholders(plot_id))
