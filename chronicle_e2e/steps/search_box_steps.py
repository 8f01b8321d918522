# chronicle_e2e/steps/search_box_steps.py

from chronicle_e2e.data.placeholders import replace_placeholders

from .context import ScenarioContext


def select_cemetery_for_public_search(context: ScenarioContext, cemetery_name: str):
    """When I select cemetery {string} for public search"""
    context.search_page.select_cemetery_for_public_search(replace_placeholders(cemetery_name))


def search_without_login(context: ScenarioContext, query: str):
    """When I search for {string} in global search without login"""
    query = replace_placeholders(query)
    context.search_page.search_global(query, logged_in=False)
    context.data["search_query"] = query


def should_see_privacy_message(context: ScenarioContext, message: str):
    """Then I should see {string} message indicating privacy protection"""
    assert context.search_page.is_message_visible(message), f'"{message}" message not shown'


def search_logged_in(context: ScenarioContext, query: str):
    """When I search for {string} in global search"""
    query = replace_placeholders(query)
    context.search_page.search_global(query, logged_in=True)
    context.data["search_query"] = query


def should_see_result_with_plot(context: ScenarioContext, plot_name: str):
    """Then I should see search result with plot {string}"""
    plot_name = replace_placeholders(plot_name)
    assert context.search_page.result_has_roi_holder(plot_name), (
        f"No search result with plot {plot_name} and the ROI Holder role"
    )
    context.data["selected_plot"] = plot_name


def click_search_result_plot(context: ScenarioContext, plot_name: str):
    """When I click on search result plot {string}"""
    context.search_page.open_result_roi_tab(replace_placeholders(plot_name))
