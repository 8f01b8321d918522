# chronicle_e2e/steps/context.py

from typing import Any, Dict

from selenium.webdriver.remote.webdriver import WebDriver

from chronicle_e2e.page_objects.advance_search_page import AdvanceSearchPage
from chronicle_e2e.page_objects.interment_page import IntermentPage
from chronicle_e2e.page_objects.login_page import LoginPage
from chronicle_e2e.page_objects.person_page import PersonPage
from chronicle_e2e.page_objects.plot_page import PlotPage
from chronicle_e2e.page_objects.request_sales_form_page import RequestSalesFormPage
from chronicle_e2e.page_objects.roi_page import RoiPage
from chronicle_e2e.page_objects.sales_page import SalesPage
from chronicle_e2e.page_objects.search_page import SearchPage


class ScenarioContext:
    """
    State shared by the steps of one scenario.

    Holds the driver, a free-form `data` dict for values one step hands to a
    later one (the selected plot, a generated name) and one lazily created
    instance of each page object.
    """

    _PAGES = {
        "login_page": LoginPage,
        "search_page": SearchPage,
        "advance_search_page": AdvanceSearchPage,
        "plot_page": PlotPage,
        "roi_page": RoiPage,
        "interment_page": IntermentPage,
        "person_page": PersonPage,
        "request_sales_form_page": RequestSalesFormPage,
        "sales_page": SalesPage,
    }

    def __init__(self, driver: WebDriver, name: str = ""):
        self.driver = driver
        self.name = name
        self.data: Dict[str, Any] = {}
        self._pages: Dict[str, Any] = {}

    def __getattr__(self, attribute: str):
        page_class = ScenarioContext._PAGES.get(attribute)
        if page_class is None:
            raise AttributeError(f"{type(self).__name__} has no attribute {attribute!r}")
        page = self._pages.get(attribute)
        if page is None:
            page = self._pages[attribute] = page_class(self.driver)
        return page
