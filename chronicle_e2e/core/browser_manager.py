# chronicle_e2e/core/browser_manager.py

import logging
import re
from datetime import datetime
from typing import Optional

from selenium import webdriver
from selenium.common.exceptions import WebDriverException
from selenium.webdriver.chrome.service import Service as ChromeService
from selenium.webdriver.firefox.service import Service as FirefoxService
from selenium.webdriver.remote.webdriver import WebDriver
from webdriver_manager.chrome import ChromeDriverManager
from webdriver_manager.firefox import GeckoDriverManager

from chronicle_e2e.config import config

logger = logging.getLogger(__name__)


def sanitize_name(name: Optional[str], max_length: int = 50) -> str:
    """Makes a scenario name safe for file names."""
    if not name:
        return "test"
    return re.sub(r"[^a-zA-Z0-9]", "_", name)[:max_length]


def timestamp() -> str:
    return datetime.now().strftime("%Y-%m-%dT%H-%M-%S")


class BrowserManager:
    """
    Process-wide owner of the WebDriver.

    The browser is launched once and reused; every scenario gets a clean
    session (cookies and web storage wiped) instead of a new browser.
    """

    _instance: Optional["BrowserManager"] = None

    def __init__(self):
        self.driver: Optional[WebDriver] = None
        self.session_name: Optional[str] = None

    @classmethod
    def get_instance(cls) -> "BrowserManager":
        if cls._instance is None:
            cls._instance = cls()
        return cls._instance

    def _launch(self) -> WebDriver:
        browser = config.BROWSER
        logger.info(f"Launching WebDriver for browser: {browser} (headless={config.HEADLESS})")

        if browser in ("chrome", "chromium"):
            options = webdriver.ChromeOptions()
            options.add_argument("--start-maximized")
            options.add_argument(f"--window-size={config.WINDOW_WIDTH},{config.WINDOW_HEIGHT}")
            if config.HEADLESS:
                options.add_argument("--headless=new")
                options.add_argument("--no-sandbox")
                options.add_argument("--disable-dev-shm-usage")
            service = ChromeService(ChromeDriverManager().install())
            driver = webdriver.Chrome(service=service, options=options)
        elif browser == "firefox":
            options = webdriver.FirefoxOptions()
            if config.HEADLESS:
                options.add_argument("-headless")
            service = FirefoxService(GeckoDriverManager().install())
            driver = webdriver.Firefox(service=service, options=options)
        else:
            raise ValueError(f"Unsupported browser: {browser}")

        driver.implicitly_wait(config.IMPLICIT_WAIT)
        driver.set_page_load_timeout(config.WAIT_FOR_PAGE_LOAD * 2)
        driver.set_window_size(config.WINDOW_WIDTH, config.WINDOW_HEIGHT)
        return driver

    def initialize_browser(self, scenario_name: Optional[str] = None) -> WebDriver:
        """Starts the browser if needed and opens a fresh session for the scenario."""
        if self.driver is None:
            self.driver = self._launch()
        else:
            self.close_context()

        self.session_name = f"{sanitize_name(scenario_name)}_{timestamp()}"
        logger.info(f"New browser session: {self.session_name}")
        return self.driver

    def create_page(self, scenario_name: Optional[str] = None) -> WebDriver:
        if self.driver is None or self.session_name is None:
            return self.initialize_browser(scenario_name)
        return self.driver

    def close_context(self):
        """Drops cookies and storage so the next scenario starts logged out."""
        if self.driver is None:
            return
        try:
            self.driver.execute_script("window.localStorage.clear(); window.sessionStorage.clear();")
        except WebDriverException as e:
            # about:blank and error pages have no storage
            logger.debug(f"Could not clear web storage: {e.msg}")
        self.driver.delete_all_cookies()
        self.driver.get("about:blank")
        self.session_name = None

    def close_browser(self):
        if self.driver is None:
            return
        logger.info("Quitting WebDriver.")
        try:
            self.driver.quit()
        finally:
            self.driver = None
            self.session_name = None
